"""Settings as seen by the HTTP layer.

Routes depend on ``get_api_settings`` rather than on ``get_settings``
directly, so a test can swap the whole configuration through
``app.dependency_overrides``.
"""

from ecobazaar_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    return get_settings()
