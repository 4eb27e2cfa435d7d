"""Clock helpers. Every timestamp in the domain is UTC and tz-aware."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to a naive ``moment``; aware values pass through.

    SQLite hands back naive datetimes even for ``timezone=True`` columns.
    """
    if moment.tzinfo is not None:
        return moment
    return moment.replace(tzinfo=timezone.utc)
