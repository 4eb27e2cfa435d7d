"""Shared domain components."""

from ecobazaar.domain.shared.time import utc_now

__all__ = [
    "utc_now",
]
