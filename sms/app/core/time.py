"""Date helpers for entity defaults."""

from datetime import date


def today() -> date:
    """Return the local calendar date used to stamp new records."""
    return date.today()
