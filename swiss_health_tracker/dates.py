from __future__ import annotations

from datetime import date, datetime

DateLike = date | str


def parse_date(value: DateLike) -> date:
    """Accept a date, datetime or ISO string and return the calendar date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def to_date_key(value: DateLike) -> str:
    """Return the ISO ``YYYY-MM-DD`` key used in the persisted maps."""

    return parse_date(value).isoformat()


__all__ = ["DateLike", "parse_date", "to_date_key"]
