"""Calendar period bucketing for KPI aggregation."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Union

from ..exceptions import ParseError

GRANULARITIES = ("month", "year")
DATE_FORMAT = "%Y-%m-%d"

DateLike = Union[str, date, datetime]


@dataclass(frozen=True)
class Period:
    """A calendar bucket: sortable integer key, UTC start instant and label."""

    key: int
    start: datetime
    label: str


def parse_date(value: DateLike) -> date:
    """
    Parse an API date.

    Args:
        value: ``YYYY-MM-DD`` string, ``date`` or ``datetime``

    Returns:
        The calendar date (datetimes are converted to UTC first)

    Raises:
        ParseError: if a string does not match ``YYYY-MM-DD``
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ParseError(value) from e


def get_period(value: DateLike, granularity: str) -> Period:
    """
    Map a date onto its month or year bucket.

    Month keys are ``year * 100 + month`` (201603), year keys are the year
    itself, so keys always increase with time.
    """
    day = parse_date(value)
    if granularity == "month":
        return Period(
            key=day.year * 100 + day.month,
            start=datetime(day.year, day.month, 1, tzinfo=timezone.utc),
            label=f"{day.year}-{day.month:02d}",
        )
    elif granularity == "year":
        return Period(
            key=day.year,
            start=datetime(day.year, 1, 1, tzinfo=timezone.utc),
            label=f"{day.year}",
        )
    else:
        raise ValueError(f"Unknown granularity: {granularity}")
