"""Coercion helpers for the datetime rule family."""

import typing
from datetime import date, datetime

import dateutil.parser  # type: ignore[import-untyped]


def as_datetime(value: typing.Any) -> date | datetime:
    """Return value as a date or datetime.

    Date and datetime values pass through unchanged; strings are parsed with
    dateutil.

    Args:
        value: The value to coerce

    Returns:
        The value as a date or datetime

    Raises:
        TypeError: If value is neither a date nor a string
        dateutil.parser.ParserError: If a string cannot be parsed
    """
    if isinstance(value, (date, datetime)):
        return value
    if isinstance(value, str):
        return dateutil.parser.parse(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a datetime")


def comparable_datetimes(
    left: date | datetime, right: date | datetime
) -> tuple[date | datetime, date | datetime]:
    """Align a date and a datetime so they can be compared.

    A plain date is widened to midnight when the other side is a datetime.
    A naive datetime compared with an aware one takes the aware side's tzinfo.
    """
    if isinstance(left, datetime) and not isinstance(right, datetime):
        right = datetime(right.year, right.month, right.day, tzinfo=left.tzinfo)
    elif isinstance(right, datetime) and not isinstance(left, datetime):
        left = datetime(left.year, left.month, left.day, tzinfo=right.tzinfo)
    elif isinstance(left, datetime) and isinstance(right, datetime):
        if left.tzinfo is None and right.tzinfo is not None:
            left = left.replace(tzinfo=right.tzinfo)
        elif right.tzinfo is None and left.tzinfo is not None:
            right = right.replace(tzinfo=left.tzinfo)
    return left, right


def try_datetime(value: typing.Any) -> date | datetime | None:
    """Coerce value with :func:`as_datetime`, returning None if it cannot be read.

    An unreadable string in an entity is a domain failure, not a fault.
    """
    try:
        return as_datetime(value)
    except (TypeError, ValueError, OverflowError):
        return None
