import datetime
from typing import Callable, Union

from dateutil.parser import parse

DateFormat = Union[str, Callable[[datetime.date], str]]


def parse_date(value: Union[str, datetime.date]) -> datetime.date:
    """
    Coerce a date-like value into a :class:`datetime.date`.

    :param value: a date, a datetime (its date part is kept) or a string dateutil can parse
    :return the calendar date
    :raises ValueError: if a string cannot be interpreted as a date
    """
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return parse(value).date()
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Cannot interpret {value!r} as a date") from e
    raise TypeError(f"Expected a date or a string but got {type(value).__name__}")


def format_date(value: datetime.date, date_format: DateFormat) -> str:
    """
    Render a date with either a strftime pattern or a formatting callable.
    """
    if callable(date_format):
        return date_format(value)
    return value.strftime(date_format)
