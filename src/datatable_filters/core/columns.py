"""
Column descriptors supplied by the table configuration.

A descriptor tells a filter how to read a value out of a row item and, for
date and dropdown columns, how to render a value for display. Filters only
hold a reference to a descriptor; they never modify it.
"""
import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

from datatable_filters.app.config import DEFAULT_DATE_FORMAT
from datatable_filters.util.dates import DateFormat, format_date

T = TypeVar("T")
S = TypeVar("S")


class ColumnKind(Enum):
    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    DATE = "date"
    DROPDOWN = "dropdown"


@dataclass(frozen=True)
class ColumnSpec(Generic[T, S]):
    """
    Base descriptor: a header name plus a selector extracting the column value from an item.

    Parameters
    ----------
    header_name : str
        Column header, used as the subject of filter labels
    value_selector : Callable[[T], S]
        Function returning this column's value for a row item
    """

    kind: ClassVar[Optional[ColumnKind]] = None

    header_name: str
    value_selector: Callable[[T], S]

    def value(self, item: T) -> S:
        return self.value_selector(item)


@dataclass(frozen=True)
class TextColumnSpec(ColumnSpec[T, str]):
    kind: ClassVar[Optional[ColumnKind]] = ColumnKind.TEXT


@dataclass(frozen=True)
class NumberColumnSpec(ColumnSpec[T, S]):
    kind: ClassVar[Optional[ColumnKind]] = ColumnKind.NUMBER


@dataclass(frozen=True)
class CheckboxColumnSpec(ColumnSpec[T, bool]):
    kind: ClassVar[Optional[ColumnKind]] = ColumnKind.CHECKBOX


@dataclass(frozen=True)
class DateColumnSpec(ColumnSpec[T, datetime.date]):
    """
    Date column. ``date_format`` is a strftime pattern or a callable; when it
    is left unset, labels use the configured default pattern.
    """

    kind: ClassVar[Optional[ColumnKind]] = ColumnKind.DATE

    date_format: Optional[DateFormat] = None

    def format(self, value: datetime.date, default_format: DateFormat = DEFAULT_DATE_FORMAT) -> str:
        return format_date(value, self.date_format or default_format)


@dataclass(frozen=True)
class DropdownColumnSpec(ColumnSpec[T, S]):
    kind: ClassVar[Optional[ColumnKind]] = ColumnKind.DROPDOWN

    value_formatter: Callable[[S], str] = str

    def format(self, value: Any) -> str:
        return self.value_formatter(value)
