"""
The predicate vocabulary shared by every column filter.

A single enum covers all column types; one member can apply to several of
them, e.g. ``IS`` works on text, numeric and date columns.
"""
from enum import Enum


class FilterPredicate(Enum):
    CONTAINS = "contains"
    NOT_CONTAINS = "doesn't contain"
    IS = "is"
    NOT_IS = "is not"
    STARTS_WITH = "starts with"
    ENDS_WITH = "ends with"

    GREATER_THAN = "greater than"
    GREATER_THAN_EQUALS = "greater or equal than"
    LESS_THAN = "less than"
    LESS_THAN_EQUALS = "less or equal than"
    BETWEEN = "between"

    SELECTED = "selected"
    NOT_SELECTED = "not selected"

    IS_ANY_OF = "is any of"
    IS_NONE_OF = "is none of"

    @property
    def verb(self) -> str:
        """Display verb used verbatim in filter labels."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "FilterPredicate":
        """
        Look up a predicate by member name, ignoring case.

        Parameters
        ----------
        name : str
            Member name such as ``"greater_than"`` or ``"IS_ANY_OF"``

        Raises
        ------
        ValueError
            If no member has that name
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown filter predicate: {name}") from None

    def __str__(self) -> str:
        return self.value
