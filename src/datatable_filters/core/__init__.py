from .columns import (
    CheckboxColumnSpec,
    ColumnKind,
    ColumnSpec,
    DateColumnSpec,
    DropdownColumnSpec,
    NumberColumnSpec,
    TextColumnSpec,
)
from .filters import (
    BooleanFilter,
    ColumnFilter,
    DateFilter,
    DropdownFilter,
    NumberFilter,
    StringFilter,
    create_filter,
    filter_for_kind,
    register_filter,
    supported_predicates,
)
from .predicates import FilterPredicate

__ALL__ = [
    BooleanFilter,
    CheckboxColumnSpec,
    ColumnFilter,
    ColumnKind,
    ColumnSpec,
    DateColumnSpec,
    DateFilter,
    DropdownColumnSpec,
    DropdownFilter,
    FilterPredicate,
    NumberColumnSpec,
    NumberFilter,
    StringFilter,
    TextColumnSpec,
    create_filter,
    filter_for_kind,
    register_filter,
    supported_predicates,
]
