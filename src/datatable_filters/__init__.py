from ._version import __version__
from .app.config import FilterConfig, get_config, load_config, set_config
from .core import (
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
    supported_predicates,
)
from .errors import InvalidParametersError, UnsupportedPredicateError
from .util.logging_utils import configure_logging

__all__ = [
    "BooleanFilter",
    "CheckboxColumnSpec",
    "ColumnFilter",
    "ColumnKind",
    "ColumnSpec",
    "DateColumnSpec",
    "DateFilter",
    "DropdownColumnSpec",
    "DropdownFilter",
    "FilterConfig",
    "FilterPredicate",
    "InvalidParametersError",
    "NumberColumnSpec",
    "NumberFilter",
    "StringFilter",
    "TextColumnSpec",
    "UnsupportedPredicateError",
    "configure_logging",
    "create_filter",
    "get_config",
    "load_config",
    "set_config",
    "supported_predicates",
    "__version__",
]
