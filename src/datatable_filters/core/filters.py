"""
Column filters: one evaluator per column category.

Every filter binds a column descriptor, one :class:`FilterPredicate` and the
parameters the predicate needs, and exposes ``test(item)`` plus a ``label``
describing the filter. Each category supports only part of the shared
predicate vocabulary; the tables below map each supported predicate to its
evaluation function and to its label template.
"""
import datetime
import logging
import numbers
from abc import ABC, abstractmethod
from collections.abc import Iterable as IterableABC
from typing import (
    Any,
    Callable,
    ClassVar,
    Dict,
    FrozenSet,
    Generic,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from datatable_filters.app.config import FilterConfig, get_config
from datatable_filters.core.columns import (
    CheckboxColumnSpec,
    ColumnKind,
    ColumnSpec,
    DateColumnSpec,
    DropdownColumnSpec,
    NumberColumnSpec,
    TextColumnSpec,
)
from datatable_filters.core.predicates import FilterPredicate
from datatable_filters.errors import (
    InvalidParametersError,
    UnsupportedError,
    UnsupportedPredicateError,
)
from datatable_filters.util.dates import parse_date

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S")

P = FilterPredicate

"""
Dicts indexed by filter predicate.

Each entry is curried: it is called once at construction with the filter's
parameters and returns the function applied to every extracted column value.
"""
_string_funcs = {
    # the term is case-folded before binding, values are folded per call
    P.CONTAINS: lambda t: lambda v: t in v.casefold(),
    P.NOT_CONTAINS: lambda t: lambda v: t not in v.casefold(),
    P.IS: lambda t: lambda v: v.casefold() == t,
    P.NOT_IS: lambda t: lambda v: v.casefold() != t,
    P.STARTS_WITH: lambda t: lambda v: v.casefold().startswith(t),
    P.ENDS_WITH: lambda t: lambda v: v.casefold().endswith(t),
}

_number_funcs = {
    P.IS: lambda p: lambda v: v == p[0],
    P.NOT_IS: lambda p: lambda v: v != p[0],
    P.GREATER_THAN: lambda p: lambda v: v > p[0],
    P.GREATER_THAN_EQUALS: lambda p: lambda v: v >= p[0],
    P.LESS_THAN: lambda p: lambda v: v < p[0],
    P.LESS_THAN_EQUALS: lambda p: lambda v: v <= p[0],
    P.BETWEEN: lambda p: lambda v: p[0] <= v <= p[1],
}

_boolean_funcs = {
    P.SELECTED: lambda: lambda v: bool(v),
    P.NOT_SELECTED: lambda: lambda v: not v,
}

_date_funcs = {
    P.IS: lambda d: lambda v: v == d,
    P.GREATER_THAN: lambda d: lambda v: v > d,
    P.LESS_THAN: lambda d: lambda v: v < d,
}

_dropdown_funcs = {
    P.IS_ANY_OF: lambda s: lambda v: v in s,
    P.IS_NONE_OF: lambda s: lambda v: v not in s,
}


class ColumnFilter(ABC, Generic[T, S]):
    """
    A single predicate applied to one column of a table.

    Subclasses declare the column ``kind`` they serve, the predicates they
    support, an evaluation table and a label-template table. Both tables must
    cover exactly ``SUPPORTED_PREDICATES``; this is checked when the subclass
    is defined.

    A filter is immutable. Its label is rendered once at construction. A
    filter built with a predicate its category does not support can still be
    constructed, but ``test`` and ``label`` raise
    :class:`UnsupportedPredicateError`.
    """

    kind: ClassVar[Optional[ColumnKind]] = None
    SUPPORTED_PREDICATES: ClassVar[FrozenSet[FilterPredicate]] = frozenset()
    _funcs: ClassVar[Dict[FilterPredicate, Callable[..., Callable[[Any], bool]]]] = {}
    _label_templates: ClassVar[Dict[FilterPredicate, str]] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.kind is None:
            return
        for table_name in ("_funcs", "_label_templates"):
            covered = frozenset(getattr(cls, table_name))
            if covered != cls.SUPPORTED_PREDICATES:
                missing = sorted(p.name for p in cls.SUPPORTED_PREDICATES - covered)
                extra = sorted(p.name for p in covered - cls.SUPPORTED_PREDICATES)
                raise TypeError(f"{cls.__name__}.{table_name} does not match SUPPORTED_PREDICATES: missing {missing}, extra {extra}")

    def __init__(
        self,
        column_spec: ColumnSpec[T, S],
        predicate: Union[FilterPredicate, str],
        config: Optional[FilterConfig] = None,
    ):
        if isinstance(predicate, str):
            predicate = FilterPredicate.from_name(predicate)
        self._column_spec = column_spec
        self._predicate = predicate
        self._config = config or get_config()
        self._func: Optional[Callable[[Any], bool]] = None
        self._label: Optional[str] = None

        if predicate not in self.SUPPORTED_PREDICATES:
            logger.warning(f"{type(self).__name__} for column {column_spec.header_name} does not support predicate '{predicate.verb}'")
            return
        self._func = self._funcs[predicate](*self._bind())
        self._label = self._label_templates[predicate].format(
            header=column_spec.header_name,
            verb=predicate.verb,
            **self._label_fields(),
        )

    @abstractmethod
    def _bind(self) -> Tuple[Any, ...]:
        """Arguments passed to the predicate's entry in the evaluation table."""
        raise NotImplementedError

    @abstractmethod
    def _label_fields(self) -> Dict[str, Any]:
        """Fields substituted into the predicate's label template."""
        raise NotImplementedError

    @property
    def column_spec(self) -> ColumnSpec[T, S]:
        return self._column_spec

    @property
    def predicate(self) -> FilterPredicate:
        return self._predicate

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def is_supported(self) -> bool:
        return self._func is not None

    @property
    def label(self) -> str:
        if self._label is None:
            raise UnsupportedPredicateError(self._predicate)
        return self._label

    def test(self, item: T) -> bool:
        """
        Return whether the item's column value satisfies this filter.

        Raises
        ------
        UnsupportedPredicateError
            If the predicate does not apply to this column category
        """
        if self._func is None:
            raise UnsupportedPredicateError(self._predicate)
        value = self._extract(item)
        result = self._func(value)
        if not result and self._config.verbose:
            logger.debug(f"filter '{self._label}' rejected value {value!r}")
        return result

    def _extract(self, item: T) -> S:
        return self._column_spec.value(item)

    def __call__(self, item: T) -> bool:
        return self.test(item)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"{type(self).__name__}(column={self._column_spec.header_name!r}, predicate={self._predicate.name})"

    @classmethod
    @abstractmethod
    def from_parameters(
        cls,
        column_spec: ColumnSpec[T, S],
        predicate: Union[FilterPredicate, str],
        parameters: Sequence[Any],
        config: Optional[FilterConfig] = None,
    ) -> "ColumnFilter[T, S]":
        """Build a filter from a flat list of parameters, as :func:`create_filter` receives them."""
        raise NotImplementedError


def _single_parameter(cls: type, parameters: Sequence[Any]) -> Any:
    if len(parameters) != 1:
        raise InvalidParametersError(f"{cls.__name__} takes exactly one parameter but got {len(parameters)}")
    return parameters[0]


class StringFilter(ColumnFilter[T, str]):
    """
    Case-insensitive text matching.

    The label reads ``"<header> <verb> <term>"``, e.g. ``"Name starts with jo"``.
    """

    kind = ColumnKind.TEXT
    SUPPORTED_PREDICATES = frozenset(_string_funcs)
    _funcs = _string_funcs
    _label_templates = {p: "{header} {verb} {term}" for p in _string_funcs}

    def __init__(
        self,
        column_spec: TextColumnSpec[T],
        predicate: Union[FilterPredicate, str],
        term: str,
        config: Optional[FilterConfig] = None,
    ):
        if not isinstance(term, str):
            raise InvalidParametersError(f"StringFilter term must be a string, got {type(term).__name__}")
        self._term = term
        super().__init__(column_spec, predicate, config)

    @property
    def term(self) -> str:
        return self._term

    def _bind(self) -> Tuple[Any, ...]:
        return (self._term.casefold(),)

    def _label_fields(self) -> Dict[str, Any]:
        return {"term": self._term}

    @classmethod
    def from_parameters(cls, column_spec, predicate, parameters, config=None):
        return cls(column_spec, predicate, _single_parameter(cls, parameters), config)


class NumberFilter(ColumnFilter[T, S]):
    """
    Comparisons on a totally ordered numeric column.

    ``parameters`` holds one value, or two for ``BETWEEN`` where they are the
    inclusive lower and upper bounds. Equality is exact. A scalar parameter is
    accepted in place of a one-element sequence.
    """

    kind = ColumnKind.NUMBER
    SUPPORTED_PREDICATES = frozenset(_number_funcs)
    _funcs = _number_funcs
    _label_templates = {p: "{header} {verb} {lower}" for p in _number_funcs if p != P.BETWEEN}
    _label_templates[P.BETWEEN] = "{header} is between {lower} and {upper}"

    def __init__(
        self,
        column_spec: NumberColumnSpec[T, S],
        predicate: Union[FilterPredicate, str],
        parameters: Union[S, Sequence[S]],
        config: Optional[FilterConfig] = None,
    ):
        if isinstance(parameters, numbers.Number):
            parameters = [parameters]
        self._parameters: Tuple[S, ...] = tuple(parameters)
        super().__init__(column_spec, predicate, config)

    @property
    def parameters(self) -> Tuple[S, ...]:
        return self._parameters

    def _bind(self) -> Tuple[Any, ...]:
        if self._config.validate_parameters:
            expected = 2 if self._predicate == P.BETWEEN else 1
            if len(self._parameters) != expected:
                raise InvalidParametersError(
                    f"NumberFilter with predicate '{self._predicate.verb}' takes {expected} parameter(s) but got {len(self._parameters)}"
                )
        return (self._parameters,)

    def _label_fields(self) -> Dict[str, Any]:
        fields = {"lower": self._parameters[0]}
        if self._predicate == P.BETWEEN:
            fields["upper"] = self._parameters[1]
        return fields

    @classmethod
    def from_parameters(cls, column_spec, predicate, parameters, config=None):
        if len(parameters) == 1 and isinstance(parameters[0], (list, tuple)):
            parameters = parameters[0]
        return cls(column_spec, predicate, parameters, config)


class BooleanFilter(ColumnFilter[T, bool]):
    """Checkbox columns: ``"<header> is selected"`` / ``"<header> is not selected"``."""

    kind = ColumnKind.CHECKBOX
    SUPPORTED_PREDICATES = frozenset(_boolean_funcs)
    _funcs = _boolean_funcs
    _label_templates = {p: "{header} is {verb}" for p in _boolean_funcs}

    def __init__(
        self,
        column_spec: CheckboxColumnSpec[T],
        predicate: Union[FilterPredicate, str],
        config: Optional[FilterConfig] = None,
    ):
        super().__init__(column_spec, predicate, config)

    def _bind(self) -> Tuple[Any, ...]:
        return ()

    def _label_fields(self) -> Dict[str, Any]:
        return {}

    @classmethod
    def from_parameters(cls, column_spec, predicate, parameters, config=None):
        if parameters:
            raise InvalidParametersError(f"BooleanFilter takes no parameters but got {len(parameters)}")
        return cls(column_spec, predicate, config)


class DateFilter(ColumnFilter[T, datetime.date]):
    """
    Calendar date comparisons: exact day, strictly after or strictly before.

    The target may be a ``date``, a ``datetime`` (only its date is kept) or a
    string that dateutil can parse. Column values that are ``datetime``
    objects are compared by their date as well. Labels render the target with
    the column's date format, or the configured default when the column has
    none.
    """

    kind = ColumnKind.DATE
    SUPPORTED_PREDICATES = frozenset(_date_funcs)
    _funcs = _date_funcs
    _label_templates = {
        P.IS: "{header} is {date}",
        P.GREATER_THAN: "{header} is after {date}",
        P.LESS_THAN: "{header} is before {date}",
    }

    def __init__(
        self,
        column_spec: DateColumnSpec[T],
        predicate: Union[FilterPredicate, str],
        value: Union[datetime.date, str],
        config: Optional[FilterConfig] = None,
    ):
        try:
            self._value = parse_date(value)
        except (ValueError, TypeError) as e:
            raise InvalidParametersError(str(e)) from e
        super().__init__(column_spec, predicate, config)

    @property
    def value(self) -> datetime.date:
        return self._value

    def _bind(self) -> Tuple[Any, ...]:
        return (self._value,)

    def _extract(self, item: T) -> datetime.date:
        value = self._column_spec.value(item)
        if isinstance(value, datetime.datetime):
            return value.date()
        return value

    def _label_fields(self) -> Dict[str, Any]:
        return {"date": self._column_spec.format(self._value, self._config.date_format)}

    @classmethod
    def from_parameters(cls, column_spec, predicate, parameters, config=None):
        return cls(column_spec, predicate, _single_parameter(cls, parameters), config)


class DropdownFilter(ColumnFilter[T, S]):
    """
    Membership in a set of accepted values.

    Accepted values keep the order they were given in, which is also the
    order they appear in the label. Through :func:`create_filter` the values
    are passed either as separate arguments or as one ``list``; any other
    single argument, a tuple included, is taken as one accepted value.
    """

    kind = ColumnKind.DROPDOWN
    SUPPORTED_PREDICATES = frozenset(_dropdown_funcs)
    _funcs = _dropdown_funcs
    _label_templates = {
        P.IS_ANY_OF: "{header} is any of {values}",
        P.IS_NONE_OF: "{header} is none of {values}",
    }

    def __init__(
        self,
        column_spec: DropdownColumnSpec[T, S],
        predicate: Union[FilterPredicate, str],
        values: Iterable[S],
        config: Optional[FilterConfig] = None,
    ):
        if isinstance(values, (str, bytes)) or not isinstance(values, IterableABC):
            raise InvalidParametersError(f"DropdownFilter values must be a collection, got {type(values).__name__}")
        self._values: Tuple[S, ...] = tuple(values)
        super().__init__(column_spec, predicate, config)

    @property
    def values(self) -> Tuple[S, ...]:
        return self._values

    def _bind(self) -> Tuple[Any, ...]:
        return (self._values,)

    def _label_fields(self) -> Dict[str, Any]:
        return {"values": self._config.value_separator.join(self._column_spec.format(v) for v in self._values)}

    @classmethod
    def from_parameters(cls, column_spec, predicate, parameters, config=None):
        if len(parameters) == 1 and isinstance(parameters[0], list):
            parameters = parameters[0]
        return cls(column_spec, predicate, parameters, config)


_FILTER_REGISTRY: Dict[ColumnKind, Type[ColumnFilter]] = {}


def register_filter(filters: Union[Type[ColumnFilter], List[Type[ColumnFilter]]]) -> None:
    global _FILTER_REGISTRY
    if not isinstance(filters, list):
        filters = [filters]

    for filter_cls in filters:
        if filter_cls.kind is None:
            raise UnsupportedError(f"{filter_cls.__name__} does not declare a column kind")
        _FILTER_REGISTRY[filter_cls.kind] = filter_cls


register_filter([StringFilter, NumberFilter, BooleanFilter, DateFilter, DropdownFilter])


def _column_kind(column: Union[ColumnSpec, ColumnKind]) -> ColumnKind:
    kind = column if isinstance(column, ColumnKind) else getattr(column, "kind", None)
    if kind is None:
        raise UnsupportedError(f"Cannot determine the column kind of {column!r}")
    return kind


def filter_for_kind(kind: ColumnKind) -> Type[ColumnFilter]:
    """Return the filter class registered for a column kind."""
    filter_cls = _FILTER_REGISTRY.get(kind)
    if filter_cls is None:
        raise UnsupportedError(f"No filter registered for column kind {kind}")
    return filter_cls


def supported_predicates(column: Union[ColumnSpec, ColumnKind]) -> List[FilterPredicate]:
    """
    Predicates that can be offered for a column, in vocabulary order.

    Parameters
    ----------
    column : ColumnSpec or ColumnKind
        A column descriptor or its kind
    """
    filter_cls = filter_for_kind(_column_kind(column))
    return [p for p in FilterPredicate if p in filter_cls.SUPPORTED_PREDICATES]


def create_filter(
    column_spec: ColumnSpec[T, S],
    predicate: Union[FilterPredicate, str],
    *parameters: Any,
    config: Optional[FilterConfig] = None,
) -> ColumnFilter[T, S]:
    """
    Build the filter matching a column descriptor's kind.

    Examples
    --------
    ::

        age = NumberColumnSpec("Age", lambda person: person["age"])
        adults = create_filter(age, FilterPredicate.GREATER_THAN_EQUALS, 18)
        teens = create_filter(age, "between", 13, 19)
        adults.label  # 'Age greater or equal than 18'
    """
    filter_cls = filter_for_kind(_column_kind(column_spec))
    return filter_cls.from_parameters(column_spec, predicate, list(parameters), config)
