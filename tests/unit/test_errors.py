import pytest

from datatable_filters.core.predicates import FilterPredicate
from datatable_filters.errors import (
    Error,
    InvalidParametersError,
    UnsupportedError,
    UnsupportedPredicateError,
)


def test_unsupported_predicate_message_names_verb():
    err = UnsupportedPredicateError(FilterPredicate.NOT_CONTAINS)
    assert str(err) == "Filter predicate doesn't contain is not supported"
    assert err.predicate is FilterPredicate.NOT_CONTAINS


def test_error_hierarchy():
    assert issubclass(UnsupportedPredicateError, UnsupportedError)
    assert issubclass(UnsupportedError, Error)
    with pytest.raises(ValueError):
        raise InvalidParametersError("bad")
