from datatable_filters.core.filters import BooleanFilter
from datatable_filters.core.predicates import FilterPredicate as P


def test_selected(active_column):
    selected = BooleanFilter(active_column, P.SELECTED)
    assert selected.test({"active": True}) is True
    assert selected.test({"active": False}) is False


def test_not_selected(active_column):
    not_selected = BooleanFilter(active_column, P.NOT_SELECTED)
    assert not_selected.test({"active": True}) is False
    assert not_selected.test({"active": False}) is True


def test_labels(active_column):
    assert BooleanFilter(active_column, P.SELECTED).label == "Active is selected"
    assert BooleanFilter(active_column, P.NOT_SELECTED).label == "Active is not selected"


def test_filter_over_rows(active_column, people):
    inactive = BooleanFilter(active_column, P.NOT_SELECTED)
    assert [p["name"] for p in people if inactive(p)] == ["jonas", "Árpád"]
