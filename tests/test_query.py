# tests/test_query.py

import pytest

from core.query import SortDirection, SortState, view
from models.student import Student


@pytest.fixture
def roster():
    return [
        Student("s000001", "Zhang San", "3A", "1"),
        Student("s000002", "Li Wei", "2B", "5"),
        Student("s000003", "Chan Tai Man", "3A", "12"),
        Student("s000004", "Amy Lee", "1C", "5"),
    ]


def names(students):
    return [s.name for s in students]


def test_empty_search_returns_all_sorted_by_name(roster):
    result = view(roster, "", "name", "asc")

    assert names(result) == ["Amy Lee", "Chan Tai Man", "Li Wei", "Zhang San"]


def test_search_is_case_insensitive_across_fields(roster):
    assert names(view(roster, "ZHANG", "name", "asc")) == ["Zhang San"]
    assert names(view(roster, "s000002", "name", "asc")) == ["Li Wei"]
    assert names(view(roster, "3a", "name", "asc")) == ["Chan Tai Man", "Zhang San"]
    assert names(view(roster, "12", "name", "asc")) == ["Chan Tai Man"]


def test_search_matches_substrings_in_any_field(roster):
    # "li" is in "Li Wei"; "lee" does not contain "li"
    assert names(view(roster, "li", "name", "asc")) == ["Li Wei"]


def test_search_with_no_match(roster):
    assert view(roster, "nobody", "name", "asc") == []


def test_sort_uses_string_comparison(roster):
    result = view(roster, "", "classNumber", "asc")

    assert [s.class_number for s in result] == ["1", "12", "5", "5"]


def test_sort_is_stable_in_both_directions(roster):
    ascending = view(roster, "", "class", SortDirection.ASC)
    descending = view(roster, "", "class", SortDirection.DESC)

    # Zhang San and Chan Tai Man share class 3A; store order is kept
    assert names(ascending) == ["Amy Lee", "Li Wei", "Zhang San", "Chan Tai Man"]
    assert names(descending) == ["Zhang San", "Chan Tai Man", "Li Wei", "Amy Lee"]


def test_flipping_direction_reverses_distinct_keys(roster):
    ascending = view(roster, "", "name", "asc")
    descending = view(roster, "", "name", "desc")

    assert names(descending) == list(reversed(names(ascending)))


def test_view_does_not_mutate_input(roster):
    before = list(roster)

    view(roster, "a", "name", "desc")

    assert roster == before


def test_unknown_sort_field_or_direction(roster):
    with pytest.raises(ValueError):
        view(roster, "", "remark", "asc")

    with pytest.raises(ValueError):
        view(roster, "", "name", "sideways")


def test_sort_state_toggles_same_field():
    sort = SortState()
    assert (sort.field, sort.direction) == ("name", SortDirection.ASC)

    sort.select("name")
    assert sort.direction is SortDirection.DESC

    sort.select("name")
    assert sort.direction is SortDirection.ASC


def test_sort_state_resets_on_field_change():
    sort = SortState()
    sort.select("name")
    assert sort.direction is SortDirection.DESC

    sort.select("class")
    assert (sort.field, sort.direction) == ("class", SortDirection.ASC)


def test_sort_state_indicator():
    sort = SortState("class")

    assert sort.indicator("class") == "▲"
    assert sort.indicator("name") == ""

    sort.select("class")
    assert sort.indicator("class") == "▼"
