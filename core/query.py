# core/query.py

"""
Read-only derivation of the student list shown to the user.

`view()` filters the store's records by a free-text search term and sorts them by one of the
sortable columns. It never mutates its input and holds no state, so it can be recomputed after
every change.

`SortState` holds the column/direction pair chosen in the UI. Selecting the current column again
flips the direction; selecting a different column resets to ascending.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from models.student import Student

SEARCHABLE_FIELDS = ("name", "id", "class", "classNumber")
SORTABLE_FIELDS = ("name", "class", "classNumber")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def matches_search(student: Student, search_term: str) -> bool:
    term = search_term.lower()
    return any(term in student.field_value(f).lower() for f in SEARCHABLE_FIELDS)


def view(
    records: Iterable[Student],
    search_term: str = "",
    sort_field: str = "name",
    sort_direction: SortDirection | str = SortDirection.ASC,
) -> list[Student]:
    """
    Filters and sorts student records for display.

    Args:
        records (Iterable[Student]): The records to derive the view from, in store order.
        search_term (str): Case-insensitive substring matched against name, id, class, and class number.
        sort_field (str): One of `name`, `class`, or `classNumber`.
        sort_direction (SortDirection | str): `asc` or `desc`.

    Returns:
        list[Student]: The matching records in sorted order.

    Raises:
        ValueError: If `sort_field` or `sort_direction` is not recognized.

    Notes:
        - Values are compared as plain strings, so class number "10" sorts before "9".
        - Sorting is stable in both directions: records with equal keys keep their store order.
    """
    if sort_field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by '{sort_field}'.")

    direction = SortDirection(sort_direction)

    filtered = [s for s in records if matches_search(s, search_term)]

    if direction is SortDirection.ASC:
        return sorted(filtered, key=lambda s: s.field_value(sort_field))

    # reversing around a stable ascending sort would also reverse ties
    keyed = sorted(
        enumerate(filtered),
        key=lambda pair: (pair[1].field_value(sort_field), -pair[0]),
        reverse=True,
    )
    return [student for _, student in keyed]


class SortState:

    def __init__(
        self,
        field: str = "name",
        direction: SortDirection = SortDirection.ASC,
    ):
        if field not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{field}'.")

        self._field = field
        self._direction = SortDirection(direction)

    @property
    def field(self) -> str:
        return self._field

    @property
    def direction(self) -> SortDirection:
        return self._direction

    def select(self, field: str) -> None:
        if field not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{field}'.")

        if field == self._field:
            self._direction = self._direction.flipped()
        else:
            self._field = field
            self._direction = SortDirection.ASC

    def indicator(self, field: str) -> str:
        if field != self._field:
            return ""
        return "▲" if self._direction is SortDirection.ASC else "▼"

    def __repr__(self) -> str:
        return f"SortState({self._field}, {self._direction.value})"
