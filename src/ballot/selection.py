"""Mutable ballot state edited by the voter one column at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from roster.models import OfficeType

from .offices import MAX_PREFERENCES, PREFERENTIAL_OFFICES

__all__ = ["BallotSelection", "ColumnSelection"]


@dataclass(slots=True)
class ColumnSelection:
    """A list chosen in one column plus the preferential numbers written."""

    list_id: int
    preferences: List[int] = field(default_factory=list)


class BallotSelection:
    """Selections across the five ballot columns.

    The editing methods never record a preference beyond the column maximum nor
    the same number twice. Selections can also be built directly from free-text
    input, so :func:`ballot.validator.validate_ballot` re-checks both rules.
    ``changes`` counts every edit so callers can tell whether a classification
    they hold was computed for the current state.
    """

    def __init__(
        self,
        presidential_ticket: Optional[int] = None,
        columns: Mapping[OfficeType | str, ColumnSelection] | None = None,
    ) -> None:
        self.presidential_ticket = presidential_ticket
        self._columns: Dict[OfficeType, ColumnSelection] = {}
        for office, selection in (columns or {}).items():
            office = OfficeType(office)
            if office not in PREFERENTIAL_OFFICES:
                raise ValueError(f"{office.value} does not accept a list with preferences.")
            self._columns[office] = selection
        self.changes = 0

    def __repr__(self) -> str:
        return (
            f"BallotSelection(presidential_ticket={self.presidential_ticket!r}, "
            f"columns={self._columns!r})"
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def column(self, office: OfficeType | str) -> Optional[ColumnSelection]:
        return self._columns.get(OfficeType(office))

    def is_marked(self, office: OfficeType | str) -> bool:
        office = OfficeType(office)
        if office is OfficeType.PRESIDENTIAL_TICKET:
            return self.presidential_ticket is not None
        return office in self._columns

    @property
    def is_empty(self) -> bool:
        return not any(self.is_marked(office) for office in OfficeType)

    def marked_offices(self) -> List[OfficeType]:
        """Marked columns in ballot order."""

        return [office for office in OfficeType if self.is_marked(office)]

    def copy(self) -> "BallotSelection":
        clone = BallotSelection(
            presidential_ticket=self.presidential_ticket,
            columns={
                office: ColumnSelection(sel.list_id, list(sel.preferences))
                for office, sel in self._columns.items()
            },
        )
        clone.changes = self.changes
        return clone

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def select_ticket(self, list_id: int) -> None:
        """Mark a presidential ticket; marking the same ticket again clears it."""

        if self.presidential_ticket == list_id:
            self.presidential_ticket = None
        else:
            self.presidential_ticket = list_id
        self.changes += 1

    def select_list(self, office: OfficeType | str, list_id: int) -> None:
        """Mark a list in ``office``.

        Selecting the list already marked clears the column; switching lists
        drops the preferences written for the previous one.
        """

        office = OfficeType(office)
        if office is OfficeType.PRESIDENTIAL_TICKET:
            self.select_ticket(list_id)
            return
        current = self._columns.get(office)
        if current is not None and current.list_id == list_id:
            del self._columns[office]
        else:
            self._columns[office] = ColumnSelection(list_id=list_id)
        self.changes += 1

    def toggle_preference(
        self,
        office: OfficeType | str,
        number: int,
        max_preferences: int | None = None,
    ) -> None:
        """Write or erase a preferential number in ``office``.

        Ignored when no list is marked in the column or when the column already
        holds its maximum number of preferences.
        """

        office = OfficeType(office)
        selection = self._columns.get(office)
        if selection is not None:
            limit = MAX_PREFERENCES[office] if max_preferences is None else max_preferences
            if number in selection.preferences:
                selection.preferences = [p for p in selection.preferences if p != number]
            elif len(selection.preferences) < limit:
                selection.preferences = [*selection.preferences, number]
        self.changes += 1

    def reset(self) -> None:
        self.presidential_ticket = None
        self._columns.clear()
        self.changes += 1
