"""Classification of a marked ballot as valid, null or blank.

Rules follow the Organic Elections Law (Ley N° 26859) as applied by the
electoral office for the 2026 general election:

* a ballot with no mark in any column is blank;
* each column is judged on its own, and a null column never voids the others;
* preferential numbers are optional, so marking only the party box is valid;
* repeating a preferential number, writing more numbers than the column allows
  or writing a number lower than 1 voids that column.

The challenged status of a candidate does not play any part in the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from roster.models import OfficeType

from .offices import MAX_PREFERENCES, PREFERENTIAL_OFFICES, column_config
from .selection import BallotSelection, ColumnSelection

__all__ = [
    "BallotClassification",
    "ColumnResult",
    "VoteStatus",
    "validate_ballot",
    "validate_column",
]

BLANK_REASON = "Cédula en blanco: ninguna columna fue marcada"
BLANK_SUMMARY = "Tu cédula está en BLANCO. No has seleccionado ninguna opción."
DUPLICATE_REASON = "Candidato preferencial marcado dos veces (número duplicado)"
INVALID_NUMBER_REASON = "Número de candidato preferencial inválido"


class VoteStatus(str, Enum):
    VALID = "valido"
    NULL = "nulo"
    BLANK = "blanco"


@dataclass(frozen=True, slots=True)
class ColumnResult:
    status: VoteStatus
    reason: Optional[str] = None

    @property
    def is_null(self) -> bool:
        return self.status is VoteStatus.NULL


@dataclass(frozen=True, slots=True)
class BallotClassification:
    """Outcome of validating one ballot.

    ``columns`` only holds the preferential columns that were marked; a missing
    column counts as blank for that office without affecting the others.
    """

    status: VoteStatus
    summary: str
    columns: Dict[OfficeType, ColumnResult] = field(default_factory=dict)
    reasons: List[str] = field(default_factory=list)

    def null_offices(self) -> List[OfficeType]:
        return [office for office, result in self.columns.items() if result.is_null]


def validate_column(selection: ColumnSelection, max_preferences: int) -> ColumnResult:
    """Judge a single preferential column against its preference maximum."""

    preferences: Sequence[int] = selection.preferences
    if not preferences:
        return ColumnResult(VoteStatus.VALID)
    if len(set(preferences)) != len(preferences):
        return ColumnResult(VoteStatus.NULL, DUPLICATE_REASON)
    if len(preferences) > max_preferences:
        return ColumnResult(
            VoteStatus.NULL,
            f"Se marcaron {len(preferences)} preferenciales pero el máximo permitido es "
            f"{max_preferences}",
        )
    if any(number <= 0 for number in preferences):
        return ColumnResult(VoteStatus.NULL, INVALID_NUMBER_REASON)
    return ColumnResult(VoteStatus.VALID)


def validate_ballot(selection: BallotSelection) -> BallotClassification:
    """Classify ``selection``; the selection itself is left untouched."""

    if selection.is_empty:
        return BallotClassification(
            status=VoteStatus.BLANK,
            summary=BLANK_SUMMARY,
            columns={},
            reasons=[BLANK_REASON],
        )

    columns: Dict[OfficeType, ColumnResult] = {}
    reasons: List[str] = []
    for office in PREFERENTIAL_OFFICES:
        column = selection.column(office)
        if column is None:
            continue
        result = validate_column(column, MAX_PREFERENCES[office])
        columns[office] = result
        if result.reason:
            reasons.append(f"{column_config(office).title}: {result.reason}")

    if any(result.is_null for result in columns.values()):
        return BallotClassification(
            status=VoteStatus.NULL,
            summary=_null_summary(columns, reasons),
            columns=columns,
            reasons=reasons,
        )
    return BallotClassification(
        status=VoteStatus.VALID,
        summary=_valid_summary(selection),
        columns=columns,
        reasons=[],
    )


def _null_summary(columns: Dict[OfficeType, ColumnResult], reasons: Sequence[str]) -> str:
    null_titles = [column_config(office).title for office, result in columns.items() if result.is_null]
    return (
        f"Tu cédula tiene {len(null_titles)} columna(s) NULA(S): {', '.join(null_titles)}. "
        "Recuerda: un nulo en una columna NO invalida las demás. "
        f"Motivos: {'; '.join(reasons)}."
    )


def _valid_summary(selection: BallotSelection) -> str:
    marked = [column_config(office).title for office in selection.marked_offices()]
    return (
        f"¡Tu voto es VÁLIDO! Marcaste {len(marked)} columna(s): {', '.join(marked)}. "
        "Recuerda que puedes votar por distintos partidos en cada columna (voto cruzado)."
    )
