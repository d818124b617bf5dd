"""Static configuration of the five ballot columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from roster.models import OfficeType

__all__ = [
    "COLUMN_CONFIGS",
    "ColumnConfig",
    "MAX_PREFERENCES",
    "PREFERENTIAL_OFFICES",
    "column_config",
]


@dataclass(frozen=True, slots=True)
class ColumnConfig:
    """Presentation and rule settings of one ballot column."""

    office: OfficeType
    title: str
    subtitle: str
    max_preferences: int
    hint: str


COLUMN_CONFIGS: Tuple[ColumnConfig, ...] = (
    ColumnConfig(
        office=OfficeType.PRESIDENTIAL_TICKET,
        title="Fórmula Presidencial",
        subtitle="Presidente y Vicepresidentes",
        max_preferences=0,
        hint="Marca la fórmula completa con una aspa (✗) o cruz (+)",
    ),
    ColumnConfig(
        office=OfficeType.NATIONAL_SENATOR,
        title="Senadores Nacionales",
        subtitle="Circunscripción Nacional",
        max_preferences=2,
        hint="Opcional: escribe hasta 2 números de candidatos preferidos",
    ),
    ColumnConfig(
        office=OfficeType.REGIONAL_SENATOR,
        title="Senadores Regionales",
        subtitle="Por tu departamento",
        max_preferences=1,
        hint="Opcional: escribe el número de 1 candidato preferido",
    ),
    ColumnConfig(
        office=OfficeType.DEPUTY,
        title="Diputados",
        subtitle="Cámara de Diputados",
        # 1 in districts electing fewer than two seats; the simulator uses 2.
        max_preferences=2,
        hint="Opcional: escribe hasta 2 números de candidatos preferidos",
    ),
    ColumnConfig(
        office=OfficeType.ANDEAN_PARLIAMENT,
        title="Parlamento Andino",
        subtitle="Representación Internacional",
        max_preferences=2,
        hint="Opcional: escribe hasta 2 números de candidatos preferidos",
    ),
)

_BY_OFFICE: Mapping[OfficeType, ColumnConfig] = {config.office: config for config in COLUMN_CONFIGS}

MAX_PREFERENCES: Mapping[OfficeType, int] = {
    config.office: config.max_preferences for config in COLUMN_CONFIGS
}

# Columns that accept a (list, preferences) selection.
PREFERENTIAL_OFFICES: Tuple[OfficeType, ...] = tuple(
    config.office for config in COLUMN_CONFIGS if config.office is not OfficeType.PRESIDENTIAL_TICKET
)


def column_config(office: OfficeType | str) -> ColumnConfig:
    """Return the configuration of ``office``; raises ``ValueError`` if unknown."""

    return _BY_OFFICE[OfficeType(office)]
