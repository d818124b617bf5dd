"""Educational content shown next to the ballot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

__all__ = ["ElectoralThreshold", "THRESHOLD", "VOTING_RULES", "alliance_threshold"]


@dataclass(frozen=True, slots=True)
class ElectoralThreshold:
    """Minimum national support a party needs to keep its seats."""

    percentage: int = 5
    extra_per_alliance_member: int = 1
    min_deputies: int = 7
    min_senators: int = 3
    description: str = "Un partido debe obtener al menos 5% de votos válidos nacionales"
    alliance: str = (
        "Las alianzas necesitan 5% + 1% adicional por cada partido (ej: 2 partidos = 6%)"
    )

    def as_dict(self) -> Dict[str, object]:
        return {
            "porcentaje": self.percentage,
            "descripcion": self.description,
            "alianza": self.alliance,
            "minimosDiputados": self.min_deputies,
            "minimosSenadores": self.min_senators,
        }


THRESHOLD = ElectoralThreshold()

VALID_MARKS: Tuple[str, ...] = (
    "Marca con aspa (✗) o cruz (+) dentro del recuadro del partido",
    "La intersección de las líneas debe quedar DENTRO del recuadro",
    "Puedes votar por distintos partidos en cada columna (voto cruzado permitido)",
    "El voto preferencial es OPCIONAL: puedes no escribir ningún número",
)

NULL_MARKS: Tuple[str, ...] = (
    "Usar palomita (✓), círculo u otro símbolo diferente a aspa o cruz",
    "La intersección queda FUERA del recuadro del partido",
    "Escribir más números preferenciales de los permitidos",
    "Repetir el mismo número preferencial",
    "Agregar frases, dibujos o tachaduras a la cédula",
    "Escribir números fuera de los recuadros designados para preferenciales",
)

VOTING_RULES: Dict[str, object] = {
    "valido": list(VALID_MARKS),
    "nulo": list(NULL_MARKS),
    "valla": THRESHOLD.as_dict(),
}


def alliance_threshold(member_parties: int, threshold: ElectoralThreshold = THRESHOLD) -> int:
    """Percentage an alliance of ``member_parties`` parties must reach.

    A single party needs the base threshold; each party beyond the first adds
    one point (two parties need 6%).
    """

    if member_parties <= 1:
        return threshold.percentage
    return threshold.percentage + threshold.extra_per_alliance_member * (member_parties - 1)
