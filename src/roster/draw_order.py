"""Ballot positions drawn for the 2026 general election.

Organizations are placed on the ballot according to the public draw held by the
electoral office on 12 February 2026. The table is versioned with the election:
an organization missing from it is not an error, it simply receives
:data:`OVERFLOW_POSITION` and is rendered after every drawn organization.
"""

from __future__ import annotations

from typing import Mapping

__all__ = ["BALLOT_POSITIONS", "OVERFLOW_POSITION", "ballot_position"]

OVERFLOW_POSITION = 999

BALLOT_POSITIONS: Mapping[int, int] = {
    3025: 1,  # Alianza Electoral Venceremos
    2869: 2,  # Partido Patriótico del Perú
    2941: 3,  # Partido Cívico Obras
    2901: 4,  # FREPAP
    2895: 5,  # Partido Demócrata Verde
    2961: 6,  # Partido del Buen Gobierno
    2932: 7,  # Partido Político Perú Acción
    2921: 8,  # Partido Político PRIN
    2967: 9,  # Partido Político Progresemos
    2935: 10,  # Partido Sí Creo
    2956: 11,  # Partido País para Todos
    2857: 12,  # Frente de la Esperanza 2021
    2218: 13,  # Partido Político Nacional Perú Libre
    # 2968 drew position 14 and was later excluded from the ballot.
    2931: 15,  # Primero la Gente
    1264: 16,  # Partido Juntos por el Perú
    2731: 17,  # Partido Político Podemos Perú
    2986: 18,  # Partido Democrático Federal
    2898: 19,  # Partido Fe en el Perú
    2985: 20,  # Partido Político Integridad Democrática
    1366: 21,  # Fuerza Popular
    1257: 22,  # Alianza para el Progreso
    2995: 23,  # Partido Político Cooperación Popular
    2980: 24,  # Ahora Nación
    2933: 25,  # Libertad Popular
    2998: 26,  # Un Camino Diferente
    2173: 27,  # Avanza País
    2924: 28,  # Perú Moderno
    2925: 29,  # Partido Político Perú Primero
    2927: 30,  # Salvemos al Perú
    14: 31,  # Partido Democrático Somos Perú
    2930: 32,  # Partido Aprista Peruano
    22: 33,  # Renovación Popular
    2867: 34,  # Partido Demócrata Unido Perú
    3024: 35,  # Fuerza y Libertad
    2939: 36,  # Partido de los Trabajadores y Emprendedores
    3023: 37,  # Unidad Nacional
    2840: 38,  # Partido Morado
}


def ballot_position(
    organization_id: int | None,
    positions: Mapping[int, int] = BALLOT_POSITIONS,
) -> int:
    """Return the drawn ballot position, or :data:`OVERFLOW_POSITION`."""

    if organization_id is None:
        return OVERFLOW_POSITION
    return positions.get(organization_id, OVERFLOW_POSITION)
