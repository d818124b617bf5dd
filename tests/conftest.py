from typing import Dict, List

import pytest


def make_row(
    *,
    office: int,
    org_id: int,
    org_name: str,
    position,
    given: str = "Ana",
    surname: str = "Quispe",
    status: str = "INSCRITO",
    ubigeo: str | None = None,
    region: str | None = None,
    process: int = 124,
    dni: str | None = None,
) -> Dict[str, object]:
    return {
        "idProcesoElectoral": process,
        "idCargo": office,
        "idOrganizacionPolitica": org_id,
        "strOrganizacionPolitica": org_name,
        "intPosicion": position,
        "strNombres": given,
        "strApellidoPaterno": surname,
        "strApellidoMaterno": "Mamani",
        "strEstadoCandidato": status,
        "strUbigeo": ubigeo,
        "strDepartamento": region,
        "strDocumentoIdentidad": dni,
    }


@pytest.fixture
def sample_rows() -> List[Dict[str, object]]:
    fp = dict(org_id=1366, org_name="FUERZA POPULAR")
    pm = dict(org_id=2840, org_name="PARTIDO MORADO")
    rp = dict(org_id=22, org_name="RENOVACIÓN POPULAR")
    return [
        # Presidential tickets, deliberately out of order.
        make_row(office=3, position=3, given="Tercera", **fp),
        make_row(office=1, position=1, given="Keiko", dni="10001000", **fp),
        make_row(office=2, position=2, given="Segundo", **fp),
        make_row(office=1, position=1, given="Mesías", **pm),
        make_row(office=2, position=2, given="Vice", **pm),
        make_row(office=1, position=1, given="Excluido", status="EXCLUIDO", **rp),
        # National senators.
        make_row(office=16, position=2, given="Beto", ubigeo="000000", **fp),
        make_row(office=16, position=1, given="Carla", ubigeo="000000", **fp),
        make_row(office=16, position=1, given="Rafael", ubigeo="000000", **rp),
        make_row(
            office=16, position=1, given="Sorteo", ubigeo="000000",
            org_id=2968, org_name="PARTIDO EXCLUIDO DEL SORTEO",
        ),
        # Regional senators.
        make_row(office=16, position=1, given="Lucia", ubigeo="150000", region="LIMA", **fp),
        make_row(office=16, position=1, given="Jorge", ubigeo="020000", region="ÁNCASH", **pm),
        # Deputies with inconsistent accents.
        make_row(office=15, position=None, given="Sin Numero", ubigeo="020000", region="ÁNCASH", **fp),
        make_row(office=15, position=2, given="Diana", ubigeo="020000", region="ÁNCASH", **fp),
        make_row(office=15, position=1, given="Elsa", ubigeo="020000", region="ANCASH", **pm),
        make_row(office=15, position=1, given="Limeño", ubigeo="150000", region="LIMA", **rp),
        # Andean Parliament.
        make_row(office=5, position=1, given="Andina", **pm),
        make_row(office=5, position=1, given="Nueva", org_id=5555, org_name="PARTIDO NUEVO DE LA ESPERANZA"),
        # Another election process.
        make_row(office=1, position=1, given="Pasado", process=110, **fp),
    ]
