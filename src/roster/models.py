"""Data model for the candidate roster.

Rows coming from the electoral registry feed are converted into
:class:`CandidateRecord` instances, grouped into :class:`ElectoralList` values and
finally bundled into a :class:`SimulatorDataset`, one sequence of lists per
:class:`OfficeType`. Every type here is immutable once built.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

__all__ = [
    "CandidateRecord",
    "CandidateStatus",
    "ElectoralList",
    "OfficeType",
    "Organization",
    "SimulatorDataset",
]

PHOTO_BASE_URL = "https://mpesije.jne.gob.pe/apidocs"
BIOGRAPHY_BASE_URL = "https://votoinformado.jne.gob.pe/hoja-vida/22"


class OfficeType(str, Enum):
    """Offices elected on the five-column ballot, in ballot column order."""

    PRESIDENTIAL_TICKET = "FORMULA_PRESIDENCIAL"
    NATIONAL_SENATOR = "SENADOR_NACIONAL"
    REGIONAL_SENATOR = "SENADOR_REGIONAL"
    DEPUTY = "DIPUTADO"
    ANDEAN_PARLIAMENT = "PARLAMENTO_ANDINO"

    @property
    def is_regional(self) -> bool:
        return self in (OfficeType.REGIONAL_SENATOR, OfficeType.DEPUTY)


class CandidateStatus(str, Enum):
    """Registration status of a candidacy."""

    REGISTERED = "INSCRITO"
    ADMITTED = "ADMITIDO"
    EXCLUDED = "EXCLUIDO"
    CHALLENGED = "IMPUGNADO"

    @classmethod
    def parse(cls, value: object) -> "CandidateStatus":
        """Map a raw status string onto the enum; unknown values are registered."""

        text = str(value or "").strip().upper()
        for status in cls:
            if status.value == text:
                return status
        return cls.REGISTERED


@dataclass(frozen=True, slots=True)
class CandidateRecord:
    """One candidacy for one office, as published by the registry."""

    process_id: Optional[int]
    office_code: Optional[int]
    organization_id: Optional[int]
    organization_name: Optional[str]
    position: Optional[int]
    given_names: str = ""
    paternal_surname: str = ""
    maternal_surname: str = ""
    status: CandidateStatus = CandidateStatus.REGISTERED
    raw_status: str = ""
    photo_guid: Optional[str] = None
    photo_file_name: Optional[str] = None
    electoral_unit: Optional[str] = None
    region: Optional[str] = None
    national_id: Optional[str] = None

    # Registry keys first, then the snake_case names used by local snapshots.
    FIELD_ALIASES = {
        "process_id": ("idProcesoElectoral", "process_id"),
        "office_code": ("idCargo", "office_code"),
        "organization_id": ("idOrganizacionPolitica", "organization_id"),
        "organization_name": ("strOrganizacionPolitica", "organization_name"),
        "position": ("intPosicion", "position"),
        "given_names": ("strNombres", "given_names"),
        "paternal_surname": ("strApellidoPaterno", "paternal_surname"),
        "maternal_surname": ("strApellidoMaterno", "maternal_surname"),
        "status": ("strEstadoCandidato", "status"),
        "photo_guid": ("strGuidFoto", "photo_guid"),
        "photo_file_name": ("strNombre", "photo_file_name"),
        "electoral_unit": ("strUbigeo", "electoral_unit"),
        "region": ("strDepartamento", "region"),
        "national_id": ("strDocumentoIdentidad", "national_id"),
    }

    @classmethod
    def from_raw(cls, row: Mapping[str, object] | "CandidateRecord") -> "CandidateRecord":
        """Build a record from a registry row, tolerating missing or bad values."""

        if isinstance(row, CandidateRecord):
            return row

        def pick(name: str) -> object | None:
            for key in cls.FIELD_ALIASES[name]:
                value = row.get(key)
                if value is not None:
                    return value
            return None

        raw_status = _normalise_string(pick("status")) or ""
        return cls(
            process_id=_normalise_int(pick("process_id")),
            office_code=_normalise_int(pick("office_code")),
            organization_id=_normalise_int(pick("organization_id")),
            organization_name=_normalise_string(pick("organization_name")),
            position=_normalise_int(pick("position")),
            given_names=_normalise_string(pick("given_names")) or "",
            paternal_surname=_normalise_string(pick("paternal_surname")) or "",
            maternal_surname=_normalise_string(pick("maternal_surname")) or "",
            status=CandidateStatus.parse(raw_status),
            raw_status=raw_status,
            photo_guid=_normalise_string(pick("photo_guid")),
            photo_file_name=_normalise_string(pick("photo_file_name")),
            electoral_unit=_normalise_string(pick("electoral_unit")),
            region=_normalise_string(pick("region")),
            national_id=_normalise_string(pick("national_id")),
        )

    @property
    def full_name(self) -> str:
        joined = f"{self.given_names} {self.paternal_surname} {self.maternal_surname}"
        return re.sub(r"\s+", " ", joined).strip()

    @property
    def list_number(self) -> int:
        """Number written on the ballot to cast a preferential vote."""

        return self.position or 0

    @property
    def photo_url(self) -> Optional[str]:
        if not self.photo_guid:
            return None
        extension = "jpeg" if (self.photo_file_name or "").lower().endswith(".jpeg") else "jpg"
        return f"{PHOTO_BASE_URL}/{self.photo_guid}.{extension}"

    @property
    def resume_id(self) -> int:
        if self.national_id and self.national_id.isdigit():
            return int(self.national_id)
        return 0

    @property
    def biography_url(self) -> Optional[str]:
        if not self.national_id:
            return None
        return f"{BIOGRAPHY_BASE_URL}/{self.national_id}"

    @property
    def is_challenged(self) -> bool:
        return self.status is CandidateStatus.CHALLENGED


@dataclass(frozen=True, slots=True)
class Organization:
    """A political organization as it appears on the ballot."""

    id: int
    name: str
    short_code: str
    ballot_position: int


@dataclass(frozen=True, slots=True)
class ElectoralList:
    """Candidates fielded by one organization for one office."""

    organization: Organization
    office: OfficeType
    candidates: Tuple[CandidateRecord, ...] = ()
    head: Optional[CandidateRecord] = None
    first_deputy: Optional[CandidateRecord] = None
    second_deputy: Optional[CandidateRecord] = None

    @property
    def id(self) -> int:
        return self.organization.id

    def candidate(self, list_number: int) -> Optional[CandidateRecord]:
        """Return the first candidate holding ``list_number``, if any."""

        return next(
            (c for c in self.candidates if c.position == list_number),
            None,
        )


@dataclass(frozen=True, slots=True)
class SimulatorDataset:
    """Electoral lists for every ballot column, sorted by ballot position."""

    presidential_tickets: Tuple[ElectoralList, ...] = ()
    national_senators: Tuple[ElectoralList, ...] = ()
    regional_senators: Tuple[ElectoralList, ...] = ()
    deputies: Tuple[ElectoralList, ...] = ()
    andean_parliament: Tuple[ElectoralList, ...] = ()
    region: Optional[str] = None

    OFFICE_FIELDS = {
        OfficeType.PRESIDENTIAL_TICKET: "presidential_tickets",
        OfficeType.NATIONAL_SENATOR: "national_senators",
        OfficeType.REGIONAL_SENATOR: "regional_senators",
        OfficeType.DEPUTY: "deputies",
        OfficeType.ANDEAN_PARLIAMENT: "andean_parliament",
    }

    def lists(self, office: OfficeType) -> Tuple[ElectoralList, ...]:
        return getattr(self, self.OFFICE_FIELDS[OfficeType(office)])

    def find_list(self, office: OfficeType, list_id: int) -> Optional[ElectoralList]:
        return next((lst for lst in self.lists(office) if lst.id == list_id), None)

    def as_mapping(self) -> Dict[OfficeType, List[ElectoralList]]:
        return {office: list(self.lists(office)) for office in OfficeType}


def _normalise_string(value: object) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def _normalise_int(value: object) -> Optional[int]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
