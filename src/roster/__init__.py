"""Candidate roster assembly for the ballot simulator."""

from .assembly import NATIONAL_UNIT, PROCESS_ID, RosterAssembler
from .draw_order import BALLOT_POSITIONS, OVERFLOW_POSITION, ballot_position
from .loader import load_snapshot
from .models import (
    CandidateRecord,
    CandidateStatus,
    ElectoralList,
    OfficeType,
    Organization,
    SimulatorDataset,
)
from .normalize import normalize_region, organization_short_code

__all__ = [
    "BALLOT_POSITIONS",
    "CandidateRecord",
    "CandidateStatus",
    "ElectoralList",
    "NATIONAL_UNIT",
    "OVERFLOW_POSITION",
    "OfficeType",
    "Organization",
    "PROCESS_ID",
    "RosterAssembler",
    "SimulatorDataset",
    "ballot_position",
    "load_snapshot",
    "normalize_region",
    "organization_short_code",
]
