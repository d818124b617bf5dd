from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ballot.selection import BallotSelection, ColumnSelection
from ballot.validator import VoteStatus
from roster.models import CandidateStatus, OfficeType


class CandidateOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    full_name: str
    given_names: str
    paternal_surname: str
    maternal_surname: str
    list_number: int
    status: CandidateStatus
    is_challenged: bool
    photo_url: Optional[str] = None
    region: Optional[str] = None
    national_id: Optional[str] = None
    resume_id: int = 0
    biography_url: Optional[str] = None


class OrganizationOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    short_code: str
    ballot_position: int


class ElectoralListOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    office: OfficeType
    organization: OrganizationOut
    candidates: List[CandidateOut]
    head: Optional[CandidateOut] = None
    first_deputy: Optional[CandidateOut] = None
    second_deputy: Optional[CandidateOut] = None


class DatasetOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    region: Optional[str] = None
    presidential_tickets: List[ElectoralListOut]
    national_senators: List[ElectoralListOut]
    regional_senators: List[ElectoralListOut]
    deputies: List[ElectoralListOut]
    andean_parliament: List[ElectoralListOut]


class ColumnConfigOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    office: OfficeType
    title: str
    subtitle: str
    max_preferences: int
    hint: str


class ColumnSelectionIn(BaseModel):
    list_id: int
    preferences: List[int] = Field(default_factory=list)


class BallotIn(BaseModel):
    """Ballot submitted for checking.

    Preferences are accepted as typed, so repeated or excess numbers reach the
    validator instead of being rejected here.
    """

    presidential_ticket: Optional[int] = None
    columns: Dict[OfficeType, ColumnSelectionIn] = Field(default_factory=dict)
    region: Optional[str] = None
    session_token: Optional[str] = None

    @field_validator("columns")
    @classmethod
    def reject_presidential_column(
        cls, value: Dict[OfficeType, ColumnSelectionIn]
    ) -> Dict[OfficeType, ColumnSelectionIn]:
        if OfficeType.PRESIDENTIAL_TICKET in value:
            raise ValueError("The presidential ticket is marked through 'presidential_ticket'.")
        return value

    def to_selection(self) -> BallotSelection:
        return BallotSelection(
            presidential_ticket=self.presidential_ticket,
            columns={
                office: ColumnSelection(list_id=column.list_id, preferences=list(column.preferences))
                for office, column in self.columns.items()
            },
        )


class ColumnResultOut(BaseModel):
    status: VoteStatus
    reason: Optional[str] = None


class ClassificationOut(BaseModel):
    status: VoteStatus
    summary: str
    columns: Dict[OfficeType, ColumnResultOut]
    reasons: List[str]
    recorded: int = 0


class SessionIn(BaseModel):
    country: Optional[str] = None
    region: Optional[str] = None
    utm_source: Optional[str] = None
    utm_medium: Optional[str] = None
    utm_campaign: Optional[str] = None
    referrer: Optional[str] = None


class SessionOut(BaseModel):
    session_token: str
    stored: bool
