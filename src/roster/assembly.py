"""Roster assembly: from registry rows to ordered electoral lists.

This module provides :class:`RosterAssembler`, which turns the flat candidate
feed published by the electoral registry into the :class:`SimulatorDataset`
rendered by the ballot simulator. The feed is third-party data and its quality
cannot be guaranteed, so assembly degrades instead of failing:

* rows from other election processes and excluded candidacies are dropped;
* the three presidential-ticket office codes are merged into a single list per
  organization so the ticket renders as one ballot box;
* regional offices are filtered by region using accent-insensitive comparison,
  and stay empty until a region is chosen;
* candidates without a list position sort after the ranked ones, and
  organizations missing from the draw table sort after the drawn ones.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, MutableMapping, Optional, Sequence

from .draw_order import BALLOT_POSITIONS, ballot_position
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
    "ANDEAN_PARLIAMENT_CODE",
    "DEPUTY_CODE",
    "MISSING_POSITION",
    "NATIONAL_UNIT",
    "PRESIDENTIAL_OFFICE_CODES",
    "PROCESS_ID",
    "RosterAssembler",
    "SENATOR_CODE",
]

LOGGER = logging.getLogger(__name__)

PROCESS_ID = 124

PRESIDENT_CODE = 1
FIRST_VICE_PRESIDENT_CODE = 2
SECOND_VICE_PRESIDENT_CODE = 3
ANDEAN_PARLIAMENT_CODE = 5
DEPUTY_CODE = 15
SENATOR_CODE = 16
PRESIDENTIAL_OFFICE_CODES = frozenset(
    {PRESIDENT_CODE, FIRST_VICE_PRESIDENT_CODE, SECOND_VICE_PRESIDENT_CODE}
)

# Electoral sub-unit code of the single nation-wide district.
NATIONAL_UNIT = "000000"
MISSING_POSITION = 999
UNNAMED_ORGANIZATION = "Sin nombre"

RawRow = Mapping[str, object] | CandidateRecord


class RosterAssembler:
    """Build :class:`SimulatorDataset` values from registry rows."""

    def __init__(
        self,
        process_id: int = PROCESS_ID,
        ballot_positions: Mapping[int, int] = BALLOT_POSITIONS,
    ) -> None:
        self.process_id = process_id
        self.ballot_positions = ballot_positions

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def assemble(self, rows: Iterable[RawRow], region: str | None = None) -> SimulatorDataset:
        """Assemble every ballot column.

        Parameters
        ----------
        rows:
            Registry rows (mappings using the registry keys) or already parsed
            :class:`CandidateRecord` instances.
        region:
            Region whose regional senators and deputies should be included.
            When falsy both regional columns are empty.
        """

        records = self._active_records(rows)
        buckets = self._partition(records, region)
        dataset = SimulatorDataset(
            presidential_tickets=tuple(
                self._group(buckets[OfficeType.PRESIDENTIAL_TICKET], OfficeType.PRESIDENTIAL_TICKET)
            ),
            national_senators=tuple(
                self._group(buckets[OfficeType.NATIONAL_SENATOR], OfficeType.NATIONAL_SENATOR)
            ),
            regional_senators=tuple(
                self._group(buckets[OfficeType.REGIONAL_SENATOR], OfficeType.REGIONAL_SENATOR)
            ),
            deputies=tuple(self._group(buckets[OfficeType.DEPUTY], OfficeType.DEPUTY)),
            andean_parliament=tuple(
                self._group(buckets[OfficeType.ANDEAN_PARLIAMENT], OfficeType.ANDEAN_PARLIAMENT)
            ),
            region=region or None,
        )
        LOGGER.debug(
            "Assembled roster for region %r: %s",
            region,
            {office.value: len(dataset.lists(office)) for office in OfficeType},
        )
        return dataset

    def lists_for_office(
        self,
        rows: Iterable[RawRow],
        office: OfficeType | str,
        region: str | None = None,
    ) -> List[ElectoralList]:
        """Return the electoral lists of a single office.

        Raises
        ------
        ValueError
            If ``office`` is not one of the :class:`OfficeType` values.
        """

        office = OfficeType(office)
        return list(self.assemble(rows, region).lists(office))

    def list_regions(self, rows: Iterable[RawRow]) -> List[str]:
        """Return the distinct regions of regionally elected candidacies."""

        regions = set()
        for row in rows:
            record = CandidateRecord.from_raw(row)
            if record.region and record.electoral_unit != NATIONAL_UNIT:
                regions.add(record.region.strip().upper())
        return sorted(regions, key=lambda name: (normalize_region(name), name))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _active_records(self, rows: Iterable[RawRow]) -> List[CandidateRecord]:
        active: List[CandidateRecord] = []
        skipped = 0
        for row in rows:
            record = CandidateRecord.from_raw(row)
            if record.process_id != self.process_id:
                skipped += 1
                continue
            if record.raw_status.upper() == CandidateStatus.EXCLUDED.value:
                skipped += 1
                continue
            active.append(record)
        if skipped:
            LOGGER.debug("Discarded %d rows outside process %s or excluded", skipped, self.process_id)
        return active

    def _partition(
        self,
        records: Sequence[CandidateRecord],
        region: str | None,
    ) -> Dict[OfficeType, List[CandidateRecord]]:
        buckets: Dict[OfficeType, List[CandidateRecord]] = {office: [] for office in OfficeType}
        wanted_region = normalize_region(region) if region else ""

        for record in records:
            code = record.office_code
            if code in PRESIDENTIAL_OFFICE_CODES:
                buckets[OfficeType.PRESIDENTIAL_TICKET].append(record)
            elif code == ANDEAN_PARLIAMENT_CODE:
                buckets[OfficeType.ANDEAN_PARLIAMENT].append(record)
            elif code == SENATOR_CODE:
                if record.electoral_unit == NATIONAL_UNIT:
                    buckets[OfficeType.NATIONAL_SENATOR].append(record)
                elif wanted_region and normalize_region(record.region) == wanted_region:
                    buckets[OfficeType.REGIONAL_SENATOR].append(record)
            elif code == DEPUTY_CODE:
                if wanted_region and normalize_region(record.region) == wanted_region:
                    buckets[OfficeType.DEPUTY].append(record)
        return buckets

    def _group(
        self,
        records: Iterable[CandidateRecord],
        office: OfficeType,
    ) -> List[ElectoralList]:
        groups: MutableMapping[Optional[int], List[CandidateRecord]] = defaultdict(list)
        for record in records:
            groups[record.organization_id].append(record)

        lists: List[ElectoralList] = []
        for organization_id, members in groups.items():
            members.sort(key=_position_key)
            organization = self._organization(organization_id, members[0])
            candidates = tuple(members)
            if office is OfficeType.PRESIDENTIAL_TICKET:
                lists.append(
                    ElectoralList(
                        organization=organization,
                        office=office,
                        candidates=candidates,
                        head=_at_position(candidates, 1),
                        first_deputy=_at_position(candidates, 2),
                        second_deputy=_at_position(candidates, 3),
                    )
                )
            else:
                lists.append(ElectoralList(organization=organization, office=office, candidates=candidates))

        # Ties (unknown organizations) fall back to the id so output never
        # depends on input row order.
        lists.sort(key=lambda lst: (lst.organization.ballot_position, lst.organization.id))
        return lists

    def _organization(self, organization_id: Optional[int], first: CandidateRecord) -> Organization:
        name = first.organization_name or UNNAMED_ORGANIZATION
        return Organization(
            id=organization_id if organization_id is not None else 0,
            name=name,
            short_code=organization_short_code(first.organization_name),
            ballot_position=ballot_position(organization_id, self.ballot_positions),
        )


def _position_key(record: CandidateRecord) -> int:
    return record.position if record.position is not None else MISSING_POSITION


def _at_position(candidates: Sequence[CandidateRecord], position: int) -> Optional[CandidateRecord]:
    return next((c for c in candidates if c.position == position), None)
