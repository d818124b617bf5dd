"""FastAPI application serving the ballot simulator."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set

from fastapi import FastAPI, HTTPException, Request

from analytics import IntentionRecorder, SessionContext, build_intentions
from ballot import COLUMN_CONFIGS, VOTING_RULES, validate_ballot
from ballot.validator import BallotClassification
from roster import OfficeType, RosterAssembler, SimulatorDataset, load_snapshot, normalize_region

from .config import SimulatorSettings
from .schemas import (
    BallotIn,
    ClassificationOut,
    ColumnConfigOut,
    ColumnResultOut,
    DatasetOut,
    ElectoralListOut,
    SessionIn,
    SessionOut,
)

LOGGER = logging.getLogger(__name__)


class RosterCatalog:
    """Read-only access to the assembled roster.

    Datasets are cached only for the national view and for regions present in
    the roster, so arbitrary region strings cannot grow the cache.
    """

    def __init__(self, rows: Sequence[Mapping[str, Any]], assembler: RosterAssembler) -> None:
        self.rows = list(rows)
        self.assembler = assembler
        self._datasets: Dict[str, SimulatorDataset] = {}
        self._regions: Optional[List[str]] = None
        self._region_keys: Optional[Set[str]] = None

    def dataset(self, region: str | None = None) -> SimulatorDataset:
        key = normalize_region(region)
        cached = self._datasets.get(key)
        if cached is None:
            cached = self.assembler.assemble(self.rows, region or None)
            if not key or key in self._known_region_keys():
                self._datasets[key] = cached
        # Echo the region as this caller spelled it.
        return replace(cached, region=region or None)

    def regions(self) -> List[str]:
        if self._regions is None:
            self._regions = self.assembler.list_regions(self.rows)
        return list(self._regions)

    def _known_region_keys(self) -> Set[str]:
        if self._region_keys is None:
            self._region_keys = {normalize_region(name) for name in self.regions()}
        return self._region_keys


def create_app(
    settings: SimulatorSettings | None = None,
    *,
    rows: Sequence[Mapping[str, Any]] | None = None,
) -> FastAPI:
    """Build the simulator application.

    ``rows`` replaces the snapshot stored at ``settings.dataset_path``; it is
    mainly useful for tests.
    """

    settings = settings or SimulatorSettings.from_env()
    if rows is None:
        rows = load_snapshot(settings.dataset_path)
    catalog = RosterCatalog(rows, RosterAssembler(process_id=settings.process_id))
    recorder = _open_recorder(settings)

    app = FastAPI(title="Simulador de Cédula - Elecciones Generales 2026")
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.recorder = recorder

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok", "rows": len(catalog.rows)}

    @app.get("/regions")
    def regions() -> List[str]:
        return catalog.regions()

    @app.get("/ballot", response_model=DatasetOut)
    def ballot(region: str | None = None) -> DatasetOut:
        return DatasetOut.model_validate(catalog.dataset(region))

    @app.get("/ballot/columns", response_model=List[ColumnConfigOut])
    def ballot_columns() -> List[ColumnConfigOut]:
        return [ColumnConfigOut.model_validate(config) for config in COLUMN_CONFIGS]

    @app.get("/rules")
    def rules() -> Dict[str, object]:
        return VOTING_RULES

    @app.get("/candidates/{office}", response_model=List[ElectoralListOut])
    def candidates(office: str, region: str | None = None) -> List[ElectoralListOut]:
        try:
            office_type = OfficeType(office.upper())
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown office {office!r}") from exc
        lists = catalog.dataset(region).lists(office_type)
        return [ElectoralListOut.model_validate(item) for item in lists]

    @app.post("/sessions", response_model=SessionOut)
    def start_session(payload: SessionIn, request: Request) -> SessionOut:
        query = {
            key: value
            for key, value in (
                ("utm_source", payload.utm_source),
                ("utm_medium", payload.utm_medium),
                ("utm_campaign", payload.utm_campaign),
            )
            if value
        }
        session = SessionContext.new(
            user_agent=request.headers.get("user-agent"),
            query_params=query,
            referrer=payload.referrer,
            country=payload.country,
            region=payload.region,
        )
        stored = recorder.start_session(session) if recorder is not None else False
        return SessionOut(session_token=session.token, stored=stored)

    @app.post("/ballot/validate", response_model=ClassificationOut)
    def check_ballot(payload: BallotIn) -> ClassificationOut:
        selection = payload.to_selection()
        classification = validate_ballot(selection)
        recorded = 0
        if recorder is not None and payload.session_token:
            intentions = build_intentions(selection, classification, catalog.dataset(payload.region))
            session = SessionContext.resume(payload.session_token, region=payload.region)
            recorded = recorder.record(session, intentions)
        LOGGER.debug("Ballot checked: %s (%d intentions recorded)", classification.status.value, recorded)
        return _classification_out(classification, recorded)

    return app


def _open_recorder(settings: SimulatorSettings) -> IntentionRecorder | None:
    if not settings.analytics_enabled:
        return None
    try:
        return IntentionRecorder(db_path=settings.analytics_db_path)
    except (sqlite3.Error, OSError) as exc:
        LOGGER.warning(
            "Analytics disabled: cannot open %s (%s)", settings.analytics_db_path, exc
        )
        return None


def _classification_out(classification: BallotClassification, recorded: int) -> ClassificationOut:
    return ClassificationOut(
        status=classification.status,
        summary=classification.summary,
        columns={
            office: ColumnResultOut(status=result.status, reason=result.reason)
            for office, result in classification.columns.items()
        },
        reasons=list(classification.reasons),
        recorded=recorded,
    )
