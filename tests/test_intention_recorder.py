import logging
import sqlite3
from pathlib import Path

from analytics import IntentionRecorder, SessionContext, build_intentions
from ballot import BallotSelection, ColumnSelection, validate_ballot
from roster import OfficeType, RosterAssembler


def _count(db_path: Path, table: str) -> int:
    with sqlite3.connect(db_path) as conn:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def test_session_context_is_anonymous():
    session = SessionContext.new(
        user_agent="Mozilla/5.0 (iPhone; CPU iPhone OS 17_0)",
        query_params={"utm_source": "whatsapp", "utm_medium": ""},
        referrer="https://example.org/" + "x" * 600,
        country="PE",
        region="Lima",
    )

    assert len(session.token) == 36
    assert session.is_mobile
    assert session.utm_source == "whatsapp"
    assert session.utm_medium is None
    assert len(session.referrer) == 500
    assert SessionContext.new().token != session.token
    assert not SessionContext.new(user_agent="Mozilla/5.0 (X11; Linux x86_64)").is_mobile


def test_start_session_ignores_duplicates(tmp_path: Path):
    db_path = tmp_path / "analytics.db"
    recorder = IntentionRecorder(db_path=db_path)
    session = SessionContext.new(country="PE")

    assert recorder.start_session(session)
    assert recorder.start_session(session)
    assert _count(db_path, "sessions") == 1


def test_intentions_cover_every_column(sample_rows):
    dataset = RosterAssembler().assemble(sample_rows, "ANCASH")
    selection = BallotSelection(
        presidential_ticket=1366,
        columns={
            OfficeType.DEPUTY: ColumnSelection(2840, [1, 1]),
            OfficeType.NATIONAL_SENATOR: ColumnSelection(22, []),
        },
    )

    intentions = build_intentions(selection, validate_ballot(selection), dataset)

    by_office = {i.office: i for i in intentions}
    assert [i.office for i in intentions] == list(OfficeType)
    assert by_office[OfficeType.PRESIDENTIAL_TICKET].organization_name == "FUERZA POPULAR"
    assert by_office[OfficeType.PRESIDENTIAL_TICKET].is_valid
    assert by_office[OfficeType.DEPUTY].is_null
    assert not by_office[OfficeType.DEPUTY].is_valid
    assert by_office[OfficeType.NATIONAL_SENATOR].organization_name == "RENOVACIÓN POPULAR"
    assert by_office[OfficeType.REGIONAL_SENATOR].is_blank
    assert by_office[OfficeType.REGIONAL_SENATOR].organization_id is None


def test_record_persists_one_row_per_column(tmp_path: Path):
    db_path = tmp_path / "analytics.db"
    recorder = IntentionRecorder(db_path=db_path)
    session = SessionContext.new(region="Cusco")
    selection = BallotSelection(presidential_ticket=5)

    written = recorder.record(session, build_intentions(selection, validate_ballot(selection)))

    assert written == len(OfficeType)
    stored = recorder.fetch_intentions(session.token)
    assert stored[0]["office"] == "FORMULA_PRESIDENCIAL"
    assert stored[0]["organization_id"] == 5
    assert stored[0]["organization_name"] == ""
    assert stored[0]["is_valid"] == 1
    assert all(row["is_blank"] == 1 for row in stored[1:])


def test_record_without_token_or_rows_is_noop(tmp_path: Path):
    recorder = IntentionRecorder(db_path=tmp_path / "analytics.db")

    assert recorder.record(SessionContext(token=""), build_intentions(BallotSelection(), validate_ballot(BallotSelection()))) == 0
    assert recorder.record(SessionContext.new(), []) == 0


def test_storage_failures_are_logged_not_raised(tmp_path: Path, caplog):
    db_path = tmp_path / "analytics.db"
    recorder = IntentionRecorder(db_path=db_path)
    with sqlite3.connect(db_path) as conn:
        conn.execute("DROP TABLE vote_intentions")
        conn.execute("DROP TABLE sessions")
        conn.commit()
    session = SessionContext.new()
    selection = BallotSelection(presidential_ticket=1)

    with caplog.at_level(logging.WARNING, logger="analytics.recorder"):
        written = recorder.record(session, build_intentions(selection, validate_ballot(selection)))
        stored = recorder.start_session(session)

    assert written == 0
    assert stored is False
    assert "Could not store" in caplog.text
