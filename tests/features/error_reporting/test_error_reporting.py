import json
import logging
from videoconverter.core.enums import ErrorKind, TaskStage
from videoconverter.features.error_reporting.data.log_sink import LoggingErrorSink
from videoconverter.features.error_reporting.data.repository import SqlErrorRepository
from videoconverter.features.error_reporting.data.sql_models import ErrorRecordModel
from videoconverter.features.error_reporting.domain.interfaces import IErrorSink
from videoconverter.features.error_reporting.domain.models import ErrorRecord
from videoconverter.features.error_reporting.service.reporter import ErrorReporter


class ExplodingSink(IErrorSink):
    def record(self, error) -> None:
        raise RuntimeError("sink is down")


def test_record_serializes_stage_and_cause():
    record = ErrorRecord(
        video_id=7,
        stage=TaskStage.TRANSCODING,
        kind=ErrorKind.PROCESS,
        message="failed to convert",
        details="Encoder exited with status 1",
        encoder_output="moov atom not found"
    )

    data = json.loads(record.to_json())

    assert data["video_id"] == 7
    assert data["stage"] == "transcoding"
    assert data["kind"] == "process"
    assert data["error"] == "failed to convert"
    assert data["details"] == "Encoder exited with status 1"
    assert data["encoder_output"] == "moov atom not found"
    assert "time" in data

def test_logging_sink_emits_json_line(caplog):
    record = ErrorRecord(None, TaskStage.PARSING, ErrorKind.PARSE, "failed to parse task", "bad json")

    with caplog.at_level(logging.ERROR):
        LoggingErrorSink().record(record)

    assert "Processing error:" in caplog.text
    assert '"error": "failed to parse task"' in caplog.text

def test_reporter_survives_a_broken_sink(recording_sink, caplog):
    reporter = ErrorReporter([ExplodingSink(), recording_sink])

    record = reporter.report(3, TaskStage.CLEANUP, ErrorKind.FILESYSTEM, "failed to remove merged file", OSError("busy"))

    assert recording_sink.records == [record]
    assert record.details == "busy"
    assert "ExplodingSink failed" in caplog.text

def test_sql_repository_persists_records(db_session):
    repo = SqlErrorRepository()
    repo.record(ErrorRecord(
        video_id=11,
        stage=TaskStage.MERGING,
        kind=ErrorKind.FILESYSTEM,
        message="failed to merge chunks",
        details="No *.chunk files found"
    ))

    row = db_session.query(ErrorRecordModel).filter_by(video_id=11).one()
    assert row.stage == TaskStage.MERGING
    assert row.kind == ErrorKind.FILESYSTEM
    assert row.encoder_output is None

    stored = repo.list_for_video(11)
    assert len(stored) == 1
    assert stored[0].message == "failed to merge chunks"

def test_sql_repository_accepts_records_without_video_id(db_session):
    SqlErrorRepository().record(ErrorRecord(None, TaskStage.PARSING, ErrorKind.PARSE, "failed to parse task", "x"))

    assert db_session.query(ErrorRecordModel).filter(ErrorRecordModel.video_id.is_(None)).count() == 1

def test_default_reporter_logs_and_persists(monkeypatch, db_session):
    from videoconverter.core.config.settings import settings
    monkeypatch.setattr(settings, "PERSIST_ERRORS", True)

    reporter = ErrorReporter.default()

    assert [type(s) for s in reporter.sinks] == [LoggingErrorSink, SqlErrorRepository]

def test_default_reporter_without_persistence(monkeypatch):
    from videoconverter.core.config.settings import settings
    monkeypatch.setattr(settings, "PERSIST_ERRORS", False)

    reporter = ErrorReporter.default()

    assert [type(s) for s in reporter.sinks] == [LoggingErrorSink]

def test_sql_repository_returns_utc_timestamps(db_session):
    from datetime import datetime, timedelta, timezone
    # 14:30 at UTC+2 is 12:30 UTC
    occurred = datetime(2026, 3, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
    repo = SqlErrorRepository()
    repo.record(ErrorRecord(5, TaskStage.CLEANUP, ErrorKind.FILESYSTEM, "failed to remove merged file", "busy",
                            occurred_at=occurred))

    [stored] = repo.list_for_video(5)

    assert stored.occurred_at.tzinfo == timezone.utc
    assert stored.occurred_at == occurred
    assert stored.occurred_at.hour == 12
