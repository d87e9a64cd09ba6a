# File: tests/conftest.py

import pytest
import os
import sys
import stat
import tempfile
from pathlib import Path

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Point the app at a throwaway database BEFORE settings are imported
TEST_DB_PATH = Path(tempfile.gettempdir()) / f"videoconverter_test_{os.getpid()}.db"
os.environ.setdefault("CONVERTER_DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")

from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

from videoconverter.core.database.connection import engine, SessionLocal
from videoconverter.features.error_reporting.domain.interfaces import IErrorSink


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures the DB exists and has every table.
    """
    if not database_exists(engine.url):
        create_database(engine.url)

    from videoconverter.core.database.connection import init_db
    init_db()

    yield

    engine.dispose()
    if str(TEST_DB_PATH) in str(engine.url) and TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test. Empties all tables.
    """
    from videoconverter.core.database.base import Base

    with engine.connect() as conn:
        trans = conn.begin()
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(text(f'DELETE FROM "{table.name}";'))
        trans.commit()

    yield


@pytest.fixture(scope="function")
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


class RecordingSink(IErrorSink):
    """Keeps reported records in memory for assertions."""

    def __init__(self):
        self.records = []

    def record(self, error) -> None:
        self.records.append(error)


@pytest.fixture
def recording_sink():
    return RecordingSink()


@pytest.fixture
def upload_dir(tmp_path):
    """An empty task directory, e.g. /media/uploads/1"""
    d = tmp_path / "uploads" / "1"
    d.mkdir(parents=True)
    return d


def _write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def copy_encoder(tmp_path):
    """
    Stub encoder honouring `encoder -i <input> -f dash ... <manifest>`:
    copies the input file to the manifest path.
    """
    return _write_script(
        tmp_path / "copy_encoder.sh",
        'input="$2"\n'
        'for last; do :; done\n'
        'cp "$input" "$last"\n'
    )


@pytest.fixture
def failing_encoder(tmp_path):
    return _write_script(
        tmp_path / "failing_encoder.sh",
        'echo "encoder starting"\n'
        'echo "Invalid data found when processing input" >&2\n'
        'exit 1\n'
    )


@pytest.fixture
def hanging_encoder(tmp_path):
    return _write_script(tmp_path / "hanging_encoder.sh", "exec sleep 10\n")
