"""Engine setup, creation and verification of the biclog data file.

The data file is a single SQLite database. SQLAlchemy Core (not ORM) is
used because biclog is a short-lived CLI process: one engine per
invocation, one transaction per row operation.

The default rollback journal is kept (no WAL) so the data lives in the
one file the user named.
"""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, inspect, insert, select
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import DatabaseError, OperationalError, SQLAlchemyError

from biclog.errors import (
    AlreadyExistsError,
    DataFileNotFoundError,
    FileAccessError,
    InvalidFormatError,
)
from biclog.infrastructure.database.schema import (
    APPLICATION_NAME,
    DATA_FORMAT_VERSION,
    MARKER_ROWS,
    PROP_APPLICATION_NAME,
    PROP_DATA_FORMAT_VERSION,
    REQUIRED_TABLES,
    metadata,
    properties,
)


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with foreign keys enabled.

    The URL is built from parts so that characters such as ``?`` or ``#``
    in a user-supplied path stay part of the file name.
    """
    engine = create_engine(URL.create("sqlite", database=str(db_path)), echo=False)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def create_data_file(db_path: Path) -> Engine:
    """Create a new data file at *db_path* with the full schema.

    Writes every table from :data:`schema.metadata` and the marker rows
    in ``properties``. A file left behind by a failed creation is removed.

    Raises:
        AlreadyExistsError: If anything already exists at *db_path*.
        FileAccessError: If the file or its schema cannot be written.
    """
    if db_path.exists():
        raise AlreadyExistsError(str(db_path))

    engine = create_db_engine(db_path)
    try:
        with engine.begin() as conn:
            metadata.create_all(conn)
            conn.execute(
                insert(properties),
                [{"key": key, "value": value} for key, value in MARKER_ROWS.items()],
            )
    except SQLAlchemyError as exc:
        engine.dispose()
        with contextlib.suppress(OSError):
            db_path.unlink(missing_ok=True)
        msg = f"cannot create data file {db_path}"
        raise FileAccessError(msg, {"path": str(db_path)}) from exc
    return engine


def open_data_file(db_path: Path) -> Engine:
    """Open an existing data file and check that it is a biclog file.

    Raises:
        DataFileNotFoundError: If *db_path* does not exist.
        InvalidFormatError: If the file is not a biclog data file.
        FileAccessError: If SQLite cannot open the file at all.
    """
    if not db_path.exists():
        raise DataFileNotFoundError(str(db_path))
    if not db_path.is_file():
        raise InvalidFormatError(str(db_path), "not a regular file")

    engine = create_db_engine(db_path)
    try:
        verify_schema(engine, db_path)
    except BaseException:
        engine.dispose()
        raise
    return engine


def verify_schema(engine: Engine, db_path: Path) -> None:
    """Check table presence and the ``properties`` marker rows."""
    try:
        tables = set(inspect(engine).get_table_names())
        missing = REQUIRED_TABLES - tables
        if missing:
            raise InvalidFormatError(str(db_path), f"missing tables: {', '.join(sorted(missing))}")

        with engine.connect() as conn:
            rows = conn.execute(select(properties.c.key, properties.c.value)).all()
    except OperationalError as exc:
        msg = f"cannot open data file {db_path}"
        raise FileAccessError(msg, {"path": str(db_path)}) from exc
    except DatabaseError as exc:
        raise InvalidFormatError(str(db_path), "not an SQLite database") from exc

    marker = {str(row.key): str(row.value) for row in rows}
    if marker.get(PROP_APPLICATION_NAME) != APPLICATION_NAME:
        raise InvalidFormatError(str(db_path), "missing application marker")
    version = marker.get(PROP_DATA_FORMAT_VERSION)
    if version != DATA_FORMAT_VERSION:
        raise InvalidFormatError(str(db_path), f"unsupported data format version {version!r}")
