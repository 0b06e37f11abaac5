"""SQLAlchemy Core table definitions for the biclog data file.

``bicycles`` and ``trips`` only reserve their names and primary keys;
their columns arrive with the verbs that use them.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

APPLICATION_NAME = "biclog"
DATA_FORMAT_VERSION = "1"

PROP_APPLICATION_NAME = "application_name"
PROP_DATA_FORMAT_VERSION = "data_format_version"

metadata = MetaData()

properties = Table(
    "properties",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text, nullable=False),
)

bicycle_types = Table(
    "bicycle_types",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    sqlite_autoincrement=True,
)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    sqlite_autoincrement=True,
)

# Placeholders
bicycles = Table(
    "bicycles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    sqlite_autoincrement=True,
)

trips = Table(
    "trips",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    sqlite_autoincrement=True,
)

REQUIRED_TABLES = frozenset(metadata.tables)

MARKER_ROWS: dict[str, str] = {
    PROP_APPLICATION_NAME: APPLICATION_NAME,
    PROP_DATA_FORMAT_VERSION: DATA_FORMAT_VERSION,
}
