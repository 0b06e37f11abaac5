"""SQLite data file engine and schema via SQLAlchemy Core."""

from biclog.infrastructure.database.engine import (
    create_data_file,
    create_db_engine,
    open_data_file,
    verify_schema,
)
from biclog.infrastructure.database.schema import (
    bicycle_types,
    bicycles,
    categories,
    metadata,
    properties,
    trips,
)

__all__ = [
    "bicycle_types",
    "bicycles",
    "categories",
    "create_data_file",
    "create_db_engine",
    "metadata",
    "open_data_file",
    "properties",
    "trips",
    "verify_schema",
]
