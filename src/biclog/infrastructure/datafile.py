"""DataFile — the storage gateway owning one biclog data file.

A DataFile is created per command invocation, used as a context manager
and closed before the command returns::

    with DataFile.open(path) as data:
        data.type_add("Road")

Entity CRUD goes through :meth:`DataFile.repository`; the ``type_*``
methods are shortcuts for the bicycle-type repository.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from biclog.domain.entities import BICYCLE_TYPE, BicycleType, EntityKind
from biclog.errors import StorageError
from biclog.infrastructure.database.engine import create_data_file, open_data_file
from biclog.infrastructure.repositories.entities import EntityRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from biclog.domain.collections import EntityList


class DataFile:
    """Live handle on an opened (or freshly created) data file."""

    def __init__(self, path: Path, engine: Engine) -> None:
        self._path = path
        self._engine: Engine | None = engine
        self._repositories: dict[str, EntityRepository[Any]] = {}

    @classmethod
    def create_new(cls, path: str | Path) -> DataFile:
        """Create the data file at *path* and return a handle on it.

        Raises:
            AlreadyExistsError: If *path* already exists.
            FileAccessError: On filesystem failure.
        """
        db_path = Path(path)
        return cls(db_path, create_data_file(db_path))

    @classmethod
    def open(cls, path: str | Path) -> DataFile:
        """Open an existing data file.

        Raises:
            DataFileNotFoundError: If *path* does not exist.
            InvalidFormatError: If *path* is not a biclog data file.
        """
        db_path = Path(path)
        return cls(db_path, open_data_file(db_path))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._engine is None

    @property
    def engine(self) -> Engine:
        """The underlying SQLAlchemy engine (raises once closed)."""
        if self._engine is None:
            msg = f"data file {self._path} is closed"
            raise StorageError(msg, {"path": str(self._path)})
        return self._engine

    def close(self) -> None:
        """Release the engine. Safe to call more than once."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._repositories.clear()

    def __enter__(self) -> DataFile:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Repositories
    # ------------------------------------------------------------------

    def repository(self, kind: EntityKind) -> EntityRepository[Any]:
        """CRUD repository for *kind*, shared for the life of this handle."""
        repo = self._repositories.get(kind.key)
        if repo is None:
            repo = EntityRepository(self.engine, kind)
            self._repositories[kind.key] = repo
        return repo

    def type_add(self, name: str) -> BicycleType:
        return self.repository(BICYCLE_TYPE).add(name)

    def type_list(self) -> EntityList[BicycleType]:
        return self.repository(BICYCLE_TYPE).list_all()

    def type_get(self, type_id: int) -> BicycleType:
        return self.repository(BICYCLE_TYPE).get(type_id)

    def type_update(self, record: BicycleType) -> BicycleType:
        return self.repository(BICYCLE_TYPE).update(record)

    def type_delete(self, record: BicycleType) -> BicycleType:
        return self.repository(BICYCLE_TYPE).delete(record)
