"""Generic CRUD repository keyed by :class:`~biclog.domain.entities.EntityKind`.

Every kind shares one shape (integer id + name), so a single class
serves bicycle types, categories and whatever kind is registered next.
Each write runs in its own transaction and touches exactly one row.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Generic, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from biclog.domain.collections import EntityList
from biclog.domain.entities import Entity, EntityKind, clean_name
from biclog.errors import NotFoundError, StorageError
from biclog.infrastructure.database.schema import metadata

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Connection, Table
    from sqlalchemy.engine import Engine

E = TypeVar("E", bound=Entity)


class EntityRepository(Generic[E]):
    """Add/list/get/update/delete for one entity kind."""

    def __init__(self, engine: Engine, kind: EntityKind) -> None:
        self._engine = engine
        self._kind = kind
        self._table: Table = metadata.tables[kind.table_name]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_all(self) -> EntityList[E]:
        """All records ordered by id ascending (empty list when none)."""
        stmt = select(self._table.c.id, self._table.c.name).order_by(self._table.c.id)
        with self._connection("list") as conn:
            rows = conn.execute(stmt).all()
        return EntityList(self._to_record(row.id, row.name) for row in rows)

    def get(self, entity_id: int) -> E:
        """Fetch one record by id.

        Raises:
            NotFoundError: If no row has *entity_id*.
        """
        with self._connection("read") as conn:
            return self._fetch(conn, entity_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, name: str) -> E:
        """Insert a record and return it with its storage-assigned id.

        Raises:
            ValidationError: If *name* is empty.
        """
        cleaned = clean_name(name, label=f"{self._kind.label} name")
        with self._transaction("add") as conn:
            result = conn.execute(insert(self._table).values(name=cleaned))
            new_id = result.inserted_primary_key[0]
        return self._to_record(new_id, cleaned)

    def update(self, record: E) -> E:
        """Rewrite the name of the row matching ``record.id``.

        Raises:
            ValidationError: If ``record.name`` is empty.
            NotFoundError: If no row has ``record.id``.
        """
        cleaned = clean_name(record.name, label=f"{self._kind.label} name")
        with self._transaction("update") as conn:
            self._fetch(conn, record.id)
            conn.execute(
                update(self._table).where(self._table.c.id == record.id).values(name=cleaned)
            )
        return self._to_record(record.id, cleaned)

    def delete(self, record: E) -> E:
        """Remove the row matching ``record.id`` and return what was stored.

        Raises:
            NotFoundError: If no row has ``record.id``.
        """
        with self._transaction("delete") as conn:
            stored = self._fetch(conn, record.id)
            conn.execute(delete(self._table).where(self._table.c.id == record.id))
        return stored

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fetch(self, conn: Connection, entity_id: int) -> E:
        row = conn.execute(
            select(self._table.c.id, self._table.c.name).where(self._table.c.id == entity_id)
        ).first()
        if row is None:
            raise NotFoundError(
                f"no {self._kind.label} with id {entity_id}",
                {"id": entity_id, "kind": self._kind.key},
            )
        return self._to_record(row.id, row.name)

    def _to_record(self, entity_id: int, name: str) -> E:
        return self._kind.record(id=int(entity_id), name=str(name))  # type: ignore[return-value]

    @contextmanager
    def _connection(self, action: str) -> Iterator[Connection]:
        try:
            with self._engine.connect() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise self._storage_error(action, exc) from exc

    @contextmanager
    def _transaction(self, action: str) -> Iterator[Connection]:
        try:
            with self._engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise self._storage_error(action, exc) from exc

    def _storage_error(self, action: str, exc: SQLAlchemyError) -> StorageError:
        cause = getattr(exc, "orig", None) or exc
        return StorageError(
            f"cannot {action} {self._kind.label}: {cause}",
            {"kind": self._kind.key, "action": action},
        )
