"""EntityService — add, list, edit and delete records of one entity kind.

Each method opens the data file, performs one single-row operation and
closes the file again. Edit and delete look the record up by id before
touching it, so a missing id fails with ``NOT_FOUND`` and leaves the
file unchanged.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from biclog.domain.entities import BICYCLE_TYPE, EntityKind, clean_name
from biclog.errors import BiclogError
from biclog.services.base import BaseService
from biclog.services.result import ServiceResult

if TYPE_CHECKING:
    from biclog.domain.entities import Entity

logger = structlog.get_logger(__name__)


def _record_dict(record: Entity) -> dict[str, Any]:
    return {"id": record.id, "name": record.name}


class EntityService(BaseService):
    """CRUD over the entity kind given at construction (bicycle types by default)."""

    def __init__(self, data_path: str | Path | None, kind: EntityKind = BICYCLE_TYPE) -> None:
        super().__init__(data_path)
        self._kind = kind

    def _op(self, verb: str) -> str:
        return f"{verb}_{self._kind.key}"

    def _checked_name(self, name: str) -> str:
        # an unset data file is reported before a missing name
        _ = self.data_path
        return clean_name(name, label=f"{self._kind.label} name")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add(self, name: str) -> ServiceResult:
        """Insert a new record; ``data`` carries the assigned id and name."""
        op = self._op("add")
        try:
            cleaned = self._checked_name(name)
            with self._open() as data:
                record = data.repository(self._kind).add(cleaned)
        except BiclogError as exc:
            return self._failure(op, exc)

        logger.debug("entity_added", kind=self._kind.key, id=record.id, name=record.name)
        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": self._kind.key, **_record_dict(record)},
        )

    def list_all(self) -> ServiceResult:
        """All records ordered by id; an empty store is not an error."""
        op = self._op("list")
        try:
            with self._open() as data:
                records = data.repository(self._kind).list_all()
        except BiclogError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": self._kind.key,
                "count": len(records),
                "items": [_record_dict(r) for r in records],
            },
        )

    def edit(self, entity_id: int, new_name: str) -> ServiceResult:
        """Rename the record with *entity_id*; ``data`` has old and new names."""
        op = self._op("edit")
        try:
            cleaned = self._checked_name(new_name)
            with self._open() as data:
                repo = data.repository(self._kind)
                current = repo.get(entity_id)
                updated = repo.update(current.model_copy(update={"name": cleaned}))
        except BiclogError as exc:
            return self._failure(op, exc)

        logger.debug(
            "entity_renamed",
            kind=self._kind.key,
            id=entity_id,
            old_name=current.name,
            new_name=updated.name,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "kind": self._kind.key,
                "id": entity_id,
                "old_name": current.name,
                "new_name": updated.name,
            },
        )

    def delete(self, entity_id: int) -> ServiceResult:
        """Remove the record with *entity_id*; ``data`` is the deleted record."""
        op = self._op("delete")
        try:
            with self._open() as data:
                repo = data.repository(self._kind)
                deleted = repo.delete(repo.get(entity_id))
        except BiclogError as exc:
            return self._failure(op, exc)

        logger.debug("entity_deleted", kind=self._kind.key, id=deleted.id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"kind": self._kind.key, **_record_dict(deleted)},
        )
