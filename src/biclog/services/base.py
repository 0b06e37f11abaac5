"""BaseService — shared plumbing for biclog services.

Every service receives the resolved data file path at construction time.
The file is opened per operation through :meth:`BaseService._open` and
closed on every return path, including failures.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from biclog.errors import BiclogError, ValidationError
from biclog.infrastructure.datafile import DataFile
from biclog.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = structlog.get_logger(__name__)

MISSING_FILE_MESSAGE = "missing information about data file. Specify it with --file or -f flag"


class BaseService:
    """Base for service classes working on one data file.

    Usage::

        class EntityService(BaseService):
            def add(self, name: str) -> ServiceResult:
                try:
                    with self._open() as data:
                        ...
                except BiclogError as exc:
                    return self._failure(op, exc)
    """

    def __init__(self, data_path: str | Path | None) -> None:
        self._data_path = Path(data_path) if data_path else None

    @property
    def data_path(self) -> Path:
        """The data file path.

        Raises:
            ValidationError: If no path was configured.
        """
        if self._data_path is None:
            raise ValidationError(MISSING_FILE_MESSAGE, {"field": "file"})
        return self._data_path

    @contextmanager
    def _open(self) -> Iterator[DataFile]:
        path = self.data_path
        with DataFile.open(path) as data:
            logger.debug("data_file_opened", path=str(path))
            yield data
        logger.debug("data_file_closed", path=str(path))

    @staticmethod
    def _failure(op: str, exc: BiclogError) -> ServiceResult:
        """Convert a typed biclog error into a failed ServiceResult."""
        logger.debug("operation_failed", op=op, code=exc.code, error=exc.message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.details),
        )
