"""InitService — create a new data file."""

from __future__ import annotations

import structlog

from biclog.errors import BiclogError
from biclog.infrastructure.datafile import DataFile
from biclog.services.base import BaseService
from biclog.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class InitService(BaseService):
    """Creates the data file and its schema."""

    def init_data_file(self) -> ServiceResult:
        """Create a fresh data file at the configured path.

        Fails with ``ALREADY_EXISTS`` if anything is already there.
        """
        op = "init"
        try:
            path = self.data_path
            with DataFile.create_new(path):
                logger.debug("data_file_created", path=str(path))
        except BiclogError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"path": str(path)})
