"""Repositories — SQL for entity CRUD, one class generic over entity kinds."""

from biclog.infrastructure.repositories.entities import EntityRepository

__all__ = ["EntityRepository"]
