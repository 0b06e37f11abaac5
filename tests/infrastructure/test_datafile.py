"""Tests for the DataFile storage gateway."""

from pathlib import Path

import pytest

from biclog.domain.entities import BICYCLE_TYPE, CATEGORY, BicycleType
from biclog.errors import (
    AlreadyExistsError,
    DataFileNotFoundError,
    InvalidFormatError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from biclog.infrastructure.datafile import DataFile


class TestLifecycle:
    def test_create_new_then_open_is_empty(self, data_path: Path) -> None:
        DataFile.create_new(data_path).close()
        with DataFile.open(data_path) as data:
            assert len(data.type_list()) == 0

    def test_create_new_existing(self, initialized_path: Path) -> None:
        with pytest.raises(AlreadyExistsError):
            DataFile.create_new(initialized_path)

    def test_open_missing(self, data_path: Path) -> None:
        with pytest.raises(DataFileNotFoundError):
            DataFile.open(data_path)

    def test_open_invalid(self, data_path: Path) -> None:
        data_path.write_bytes(b"not a database " * 20)
        with pytest.raises(InvalidFormatError):
            DataFile.open(data_path)

    def test_accepts_str_path(self, data_path: Path) -> None:
        with DataFile.create_new(str(data_path)) as data:
            assert data.path == data_path

    def test_close_is_idempotent(self, data_file: DataFile) -> None:
        data_file.close()
        data_file.close()
        assert data_file.closed

    def test_context_manager_closes(self, initialized_path: Path) -> None:
        with DataFile.open(initialized_path) as data:
            assert not data.closed
        assert data.closed

    def test_context_manager_closes_on_error(self, initialized_path: Path) -> None:
        with pytest.raises(NotFoundError), DataFile.open(initialized_path) as data:
            data.type_get(1)
        assert data.closed

    def test_use_after_close(self, data_file: DataFile) -> None:
        data_file.close()
        with pytest.raises(StorageError):
            data_file.type_list()


class TestBicycleTypes:
    def test_scenario_add_and_list(self, data_file: DataFile) -> None:
        data_file.type_add("Road")
        data_file.type_add("MTB")
        assert data_file.type_list() == [
            BicycleType(id=1, name="Road"),
            BicycleType(id=2, name="MTB"),
        ]

    def test_add_returns_assigned_id(self, data_file: DataFile) -> None:
        created = data_file.type_add("Road")
        assert created == BicycleType(id=1, name="Road")

    def test_add_empty_name_leaves_store_unchanged(self, data_file: DataFile) -> None:
        data_file.type_add("Road")
        with pytest.raises(ValidationError):
            data_file.type_add("")
        assert [t.name for t in data_file.type_list()] == ["Road"]

    def test_update_scenario(self, data_file: DataFile) -> None:
        data_file.type_add("Road")
        data_file.type_add("MTB")
        data_file.type_update(BicycleType(id=1, name="Gravel"))
        assert data_file.type_list() == [
            BicycleType(id=1, name="Gravel"),
            BicycleType(id=2, name="MTB"),
        ]

    def test_delete(self, data_file: DataFile) -> None:
        road = data_file.type_add("Road")
        data_file.type_delete(road)
        assert len(data_file.type_list()) == 0

    def test_persists_across_handles(self, data_path: Path) -> None:
        with DataFile.create_new(data_path) as data:
            data.type_add("Road")
        with DataFile.open(data_path) as data:
            assert data.type_get(1).name == "Road"


class TestRepositories:
    def test_repository_is_cached(self, data_file: DataFile) -> None:
        assert data_file.repository(BICYCLE_TYPE) is data_file.repository(BICYCLE_TYPE)

    def test_kinds_are_independent(self, data_file: DataFile) -> None:
        data_file.repository(CATEGORY).add("Commute")
        assert len(data_file.type_list()) == 0
        assert data_file.repository(CATEGORY).list_all().ids == [1]
