"""Unit tests for the MongoDB repositories with a mocked motor client.

Real database round-trips live in tests/integration/.
"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

from domain.nutrition_log.core.entities import NutritionRecord, UserSettings
from infrastructure.persistence.mongodb import (
    MongoBaseRepository,
    MongoNutritionRecordRepository,
    MongoUserSettingsRepository,
)

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_collection() -> Any:
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()

    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    return collection


@pytest.fixture
def mock_client(mock_collection: Any) -> Any:
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = mock_collection
    return client


def _record(**overrides: Any) -> NutritionRecord:
    values: dict[str, Any] = {
        "age": 30,
        "height": 180,
        "weight": 80,
        "calories": 3098,
        "protein": 232,
        "fat": 103,
        "carbs": 310,
        "gender": "Male",
        "trains_per_week": 3,
        "activity": "Active",
        "goal": "Gain",
        "date": NOW,
        "user_id": "user123",
        "created_at": NOW,
        "updated_at": NOW,
    }
    values.update(overrides)
    return NutritionRecord(**values)


class TestMongoBaseRepository:
    def test_uses_configured_database(self, mock_client, monkeypatch):
        monkeypatch.setenv("MONGODB_DATABASE", "testdb")

        repo = MongoNutritionRecordRepository(mock_client)

        mock_client.__getitem__.assert_called_with("testdb")
        mock_client.__getitem__.return_value.__getitem__.assert_called_with("nutrition_records")
        assert repo.collection is mock_client["testdb"]["nutrition_records"]

    def test_explicit_database_name(self, mock_client):
        MongoUserSettingsRepository(mock_client, database_name="other")

        mock_client.__getitem__.assert_called_with("other")

    def test_datetime_to_storage_requires_timezone(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            MongoBaseRepository.datetime_to_storage(datetime(2024, 5, 1))

    def test_datetime_to_storage_converts_to_utc(self):
        cet = timezone(timedelta(hours=2))

        stored = MongoBaseRepository.datetime_to_storage(datetime(2024, 5, 1, 14, 0, tzinfo=cet))

        assert stored == NOW
        assert stored.utcoffset() == timedelta(0)

    @pytest.mark.parametrize(
        "value",
        [datetime(2024, 5, 1, 12, 0), "2024-05-01T12:00:00", "2024-05-01T12:00:00+00:00", NOW],
    )
    def test_datetime_from_storage(self, value):
        assert MongoBaseRepository.datetime_from_storage(value) == NOW

    def test_datetime_from_storage_rejects_garbage(self):
        with pytest.raises(ValueError):
            MongoBaseRepository.datetime_from_storage(12345)


class TestMongoNutritionRecordRepository:
    """Test MongoNutritionRecordRepository mapping and queries."""

    def test_document_round_trip(self, mock_client):
        repo = MongoNutritionRecordRepository(mock_client)
        record = _record(note="after holidays")

        doc = repo.to_document(record)

        assert doc["_id"] == str(record.record_id)
        assert doc["calories"] == 3098
        assert doc["trains_per_week"] == 3
        assert doc["date"] == NOW
        restored = repo.from_document(doc)
        assert restored == record

    def test_legacy_document_defaults(self, mock_client):
        repo = MongoNutritionRecordRepository(mock_client)
        doc = {
            "_id": str(uuid4()),
            "date": "2024-05-01T12:00:00",
            "age": 30,
            "height": 180,
            "weight": 80,
            "calories": 2500,
            "created_at": NOW,
            "updated_at": NOW,
        }

        record = repo.from_document(doc)

        assert record.gender == "Male"
        assert record.protein == 0
        assert record.user_id is None
        assert record.date == NOW

    def test_missing_field_raises_value_error(self, mock_client):
        repo = MongoNutritionRecordRepository(mock_client)

        with pytest.raises(ValueError, match="missing field"):
            repo.from_document({"_id": str(uuid4())})

    @pytest.mark.asyncio
    async def test_save_upserts(self, mock_client, mock_collection):
        repo = MongoNutritionRecordRepository(mock_client)
        record = _record()

        await repo.save(record)

        filter_dict, document = mock_collection.replace_one.await_args.args
        assert filter_dict == {"_id": str(record.record_id)}
        assert document["user_id"] == "user123"
        assert mock_collection.replace_one.await_args.kwargs == {"upsert": True}

    @pytest.mark.asyncio
    async def test_find_by_id(self, mock_client, mock_collection):
        repo = MongoNutritionRecordRepository(mock_client)
        record = _record()
        mock_collection.find_one.return_value = repo.to_document(record)

        found = await repo.find_by_id(record.record_id)

        assert found == record
        mock_collection.find_one.assert_awaited_once_with({"_id": str(record.record_id)})

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, mock_client):
        repo = MongoNutritionRecordRepository(mock_client)

        assert await repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_list_sorted_and_limited(self, mock_client, mock_collection):
        repo = MongoNutritionRecordRepository(mock_client)
        cursor = mock_collection.find.return_value
        cursor.to_list.return_value = [repo.to_document(_record())]

        result = await repo.list(user_id="user123", limit=5)

        assert len(result) == 1
        mock_collection.find.assert_called_once_with({"user_id": "user123"})
        cursor.sort.assert_called_once_with([("date", -1), ("created_at", -1)])
        cursor.limit.assert_called_once_with(5)
        cursor.to_list.assert_awaited_once_with(length=5)

    @pytest.mark.asyncio
    async def test_list_all_without_limit(self, mock_client, mock_collection):
        repo = MongoNutritionRecordRepository(mock_client)

        await repo.list()

        mock_collection.find.assert_called_once_with({})
        mock_collection.find.return_value.limit.assert_not_called()

    @pytest.mark.asyncio
    async def test_driver_error_logged_and_raised(self, mock_client, mock_collection, caplog):
        repo = MongoNutritionRecordRepository(mock_client)
        mock_collection.replace_one.side_effect = RuntimeError("connection refused")

        with pytest.raises(RuntimeError, match="connection refused"):
            await repo.save(_record())

        assert "MongoDB replace_one failed" in caplog.text


class TestMongoUserSettingsRepository:
    def test_results_nested(self, mock_client):
        repo = MongoUserSettingsRepository(mock_client)
        settings = UserSettings(
            gender="Female",
            age=30,
            height=165,
            weight=60,
            trains_per_week=5,
            activity="Active",
            goal="Lose",
            calories=1977,
            protein=148,
            fat=66,
            carbs=198,
            created_at=NOW,
            updated_at=NOW,
        )

        doc = repo.to_document(settings)

        assert doc["results"] == {"calories": 1977, "protein": 148, "fat": 66, "carbs": 198}
        assert repo.from_document(doc) == settings

    def test_document_without_results(self, mock_client):
        repo = MongoUserSettingsRepository(mock_client)
        doc = {
            "_id": str(uuid4()),
            "gender": "Male",
            "age": 25,
            "height": 180,
            "weight": 80,
            "activity": "Normal",
            "goal": "Maintain",
            "created_at": NOW,
            "updated_at": NOW,
        }

        settings = repo.from_document(doc)

        assert not settings.has_results
        assert settings.trains_per_week == 0

    @pytest.mark.asyncio
    async def test_latest(self, mock_client, mock_collection):
        repo = MongoUserSettingsRepository(mock_client)
        cursor = mock_collection.find.return_value

        assert await repo.latest(user_id="user123") is None
        mock_collection.find.assert_called_once_with({"user_id": "user123"})
        cursor.sort.assert_called_once_with([("created_at", -1)])
        cursor.to_list.assert_awaited_once_with(length=1)
