"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from application.services import ActivityService
from domain.entities import Activity
from domain.enums import ActivityType
from domain.repositories import IActivityRepository
from domain.value_objects import ActivityOption, ActivityQuery
from infrastructure.config import Settings
from presentation.app import create_app
from presentation.api.v1.dependencies import get_activity_repository


SORT_ATTRIBUTES = {
    "id": "id",
    "type": "type",
    "active": "active",
    "search": "search",
    "createdAt": "created_at",
    "created_at": "created_at",
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
}


def _sort_key(value):
    # None sorts last ascending, like NULLS LAST
    return (value is None, "" if value is None else value)


class InMemoryActivityRepository(IActivityRepository):
    """Dict-backed repository with the same filter/sort/page rules as the SQL one."""

    def __init__(self):
        self.activities: dict[str, Activity] = {}
        self._last_stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _stamp(self) -> datetime:
        # Strictly increasing so creation order is also timestamp order
        self._last_stamp += timedelta(seconds=1)
        return self._last_stamp

    def _matching(self, query: ActivityQuery) -> list[Activity]:
        matches = list(self.activities.values())
        if query.search:
            term = query.search.lower()
            matches = [a for a in matches if term in (a.search or "").lower()]
        if query.active is not None:
            matches = [a for a in matches if a.active == query.active]
        return matches

    async def create(self, activity: Activity) -> Activity:
        now = self._stamp()
        stored = replace(activity, created_at=now, updated_at=now)
        self.activities[stored.id] = stored
        return stored

    async def count(self, query: ActivityQuery) -> int:
        return len(self._matching(query))

    async def find(self, query: ActivityQuery) -> list[Activity]:
        matches = self._matching(query)
        attribute = SORT_ATTRIBUTES.get(query.order_by)
        if attribute is not None:
            matches.sort(
                key=lambda a: _sort_key(getattr(a, attribute)),
                reverse=not query.ascending,
            )
        return matches[query.skip:query.skip + query.limit]

    async def get_by_id(self, activity_id: str) -> Optional[Activity]:
        return self.activities.get(activity_id)

    async def update(self, activity_id: str, changes: dict[str, Any]) -> Optional[Activity]:
        current = self.activities.get(activity_id)
        if current is None:
            return None
        updated = replace(current, **changes, updated_at=self._stamp())
        self.activities[activity_id] = updated
        return updated

    async def delete(self, activity_id: str) -> bool:
        return self.activities.pop(activity_id, None) is not None


@pytest.fixture
def repository():
    """Fixture for an empty in-memory activity repository."""
    return InMemoryActivityRepository()


@pytest.fixture
def service(repository):
    """Fixture for an activity service over the in-memory repository."""
    return ActivityService(repository)


@pytest.fixture
def two_options_one_correct():
    """Fixture for a valid pair of choice options."""
    return [
        ActivityOption(text="Paris", is_correct=True),
        ActivityOption(text="Lyon", is_correct=False),
    ]


@pytest.fixture
def multiple_choice_activity(two_options_one_correct):
    """Fixture for a valid multiple-choice activity."""
    return Activity(type=ActivityType.MULTIPLE_CHOICE, options=two_options_one_correct)


@pytest.fixture
def test_settings():
    """Settings fixture with test-specific overrides."""
    return Settings(
        cors_origins=["http://localhost:5173"],
        max_body_size=2048,
        gzip_minimum_size=500,
        log_level="DEBUG",
        log_format="text",
    )


@pytest.fixture
def app(test_settings, repository):
    """Fixture for the FastAPI app wired to the in-memory repository."""
    application = create_app(test_settings)
    application.dependency_overrides[get_activity_repository] = lambda: repository
    return application


@pytest.fixture
def client(app):
    """Fixture for a test client; the lifespan (database setup) is not run."""
    return TestClient(app)
