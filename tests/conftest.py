from __future__ import annotations

from datetime import date

import pytest
import pytest_asyncio
from beanie import init_beanie
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from api.api_router import api_router
from models import ALL_MODELS
from schemas.workout import CompletedWorkoutOut
from utils.dates import get_today
from utils.storage import seed_default_workouts

# a Wednesday; its week starts on Sunday 2026-01-11
TODAY = date(2026, 1, 14)


def make_workout(when: str, duration: int = 20, calories: int = 160, key: str = "c") -> CompletedWorkoutOut:
    return CompletedWorkoutOut(
        key=key,
        workout_id="workout-1",
        workout_name="Quick Morning Workout",
        date=when,
        duration=duration,
        calories_burned=calories,
        exercises=10,
    )


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def sample_workouts():
    return [
        make_workout("2026-01-10T10:00:00Z", 20, 160, key="1"),
        make_workout("2026-01-12T10:00:00Z", 30, 240, key="2"),
        make_workout("2026-01-14T10:00:00Z", 25, 200, key="3"),
    ]


@pytest_asyncio.fixture
async def beanie_db():
    client = AsyncMongoMockClient()
    database = client["fittrack_test"]
    await init_beanie(database=database, document_models=ALL_MODELS)
    yield database


@pytest_asyncio.fixture
async def api(beanie_db):
    await seed_default_workouts()

    app = FastAPI()
    app.include_router(api_router)
    app.dependency_overrides[get_today] = lambda: TODAY

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
