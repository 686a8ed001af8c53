from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi import HTTPException
from pymongo.errors import PyMongoError

from conftest import TODAY
from models import CompletedWorkout, DeletedWorkout, Workout
from models.enums import ThemeMode
from models.seed import DEFAULT_WORKOUTS
from schemas.workout import CompletedWorkoutIn, WorkoutCreateIn, WorkoutUpdateIn
from utils import storage
from utils.backup import _replace_all


def custom_payload(**overrides) -> WorkoutCreateIn:
    data = {
        "name": "Lunch Break Burner",
        "category": "cardio",
        "difficulty": "beginner",
        "duration": 15,
        "exercises": [{"name": "Skipping", "duration": 60, "rest": 15}],
    }
    data.update(overrides)
    return WorkoutCreateIn(**data)


# ---------- defaults ----------

async def test_reads_return_defaults(beanie_db):
    profile = await storage.get_user_profile()
    check_ins = await storage.get_check_in_data()

    assert profile.name == "Fitness-Enthusiast"
    assert profile.weekly_goal == 3
    assert profile.theme == ThemeMode.system
    assert check_ins.check_ins == []
    assert check_ins.current_streak == 0
    assert await storage.get_completed_workouts() == []


async def test_save_profile_round_trip(beanie_db):
    profile = await storage.get_user_profile()
    profile.name = "Alex"
    profile.weekly_goal = 5

    await storage.save_user_profile(profile)
    stored = await storage.get_user_profile()

    assert (stored.name, stored.weekly_goal) == ("Alex", 5)
    assert storage.DEFAULT_USER_PROFILE.name == "Fitness-Enthusiast"


# ---------- check-ins ----------

async def test_perform_check_in_is_idempotent(beanie_db):
    first = await storage.perform_check_in(TODAY)
    second = await storage.perform_check_in(TODAY)

    assert first.check_ins == ["2026-01-14"]
    assert second.check_ins == ["2026-01-14"]
    assert (second.current_streak, second.longest_streak) == (1, 1)


async def test_perform_check_in_over_consecutive_days(beanie_db):
    for offset in (2, 1, 0):
        await storage.perform_check_in(TODAY - timedelta(days=offset))

    data = await storage.get_check_in_data()

    assert data.check_ins == ["2026-01-12", "2026-01-13", "2026-01-14"]
    assert (data.current_streak, data.longest_streak) == (3, 3)
    assert data.last_check_in == "2026-01-14"


# ---------- workout library ----------

async def test_seed_is_idempotent(beanie_db):
    assert await storage.seed_default_workouts() == len(DEFAULT_WORKOUTS)
    assert await storage.seed_default_workouts() == 0

    workouts = await storage.get_workouts()
    assert len(workouts) == 8
    assert all(not w.is_custom for w in workouts)


async def test_default_workouts_are_protected(beanie_db):
    await storage.seed_default_workouts()

    with pytest.raises(HTTPException) as exc:
        await storage.update_workout("workout-1", WorkoutUpdateIn(name="Mine now"))
    assert exc.value.status_code == 403

    with pytest.raises(HTTPException) as exc:
        await storage.delete_workout("workout-1")
    assert exc.value.status_code == 403


async def test_unknown_workout_is_404(beanie_db):
    with pytest.raises(HTTPException) as exc:
        await storage.get_workout("nope")
    assert exc.value.status_code == 404


async def test_custom_workout_crud(beanie_db):
    created = await storage.add_custom_workout(custom_payload())
    assert created.is_custom is True
    assert created.key.startswith("custom-")

    updated = await storage.update_workout(created.key, WorkoutUpdateIn(duration=25))
    assert updated.duration == 25
    assert updated.name == "Lunch Break Burner"

    stored = await storage.get_workout(created.key)
    assert stored.duration == 25


async def test_update_can_clear_description(beanie_db):
    created = await storage.add_custom_workout(custom_payload(description="Between meetings"))

    updated = await storage.update_workout(created.key, WorkoutUpdateIn(description=None))
    assert updated.description is None
    assert (await storage.get_workout(created.key)).description is None

    with pytest.raises(HTTPException) as exc:
        await storage.update_workout(created.key, WorkoutUpdateIn(name=None))
    assert exc.value.status_code == 400
    assert (await storage.get_workout(created.key)).name == "Lunch Break Burner"


# ---------- trash ----------

async def test_delete_moves_to_trash_and_restore(beanie_db):
    created = await storage.add_custom_workout(custom_payload())

    trashed = await storage.delete_workout(created.key)
    assert trashed.expires_at - trashed.deleted_at == timedelta(days=30)
    assert await Workout.find_one(Workout.key == created.key) is None

    listed = await storage.get_deleted_workouts()
    assert [d.workout.key for d in listed] == [created.key]

    restored = await storage.restore_workout_from_trash(created.key)
    assert restored.name == "Lunch Break Burner"
    assert restored.exercises[0].name == "Skipping"
    assert await storage.get_deleted_workouts() == []


async def test_purge_expired_trash(beanie_db):
    created = await storage.add_custom_workout(custom_payload())
    trashed = await storage.delete_workout(created.key)

    assert await storage.purge_expired_trash(trashed.deleted_at + timedelta(days=29)) == 0
    assert await storage.purge_expired_trash(trashed.expires_at) == 1
    assert await DeletedWorkout.find_all().count() == 0


async def test_permanent_delete_and_empty_trash(beanie_db):
    first = await storage.add_custom_workout(custom_payload())
    second = await storage.add_custom_workout(custom_payload(name="Evening Stretch"))
    await storage.delete_workout(first.key)
    await storage.delete_workout(second.key)

    await storage.permanently_delete_workout(first.key)
    with pytest.raises(HTTPException) as exc:
        await storage.restore_workout_from_trash(first.key)
    assert exc.value.status_code == 404

    assert await storage.empty_trash() == 1


# ---------- completed workouts ----------

async def test_completing_a_template_estimates_calories(beanie_db):
    await storage.seed_default_workouts()

    done = await storage.save_completed_workout(
        CompletedWorkoutIn(workout_id="workout-3", duration=20, date="2026-01-14T07:30:00Z")
    )

    assert done.workout_name == "Cardio Boost"
    # cardio is high intensity, 12 kcal per minute
    assert done.calories_burned == 240
    assert done.exercises == 9


async def test_explicit_values_win(beanie_db):
    await storage.seed_default_workouts()

    done = await storage.save_completed_workout(
        CompletedWorkoutIn(workout_id="workout-3", workout_name="Morning Run", duration=20, calories_burned=180, exercises=1)
    )

    assert (done.workout_name, done.calories_burned, done.exercises) == ("Morning Run", 180, 1)
    assert done.date


async def test_completed_workout_validation(beanie_db):
    with pytest.raises(HTTPException) as exc:
        await storage.save_completed_workout(CompletedWorkoutIn(workout_id="ghost", duration=10))
    assert exc.value.status_code == 400

    with pytest.raises(HTTPException) as exc:
        await storage.save_completed_workout(
            CompletedWorkoutIn(workout_id="ghost", workout_name="Run", duration=10, date="last tuesday")
        )
    assert exc.value.status_code == 400


async def test_completed_workouts_newest_first_and_delete(beanie_db):
    for when in ("2026-01-10T10:00:00Z", "2026-01-14T10:00:00Z", "2026-01-12T10:00:00Z"):
        await storage.save_completed_workout(
            CompletedWorkoutIn(workout_id="custom-run", workout_name="Run", duration=30, date=when)
        )

    items = await storage.get_completed_workouts()
    assert [i.date[:10] for i in items] == ["2026-01-14", "2026-01-12", "2026-01-10"]

    await storage.delete_completed_workout(items[0].key)
    assert await CompletedWorkout.find_all().count() == 2

    with pytest.raises(HTTPException) as exc:
        await storage.delete_completed_workout(items[0].key)
    assert exc.value.status_code == 404


# ---------- weight ----------

async def test_weight_entries(beanie_db):
    await storage.add_weight_entry(80.0, when="2026-01-01T08:00:00Z")
    latest = await storage.add_weight_entry(79.2, note="after holidays", when="2026-01-08T08:00:00Z")

    entries = await storage.get_weight_entries()
    assert [e.weight for e in entries] == [79.2, 80.0]

    await storage.delete_weight_entry(latest.key)
    assert len(await storage.get_weight_entries()) == 1


# ---------- reset ----------

async def test_clear_all_data(beanie_db):
    await storage.seed_default_workouts()
    await storage.perform_check_in(TODAY)
    await storage.save_completed_workout(CompletedWorkoutIn(workout_id="workout-1", duration=10))

    await storage.clear_all_data()

    assert await storage.get_workouts() == []
    assert await storage.get_completed_workouts() == []
    assert (await storage.get_check_in_data()).check_ins == []


# ---------- backup ----------

async def test_failed_replace_restores_previous_rows(beanie_db):
    kept = await storage.save_completed_workout(
        CompletedWorkoutIn(workout_id="custom-run", workout_name="Run", duration=30, date="2026-01-14T08:00:00Z")
    )
    row = {
        "key": "dup",
        "workout_id": "workout-1",
        "workout_name": "Quick Morning Workout",
        "date": "2026-01-13T08:00:00Z",
        "duration": 10,
        "calories_burned": 120,
        "exercises": 10,
    }

    with pytest.raises(PyMongoError):
        await _replace_all(CompletedWorkout, [row, row])

    items = await storage.get_completed_workouts()
    assert [i.key for i in items] == [kept.key]
