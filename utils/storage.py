"""
Async persistence operations over the Beanie documents.

Reads return defaults (without writing them) when nothing is stored yet.
The default workout library is written only by seed_default_workouts, which
the application lifespan runs once after init_beanie.
"""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from fastapi import HTTPException

from config import TRASH_RETENTION_DAYS
from models.base import utcnow
from models import CheckInRecord, CompletedWorkout, DeletedWorkout, Profile, UserProfile, WeightEntry, Workout
from models.seed import DEFAULT_WORKOUTS
from schemas.stats import CheckInData
from schemas.workout import CompletedWorkoutIn, WorkoutCreateIn, WorkoutUpdateIn
from utils.dates import local_now, parse_timestamp
from utils.stats import apply_check_in, estimate_calories, get_workout_intensity

LOGGER = logging.getLogger(__name__)

DEFAULT_USER_PROFILE = UserProfile()
DEFAULT_CHECK_IN_DATA = CheckInData()

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def new_key(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def _newest_first(items: list) -> list:
    return sorted(items, key=lambda x: parse_timestamp(x.date) or _EPOCH, reverse=True)


# ---------- Profile ----------

async def get_user_profile() -> UserProfile:
    doc = await Profile.find_one({})
    return doc.profile if doc else DEFAULT_USER_PROFILE.model_copy()


async def save_user_profile(profile: UserProfile) -> UserProfile:
    doc = await Profile.find_one({})
    if doc:
        doc.profile = profile
        await doc.touch()
    else:
        await Profile(profile=profile).insert()
    return profile


# ---------- Check-ins ----------

async def get_check_in_data() -> CheckInData:
    doc = await CheckInRecord.find_one({})
    if not doc:
        return DEFAULT_CHECK_IN_DATA.model_copy()
    return CheckInData(
        check_ins=list(doc.check_ins),
        current_streak=doc.current_streak,
        longest_streak=doc.longest_streak,
        last_check_in=doc.last_check_in,
    )


async def save_check_in_data(data: CheckInData) -> None:
    doc = await CheckInRecord.find_one({})
    if not doc:
        doc = CheckInRecord()
    doc.check_ins = list(data.check_ins)
    doc.current_streak = data.current_streak
    doc.longest_streak = data.longest_streak
    doc.last_check_in = data.last_check_in
    await doc.save()


async def perform_check_in(today: date) -> CheckInData:
    data = await get_check_in_data()
    updated = apply_check_in(data, today)
    if updated is data:
        return data

    await save_check_in_data(updated)
    LOGGER.info("check-in %s, streak %d (longest %d)", updated.last_check_in, updated.current_streak, updated.longest_streak)
    return updated


# ---------- Completed workouts ----------

async def get_completed_workouts() -> List[CompletedWorkout]:
    items = await CompletedWorkout.find_all().to_list()
    return _newest_first(items)


async def save_completed_workout(payload: CompletedWorkoutIn) -> CompletedWorkout:
    template = await Workout.find_one(Workout.key == payload.workout_id)

    workout_name = payload.workout_name or (template.name if template else None)
    if not workout_name:
        raise HTTPException(status_code=400, detail="workout_name is required for unknown workouts")

    when = payload.date or local_now().isoformat()
    if parse_timestamp(when) is None:
        raise HTTPException(status_code=400, detail="date must be an ISO-8601 timestamp")

    calories = payload.calories_burned
    if calories is None:
        category = template.category if template else None
        calories = estimate_calories(payload.duration, get_workout_intensity(category))

    exercises = payload.exercises
    if exercises is None:
        exercises = len(template.exercises) if template else 0

    doc = CompletedWorkout(
        key=new_key("completed"),
        workout_id=payload.workout_id,
        workout_name=workout_name,
        date=when,
        duration=payload.duration,
        calories_burned=calories,
        exercises=exercises,
    )
    await doc.insert()
    LOGGER.info("completed workout %s (%s, %d min)", doc.key, doc.workout_name, doc.duration)
    return doc


async def delete_completed_workout(key: str) -> None:
    doc = await CompletedWorkout.find_one(CompletedWorkout.key == key)
    if not doc:
        raise HTTPException(status_code=404, detail="Completed workout not found")
    await doc.delete()
    LOGGER.info("deleted completed workout %s", key)


# ---------- Workout library ----------

async def seed_default_workouts() -> int:
    existing = {w.key for w in await Workout.find(Workout.is_custom == False).to_list()}  # noqa: E712
    missing = [Workout(**w) for w in DEFAULT_WORKOUTS if w["key"] not in existing]
    for w in missing:
        await w.insert()
    if missing:
        LOGGER.info("seeded %d default workouts", len(missing))
    return len(missing)


async def get_workouts() -> List[Workout]:
    return await Workout.find_all().sort("created_at", "key").to_list()


async def get_workout(key: str) -> Workout:
    w = await Workout.find_one(Workout.key == key)
    if not w:
        raise HTTPException(status_code=404, detail="Workout not found")
    return w


async def _get_custom_workout(key: str, action: str) -> Workout:
    w = await get_workout(key)
    if not w.is_custom:
        raise HTTPException(status_code=403, detail=f"Cannot {action} default workouts")
    return w


async def add_custom_workout(payload: WorkoutCreateIn) -> Workout:
    w = Workout(key=new_key("custom"), is_custom=True, **payload.model_dump())
    await w.insert()
    LOGGER.info("added custom workout %s", w.key)
    return w


async def update_workout(key: str, payload: WorkoutUpdateIn) -> Workout:
    w = await _get_custom_workout(key, "edit")

    changes = payload.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if value is None and field != "description":
            raise HTTPException(status_code=400, detail=f"{field} cannot be null")
        setattr(w, field, value)
    if "exercises" in changes:
        w.exercises = payload.exercises
    await w.touch()
    return w


async def delete_workout(key: str) -> DeletedWorkout:
    w = await _get_custom_workout(key, "delete")

    now = utcnow()
    trashed = DeletedWorkout(
        workout=w.snapshot(),
        deleted_at=now,
        expires_at=now + timedelta(days=TRASH_RETENTION_DAYS),
    )
    await trashed.insert()
    await w.delete()
    LOGGER.info("moved workout %s to trash", key)
    return trashed


# ---------- Trash ----------

async def purge_expired_trash(now: Optional[datetime] = None) -> int:
    now = now or utcnow()
    expired = await DeletedWorkout.find(DeletedWorkout.expires_at <= now).to_list()
    for d in expired:
        await d.delete()
    if expired:
        LOGGER.info("purged %d expired workouts from trash", len(expired))
    return len(expired)


async def get_deleted_workouts(now: Optional[datetime] = None) -> List[DeletedWorkout]:
    await purge_expired_trash(now)
    return await DeletedWorkout.find_all().sort("-deleted_at").to_list()


async def _get_trashed_or_404(key: str) -> DeletedWorkout:
    d = await DeletedWorkout.find_one({"workout.key": key})
    if not d:
        raise HTTPException(status_code=404, detail="Workout not found in trash")
    return d


async def restore_workout_from_trash(key: str) -> Workout:
    d = await _get_trashed_or_404(key)
    if await Workout.find_one(Workout.key == key):
        raise HTTPException(status_code=400, detail="Workout already exists")

    w = Workout(**d.workout.model_dump())
    await w.insert()
    await d.delete()
    LOGGER.info("restored workout %s from trash", key)
    return w


async def permanently_delete_workout(key: str) -> None:
    d = await _get_trashed_or_404(key)
    await d.delete()
    LOGGER.info("permanently deleted workout %s", key)


async def empty_trash() -> int:
    items = await DeletedWorkout.find_all().to_list()
    for d in items:
        await d.delete()
    LOGGER.info("emptied trash (%d workouts)", len(items))
    return len(items)


# ---------- Weight ----------

async def get_weight_entries() -> List[WeightEntry]:
    items = await WeightEntry.find_all().to_list()
    return _newest_first(items)


async def add_weight_entry(weight: float, note: Optional[str] = None, when: Optional[str] = None) -> WeightEntry:
    when = when or local_now().isoformat()
    if parse_timestamp(when) is None:
        raise HTTPException(status_code=400, detail="date must be an ISO-8601 timestamp")

    entry = WeightEntry(key=new_key("weight"), date=when, weight=weight, note=note)
    await entry.insert()
    return entry


async def delete_weight_entry(key: str) -> None:
    entry = await WeightEntry.find_one(WeightEntry.key == key)
    if not entry:
        raise HTTPException(status_code=404, detail="Weight entry not found")
    await entry.delete()


# ---------- Reset ----------

async def clear_all_data() -> None:
    for model in (Profile, CheckInRecord, CompletedWorkout, Workout, DeletedWorkout, WeightEntry):
        await model.find_all().delete()
    LOGGER.info("cleared all stored data")
