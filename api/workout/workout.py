from __future__ import annotations

from datetime import datetime
from typing import List

from fastapi import APIRouter, status

from schemas.workout import (
    CompletedWorkoutIn,
    CompletedWorkoutOut,
    DeletedWorkoutOut,
    WorkoutCreateIn,
    WorkoutUpdateIn,
)
from utils import storage

router = APIRouter(tags=["workouts"])


def _days_remaining(expires_at: datetime, now: datetime) -> int:
    seconds = (expires_at - now).total_seconds()
    return max(0, -int(-seconds // 86400))  # ceil


@router.get("/workouts")
async def list_workouts():
    return await storage.get_workouts()


@router.post("/workouts", status_code=status.HTTP_201_CREATED)
async def create_workout(payload: WorkoutCreateIn):
    return await storage.add_custom_workout(payload)


@router.get("/workouts/{key}")
async def get_workout(key: str):
    return await storage.get_workout(key)


@router.put("/workouts/{key}")
async def update_workout(key: str, payload: WorkoutUpdateIn):
    return await storage.update_workout(key, payload)


@router.delete("/workouts/{key}", status_code=status.HTTP_200_OK)
async def delete_workout(key: str):
    trashed = await storage.delete_workout(key)
    return {"status": "ok", "key": key, "expires_at": trashed.expires_at.isoformat()}


# ---------- trash ----------

@router.get("/trash", response_model=List[DeletedWorkoutOut])
async def list_trash():
    now = storage.utcnow()
    items = await storage.get_deleted_workouts(now)
    return [
        DeletedWorkoutOut(
            workout=d.workout,
            deleted_at=d.deleted_at,
            expires_at=d.expires_at,
            days_remaining=_days_remaining(d.expires_at, now),
        )
        for d in items
    ]


@router.post("/trash/{key}/restore")
async def restore_workout(key: str):
    return await storage.restore_workout_from_trash(key)


@router.delete("/trash/{key}", status_code=status.HTTP_200_OK)
async def delete_from_trash(key: str):
    await storage.permanently_delete_workout(key)
    return {"status": "ok"}


@router.delete("/trash", status_code=status.HTTP_200_OK)
async def empty_trash():
    deleted = await storage.empty_trash()
    return {"status": "ok", "deleted": deleted}


# ---------- history ----------

@router.get("/history", response_model=List[CompletedWorkoutOut])
async def history_list(skip: int = 0, limit: int = 50):
    limit = min(max(limit, 1), 500)
    skip = max(skip, 0)

    items = await storage.get_completed_workouts()
    return items[skip:skip + limit]


@router.post("/history", response_model=CompletedWorkoutOut, status_code=status.HTTP_201_CREATED)
async def complete_workout(payload: CompletedWorkoutIn):
    return await storage.save_completed_workout(payload)


@router.delete("/history/{key}", status_code=status.HTTP_200_OK)
async def delete_history_item(key: str):
    await storage.delete_completed_workout(key)
    return {"status": "ok"}
