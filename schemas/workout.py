from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from models.enums import WorkoutCategory, WorkoutDifficulty
from models.workouts import WorkoutExercise, WorkoutSnapshot


# ---------- Workouts (library) ----------

class WorkoutCreateIn(BaseModel):
    name: str = Field(min_length=1, max_length=80)
    category: WorkoutCategory
    difficulty: WorkoutDifficulty
    duration: int = Field(ge=1, le=600)
    exercises: List[WorkoutExercise] = Field(min_length=1)
    description: Optional[str] = Field(default=None, max_length=500)


class WorkoutUpdateIn(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=80)
    category: Optional[WorkoutCategory] = None
    difficulty: Optional[WorkoutDifficulty] = None
    duration: Optional[int] = Field(default=None, ge=1, le=600)
    exercises: Optional[List[WorkoutExercise]] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, max_length=500)


class DeletedWorkoutOut(BaseModel):
    workout: WorkoutSnapshot
    deleted_at: datetime
    expires_at: datetime
    days_remaining: int


# ---------- Completed workouts (history) ----------

class CompletedWorkoutIn(BaseModel):
    workout_id: str
    workout_name: Optional[str] = None
    date: Optional[str] = None  # ISO-8601, defaults to now
    duration: int = Field(ge=0)
    calories_burned: Optional[int] = Field(default=None, ge=0)
    exercises: Optional[int] = Field(default=None, ge=0)


class CompletedWorkoutOut(BaseModel):
    key: str
    workout_id: str
    workout_name: str
    date: str
    duration: int
    calories_burned: int
    exercises: int
