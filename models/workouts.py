from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator
from pymongo import IndexModel, ASCENDING, DESCENDING

from .base import BaseDoc
from .enums import WorkoutCategory, WorkoutDifficulty


class WorkoutExercise(BaseModel):
    name: str = Field(min_length=1, max_length=120)
    duration: Optional[int] = Field(default=None, ge=1, le=3600)  # seconds
    reps: Optional[int] = Field(default=None, ge=1, le=500)
    rest: int = Field(default=0, ge=0, le=600)  # seconds after the exercise

    @model_validator(mode="after")
    def validate_amount(self):
        if self.duration is None and self.reps is None:
            raise ValueError("either duration or reps is required")
        return self


class WorkoutSnapshot(BaseModel):
    key: str
    name: str
    category: WorkoutCategory
    difficulty: WorkoutDifficulty
    duration: int
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    description: Optional[str] = None
    is_custom: bool = False


class Workout(BaseDoc):
    key: str  # workout-N for the default library, custom-<hex> for user workouts
    name: str = Field(min_length=1, max_length=80)
    category: WorkoutCategory
    difficulty: WorkoutDifficulty
    duration: int = Field(ge=1, le=600)  # total minutes
    exercises: List[WorkoutExercise] = Field(default_factory=list)
    description: Optional[str] = None
    is_custom: bool = False

    def snapshot(self) -> WorkoutSnapshot:
        return WorkoutSnapshot(**self.model_dump(include=set(WorkoutSnapshot.model_fields)))

    class Settings:
        name = "workouts"
        indexes = [
            IndexModel([("key", ASCENDING)], unique=True),
        ]


class DeletedWorkout(BaseDoc):
    workout: WorkoutSnapshot
    deleted_at: datetime
    expires_at: datetime

    class Settings:
        name = "deleted_workouts"
        indexes = [
            IndexModel([("workout.key", ASCENDING)], unique=True),
            IndexModel([("expires_at", ASCENDING)]),
        ]


class CompletedWorkout(BaseDoc):
    key: str
    workout_id: str
    workout_name: str
    date: str  # ISO-8601 timestamp
    duration: int = Field(ge=0)  # minutes
    calories_burned: int = Field(ge=0)
    exercises: int = Field(ge=0)

    class Settings:
        name = "completed_workouts"
        indexes = [
            IndexModel([("key", ASCENDING)], unique=True),
            IndexModel([("date", DESCENDING)]),
        ]
