from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorDatabase
from beanie import init_beanie
from .db import db, client
from .users import Profile, UserProfile
from .workouts import Workout, WorkoutExercise, WorkoutSnapshot, DeletedWorkout, CompletedWorkout
from .progress import CheckInRecord, WeightEntry

ALL_MODELS = [
    Profile,
    Workout, DeletedWorkout, CompletedWorkout,
    CheckInRecord, WeightEntry,
]


async def init_models(db: AsyncIOMotorDatabase) -> None:
    await init_beanie(database=db, document_models=ALL_MODELS)
