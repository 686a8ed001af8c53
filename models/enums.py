from __future__ import annotations
from enum import Enum


class WorkoutCategory(str, Enum):
    strength = "strength"
    cardio = "cardio"
    flexibility = "flexibility"
    hiit = "hiit"


class WorkoutDifficulty(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class Intensity(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"


class ThemeMode(str, Enum):
    light = "light"
    dark = "dark"
    system = "system"


class UnitSystem(str, Enum):
    metric = "metric"
    imperial = "imperial"


class Gender(str, Enum):
    male = "male"
    female = "female"
    other = "other"
