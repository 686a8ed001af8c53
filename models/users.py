from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .base import BaseDoc
from .enums import Gender, ThemeMode, UnitSystem


class UserProfile(BaseModel):
    name: str = Field(default="Fitness-Enthusiast", min_length=1, max_length=80)
    weekly_goal: int = Field(default=3, ge=1, le=14)  # workouts per week
    theme: ThemeMode = ThemeMode.system
    notifications: bool = True
    unit_system: UnitSystem = UnitSystem.metric
    reminders_enabled: bool = False
    reminder_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")  # HH:mm

    # body data, in the profile's unit system
    weight: Optional[float] = Field(default=None, gt=0)
    target_weight: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    age: Optional[int] = Field(default=None, ge=1, le=120)
    gender: Optional[Gender] = None


class Profile(BaseDoc):
    profile: UserProfile = Field(default_factory=UserProfile)

    class Settings:
        name = "profile"
