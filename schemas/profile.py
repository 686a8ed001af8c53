from typing import Optional

from pydantic import BaseModel, Field

from models.enums import Gender, ThemeMode, UnitSystem


class ProfileUpdateIn(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=80)
    weekly_goal: Optional[int] = Field(default=None, ge=1, le=14)
    theme: Optional[ThemeMode] = None
    notifications: Optional[bool] = None
    unit_system: Optional[UnitSystem] = None
    reminders_enabled: Optional[bool] = None
    reminder_time: Optional[str] = Field(default=None, pattern=r"^\d{2}:\d{2}$")

    weight: Optional[float] = Field(default=None, gt=0)
    target_weight: Optional[float] = Field(default=None, gt=0)
    height: Optional[float] = Field(default=None, gt=0)
    age: Optional[int] = Field(default=None, ge=1, le=120)
    gender: Optional[Gender] = None
