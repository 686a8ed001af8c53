from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from utils.dates import to_day


class DailyActivity(BaseModel):
    date: str  # YYYY-MM-DD
    workouts: int = 0
    minutes: int = 0
    calories: int = 0


class WeeklyProgress(BaseModel):
    week: str  # YYYY-MM-DD of the Sunday starting the week
    workouts: int = 0
    minutes: int = 0
    calories: int = 0


class Streak(BaseModel):
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)


class WorkoutStats(BaseModel):
    total_workouts: int
    total_minutes: int
    total_calories: int
    current_streak: int
    longest_streak: int
    average_workouts_per_week: float


class CheckInData(BaseModel):
    check_ins: List[str] = Field(default_factory=list)
    current_streak: int = 0
    longest_streak: int = 0
    last_check_in: Optional[str] = None

    @field_validator("check_ins")
    @classmethod
    def normalize_check_ins(cls, v: List[str]) -> List[str]:
        # one YYYY-MM-DD entry per day, ascending
        days = set()
        for item in v:
            day = to_day(item)
            if day is None:
                raise ValueError(f"invalid check-in date: {item!r}")
            days.add(day)
        return [d.isoformat() for d in sorted(days)]


class CheckInStatusOut(BaseModel):
    data: CheckInData
    checked_in_today: bool
    live_streak: Streak


class FormattedStatsOut(BaseModel):
    stats: WorkoutStats
    total_minutes_label: str
    total_calories_label: str
