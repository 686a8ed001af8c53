from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from models.enums import Intensity
from schemas.stats import DailyActivity, FormattedStatsOut, Streak, WeeklyProgress, WorkoutStats
from utils import storage
from utils.dates import get_today
from utils.stats import (
    calculate_workout_stats,
    calculate_workout_streak,
    estimate_calories,
    format_calories,
    format_duration,
    get_daily_activity,
    get_last_n_days_activity,
    get_weekly_progress,
    get_workout_intensity,
)

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=WorkoutStats)
async def get_stats(today: date = Depends(get_today)):
    workouts = await storage.get_completed_workouts()
    streak = calculate_workout_streak(workouts, today)
    return calculate_workout_stats(workouts, streak.current_streak, streak.longest_streak)


@router.get("/stats/summary", response_model=FormattedStatsOut)
async def get_stats_summary(today: date = Depends(get_today)):
    workouts = await storage.get_completed_workouts()
    streak = calculate_workout_streak(workouts, today)
    stats = calculate_workout_stats(workouts, streak.current_streak, streak.longest_streak)
    return FormattedStatsOut(
        stats=stats,
        total_minutes_label=format_duration(stats.total_minutes),
        total_calories_label=format_calories(stats.total_calories),
    )


@router.get("/stats/streak", response_model=Streak)
async def get_streak(today: date = Depends(get_today)):
    workouts = await storage.get_completed_workouts()
    return calculate_workout_streak(workouts, today)


@router.get("/stats/daily", response_model=List[DailyActivity])
async def get_daily(start: date, end: date):
    if start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")
    if (end - start).days > 366:
        raise HTTPException(status_code=400, detail="range must not exceed 367 days")

    workouts = await storage.get_completed_workouts()
    return get_daily_activity(workouts, start, end)


@router.get("/stats/last-days", response_model=List[DailyActivity])
async def get_last_days(days: int = Query(default=7, ge=1, le=366), today: date = Depends(get_today)):
    workouts = await storage.get_completed_workouts()
    return get_last_n_days_activity(workouts, days, today)


@router.get("/stats/weekly", response_model=List[WeeklyProgress])
async def get_weekly(weeks: int = Query(default=12, ge=1, le=104), today: date = Depends(get_today)):
    workouts = await storage.get_completed_workouts()
    return get_weekly_progress(workouts, weeks, today)


@router.get("/stats/estimate")
async def get_estimate(
    duration: int = Query(ge=0, le=1440),
    intensity: Optional[Intensity] = None,
    category: Optional[str] = None,
):
    if intensity is None:
        intensity = get_workout_intensity(category)
    calories = estimate_calories(duration, intensity)
    return {
        "intensity": intensity.value,
        "calories": calories,
        "duration_label": format_duration(duration),
        "calories_label": format_calories(calories),
    }
