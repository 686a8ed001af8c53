"""
Statistics and streak aggregation over the completed-workout log and check-ins.

Every function here is a pure transformation of in-memory values: no storage
access, no global clock reads except through the explicit `today` argument
(None resolves to utils.dates.local_today at call time).

Workouts are read by attribute (`date`, `duration`, `calories_burned`), so both
CompletedWorkout documents and plain schema objects are accepted.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

from models.enums import Intensity
from schemas.stats import CheckInData, CheckInStatusOut, DailyActivity, Streak, WeeklyProgress, WorkoutStats
from utils.dates import iter_days, local_today, parse_timestamp, to_day, week_start

CALORIES_PER_MINUTE: Dict[Intensity, int] = {
    Intensity.low: 5,
    Intensity.moderate: 8,
    Intensity.high: 12,
}

CATEGORY_INTENSITY: Dict[str, Intensity] = {
    "flexibility": Intensity.low,
    "strength": Intensity.moderate,
    "cardio": Intensity.high,
    "hiit": Intensity.high,
}

DayLike = Union[date, str]


def _round_half_up(value: float, digits: int = 0) -> Decimal:
    exp = Decimal(1).scaleb(-digits)
    return Decimal(str(value)).quantize(exp, rounding=ROUND_HALF_UP)


def _resolve_today(today: Optional[date]) -> date:
    return today if today is not None else local_today()


def _as_day(value: DayLike) -> date:
    day = to_day(value)
    if day is None:
        raise ValueError(f"not a calendar day: {value!r}")
    return day


# ---------- Temporal bucketing ----------

def get_daily_activity(workouts: Iterable, start_date: DayLike, end_date: DayLike) -> List[DailyActivity]:
    start = _as_day(start_date)
    end = _as_day(end_date)

    buckets: Dict[date, DailyActivity] = {
        d: DailyActivity(date=d.isoformat()) for d in iter_days(start, end)
    }

    for w in workouts:
        bucket = buckets.get(to_day(getattr(w, "date", None)))
        if bucket is None:
            continue
        bucket.workouts += 1
        bucket.minutes += getattr(w, "duration", 0) or 0
        bucket.calories += getattr(w, "calories_burned", 0) or 0

    return [buckets[d] for d in sorted(buckets)]


def get_last_n_days_activity(workouts: Iterable, days: int, today: Optional[date] = None) -> List[DailyActivity]:
    if days < 1:
        raise ValueError("days must be >= 1")
    end = _resolve_today(today)
    start = end - timedelta(days=days - 1)
    return get_daily_activity(workouts, start, end)


def get_weekly_progress(workouts: Iterable, weeks_count: int = 12, today: Optional[date] = None) -> List[WeeklyProgress]:
    if weeks_count < 1:
        raise ValueError("weeks_count must be >= 1")
    current_week = week_start(_resolve_today(today))

    weeks: Dict[date, WeeklyProgress] = {}
    for i in range(weeks_count):
        ws = current_week - timedelta(days=7 * i)
        weeks[ws] = WeeklyProgress(week=ws.isoformat())

    for w in workouts:
        day = to_day(getattr(w, "date", None))
        if day is None:
            continue
        bucket = weeks.get(week_start(day))
        if bucket is None:
            continue
        bucket.workouts += 1
        bucket.minutes += getattr(w, "duration", 0) or 0
        bucket.calories += getattr(w, "calories_burned", 0) or 0

    return [weeks[ws] for ws in sorted(weeks)]


# ---------- Streaks ----------

def calculate_streaks(days: Iterable[Optional[date]], today: Optional[date] = None) -> Streak:
    """
    Current and longest run of consecutive calendar days.

    The current streak only counts when the most recent day is today or
    yesterday; a gap of exactly one day continues a run, anything else breaks it.
    """
    unique = sorted({d for d in days if d is not None})
    if not unique:
        return Streak(current_streak=0, longest_streak=0)

    today = _resolve_today(today)

    current = 0
    if unique[-1] in (today, today - timedelta(days=1)):
        current = 1
        for i in range(len(unique) - 1, 0, -1):
            if (unique[i] - unique[i - 1]).days != 1:
                break
            current += 1

    longest = 1
    run = 1
    for prev, nxt in zip(unique, unique[1:]):
        if (nxt - prev).days == 1:
            run += 1
        else:
            run = 1
        longest = max(longest, run)

    return Streak(current_streak=current, longest_streak=longest)


def calculate_workout_streak(workouts: Iterable, today: Optional[date] = None) -> Streak:
    return calculate_streaks((to_day(getattr(w, "date", None)) for w in workouts), today)


def _run_ending_at(days: Set[date], last: date) -> int:
    run = 0
    d = last
    while d in days:
        run += 1
        d = d - timedelta(days=1)
    return run


def apply_check_in(data: CheckInData, today: Optional[date] = None) -> CheckInData:
    """
    Record today's check-in. Returns `data` itself when today is already present,
    so a second call on the same day changes nothing.
    """
    today = _resolve_today(today)
    today_str = today.isoformat()

    days = {d for d in (to_day(c) for c in data.check_ins) if d is not None}
    if today in days:
        return data

    days.add(today)
    check_ins = sorted(d.isoformat() for d in days)
    current = _run_ending_at(days, today)

    return CheckInData(
        check_ins=check_ins,
        current_streak=current,
        longest_streak=max(current, data.longest_streak),
        last_check_in=today_str,
    )


def check_in_status(data: CheckInData, today: Optional[date] = None) -> CheckInStatusOut:
    today = _resolve_today(today)
    return CheckInStatusOut(
        data=data,
        checked_in_today=today in {to_day(c) for c in data.check_ins},
        live_streak=calculate_streaks((to_day(c) for c in data.check_ins), today),
    )


# ---------- Summary ----------

def calculate_workout_stats(workouts: Sequence, current_streak: int, longest_streak: int) -> WorkoutStats:
    total_workouts = len(workouts)
    total_minutes = sum((getattr(w, "duration", 0) or 0) for w in workouts)
    total_calories = sum((getattr(w, "calories_burned", 0) or 0) for w in workouts)

    average = 0.0
    if total_workouts > 0:
        stamps = sorted(t for t in (parse_timestamp(getattr(w, "date", None)) for w in workouts) if t is not None)
        days = 1
        if stamps:
            days = max(1, math.floor((stamps[-1] - stamps[0]).total_seconds() / 86400))
        weeks = max(1.0, days / 7)
        average = float(_round_half_up(total_workouts / weeks, 1))

    return WorkoutStats(
        total_workouts=total_workouts,
        total_minutes=total_minutes,
        total_calories=total_calories,
        current_streak=current_streak,
        longest_streak=longest_streak,
        average_workouts_per_week=average,
    )


# ---------- Formatters ----------

def _as_intensity(value: Union[Intensity, str, None]) -> Intensity:
    try:
        return Intensity(value)
    except ValueError:
        return Intensity.moderate


def estimate_calories(duration_minutes: float, intensity: Union[Intensity, str] = Intensity.moderate) -> int:
    rate = CALORIES_PER_MINUTE[_as_intensity(intensity)]
    return int(_round_half_up(duration_minutes * rate))


def get_workout_intensity(category: Optional[str]) -> Intensity:
    return CATEGORY_INTENSITY.get(getattr(category, "value", category), Intensity.moderate)


def format_duration(minutes: int) -> str:
    if minutes < 60:
        return f"{minutes} Min"
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}min" if mins > 0 else f"{hours}h"


def format_calories(calories: float) -> str:
    if calories >= 1000:
        thousands = (Decimal(calories) / 1000).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{thousands}k"
    return str(int(_round_half_up(calories)))
