from __future__ import annotations

from typing import Dict, Optional, Sequence, Union

from pydantic import BaseModel

from models.enums import Gender, Intensity, UnitSystem
from models.users import UserProfile
from utils.dates import parse_timestamp

LBS_PER_KG = 2.20462
KG_PER_LB = 0.453592
INCH_PER_CM = 0.393701
CM_PER_INCH = 2.54

DEFAULT_WEIGHT_KG = 70

MET_VALUES: Dict[Intensity, float] = {
    Intensity.low: 3.5,
    Intensity.moderate: 6.0,
    Intensity.high: 8.5,
}

BMR_GENDER_OFFSET: Dict[Gender, int] = {
    Gender.male: 5,
    Gender.female: -161,
    Gender.other: -78,
}


class WeightChange(BaseModel):
    value: float
    is_increase: bool
    percentage: float


class HealthSummary(BaseModel):
    bmi: Optional[float] = None
    bmi_category: Optional[str] = None
    bmr: Optional[float] = None


class TargetProgress(BaseModel):
    progress: float
    remaining: float
    weeks_to_goal: Optional[float] = None
    is_on_track: Optional[bool] = None


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def get_bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "underweight"
    if bmi < 25:
        return "normal"
    if bmi < 30:
        return "overweight"
    return "obese"


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: Union[Gender, str, None]) -> float:
    """Mifflin-St Jeor, kcal per day."""
    try:
        offset = BMR_GENDER_OFFSET[Gender(gender)]
    except ValueError:
        offset = BMR_GENDER_OFFSET[Gender.other]
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def convert_weight(weight: float, from_system: UnitSystem, to_system: UnitSystem) -> float:
    if from_system == to_system:
        return weight
    if from_system == UnitSystem.metric:
        return weight * LBS_PER_KG
    return weight * KG_PER_LB


def convert_height(height: float, from_system: UnitSystem, to_system: UnitSystem) -> float:
    if from_system == to_system:
        return height
    if from_system == UnitSystem.metric:
        return height * INCH_PER_CM
    return height * CM_PER_INCH


def calculate_calories_burned(
    duration_minutes: float,
    profile: Optional[UserProfile],
    intensity: Union[Intensity, str] = Intensity.moderate,
) -> int:
    """MET x body weight (kg) x hours."""
    weight = (profile.weight if profile else None) or DEFAULT_WEIGHT_KG
    if profile and profile.unit_system == UnitSystem.imperial:
        weight = convert_weight(weight, UnitSystem.imperial, UnitSystem.metric)

    try:
        met = MET_VALUES[Intensity(intensity)]
    except ValueError:
        met = MET_VALUES[Intensity.moderate]

    return round(met * weight * (duration_minutes / 60))


# ---------- weight trends ----------
# Entries are expected newest first, as storage returns them.

def weight_change(entries: Sequence) -> Optional[WeightChange]:
    if len(entries) < 2:
        return None
    latest = entries[0].weight
    oldest = entries[-1].weight
    change = latest - oldest
    return WeightChange(
        value=abs(change),
        is_increase=change > 0,
        percentage=round(change / oldest * 100, 1),
    )


def average_weight(entries: Sequence) -> float:
    if not entries:
        return 0.0
    return round(sum(e.weight for e in entries) / len(entries), 1)


def weekly_trend(entries: Sequence) -> Optional[float]:
    """Average change per week between the oldest and latest entry."""
    if len(entries) < 2:
        return None
    latest_at = parse_timestamp(entries[0].date)
    oldest_at = parse_timestamp(entries[-1].date)
    if latest_at is None or oldest_at is None:
        return None

    weeks = (latest_at - oldest_at).total_seconds() / 86400 / 7
    if weeks < 0.5:
        return None
    return (entries[0].weight - entries[-1].weight) / weeks


def target_progress(entries: Sequence, profile: UserProfile) -> Optional[TargetProgress]:
    if not profile.target_weight or not profile.weight or not entries:
        return None

    current = entries[0].weight
    total_change = profile.target_weight - profile.weight
    if total_change == 0:
        return None

    progress = (current - profile.weight) / total_change * 100
    trend = weekly_trend(entries)

    weeks_to_goal = None
    if trend and abs(trend) > 0.01:
        weeks_to_goal = abs((profile.target_weight - current) / trend)

    is_on_track = None
    if trend:
        is_on_track = trend > 0 if total_change > 0 else trend < 0

    return TargetProgress(
        progress=min(max(progress, 0.0), 100.0),
        remaining=abs(profile.target_weight - current),
        weeks_to_goal=weeks_to_goal,
        is_on_track=is_on_track,
    )


def health_summary(profile: UserProfile) -> HealthSummary:
    out = HealthSummary()
    if not profile.weight or not profile.height:
        return out

    weight_kg = convert_weight(profile.weight, profile.unit_system, UnitSystem.metric)
    height_cm = convert_height(profile.height, profile.unit_system, UnitSystem.metric)

    bmi = calculate_bmi(weight_kg, height_cm)
    out.bmi = round(bmi, 1)
    out.bmi_category = get_bmi_category(bmi)
    if profile.age:
        out.bmr = round(calculate_bmr(weight_kg, height_cm, profile.age, profile.gender), 0)
    return out
