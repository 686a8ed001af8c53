from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from models.enums import UnitSystem
from utils.health import TargetProgress, WeightChange


class WeightEntryIn(BaseModel):
    weight: float = Field(gt=0, le=1000)
    note: Optional[str] = Field(default=None, max_length=200)
    date: Optional[str] = None  # ISO-8601, defaults to now


class WeightEntryOut(BaseModel):
    key: str
    date: str
    weight: float
    note: Optional[str] = None


class WeightSummaryOut(BaseModel):
    unit_system: UnitSystem
    latest: Optional[WeightEntryOut] = None
    change: Optional[WeightChange] = None
    average: float = 0.0
    weekly_trend: Optional[float] = None
    target: Optional[TargetProgress] = None
    entries: List[WeightEntryOut] = Field(default_factory=list)
