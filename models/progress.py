from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pymongo import IndexModel, ASCENDING, DESCENDING

from .base import BaseDoc


class CheckInRecord(BaseDoc):
    check_ins: List[str] = Field(default_factory=list)  # YYYY-MM-DD, unique
    current_streak: int = 0
    longest_streak: int = 0
    last_check_in: Optional[str] = None

    class Settings:
        name = "check_ins"


class WeightEntry(BaseDoc):
    key: str
    date: str  # ISO-8601 timestamp
    weight: float = Field(gt=0)
    note: Optional[str] = None

    class Settings:
        name = "weight_entries"
        indexes = [
            IndexModel([("key", ASCENDING)], unique=True),
            IndexModel([("date", DESCENDING)]),
        ]
