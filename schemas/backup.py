from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

BACKUP_VERSION = "1.0"


class BackupPayload(BaseModel):
    user_profile: Optional[Dict[str, Any]] = None
    check_ins: Optional[Dict[str, Any]] = None
    completed_workouts: Optional[List[Dict[str, Any]]] = None
    workouts: Optional[List[Dict[str, Any]]] = None
    weight_entries: Optional[List[Dict[str, Any]]] = None


class BackupData(BaseModel):
    version: str
    export_date: str
    data: BackupPayload


class ImportResult(BaseModel):
    success: bool = False
    items_restored: int = 0
    workouts: int = 0
    completed_workouts: int = 0
    check_ins: int = 0
    weight_entries: int = 0
    user_profile: bool = False
