from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, status

from schemas.backup import BackupData, ImportResult
from utils import storage
from utils.backup import export_data, import_data

router = APIRouter(tags=["backup"])


@router.get("/backup/export", response_model=BackupData)
async def export_backup():
    return await export_data()


@router.post("/backup/import", response_model=ImportResult)
async def import_backup(payload: Dict[str, Any] = Body(...)):
    return await import_data(payload)


@router.delete("/data", status_code=status.HTTP_200_OK)
async def clear_data():
    await storage.clear_all_data()
    return {"status": "ok"}
