from __future__ import annotations

from fastapi import APIRouter, status

from schemas.measurements import WeightEntryIn, WeightEntryOut, WeightSummaryOut
from utils import storage
from utils.health import average_weight, target_progress, weekly_trend, weight_change

router = APIRouter(tags=["measurements"])


def _entry_out(e) -> WeightEntryOut:
    return WeightEntryOut(key=e.key, date=e.date, weight=e.weight, note=e.note)


@router.post("/measurements/weight", response_model=WeightEntryOut, status_code=status.HTTP_201_CREATED)
async def save_weight(payload: WeightEntryIn):
    entry = await storage.add_weight_entry(payload.weight, payload.note, payload.date)
    return _entry_out(entry)


@router.get("/measurements/weight", response_model=list[WeightEntryOut])
async def list_weight():
    return [_entry_out(e) for e in await storage.get_weight_entries()]


@router.delete("/measurements/weight/{key}", status_code=status.HTTP_200_OK)
async def delete_weight(key: str):
    await storage.delete_weight_entry(key)
    return {"status": "ok"}


@router.get("/measurements/weight/summary", response_model=WeightSummaryOut)
async def get_weight_summary():
    entries = await storage.get_weight_entries()
    profile = await storage.get_user_profile()

    return WeightSummaryOut(
        unit_system=profile.unit_system,
        latest=_entry_out(entries[0]) if entries else None,
        change=weight_change(entries),
        average=average_weight(entries),
        weekly_trend=weekly_trend(entries),
        target=target_progress(entries, profile),
        entries=[_entry_out(e) for e in entries],
    )
