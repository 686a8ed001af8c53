from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends

from schemas.stats import CheckInStatusOut
from utils import storage
from utils.dates import get_today
from utils.stats import check_in_status

router = APIRouter(tags=["check-ins"])


@router.get("/check-ins", response_model=CheckInStatusOut)
async def get_check_ins(today: date = Depends(get_today)):
    data = await storage.get_check_in_data()
    return check_in_status(data, today)


@router.post("/check-ins", response_model=CheckInStatusOut)
async def check_in(today: date = Depends(get_today)):
    data = await storage.perform_check_in(today)
    return check_in_status(data, today)
