# api/profile/profile.py

from __future__ import annotations

from fastapi import APIRouter

from models import UserProfile
from schemas.profile import ProfileUpdateIn
from utils import storage
from utils.health import HealthSummary, health_summary

router = APIRouter(tags=["profile"])


@router.get("/profile", response_model=UserProfile)
async def get_profile():
    return await storage.get_user_profile()


@router.put("/profile", response_model=UserProfile)
async def update_profile(payload: ProfileUpdateIn):
    current = await storage.get_user_profile()

    # merge updates into the stored profile so unset fields survive
    merged = current.model_dump()
    merged.update(payload.model_dump(exclude_unset=True))
    profile = UserProfile.model_validate(merged)

    return await storage.save_user_profile(profile)


@router.get("/profile/health", response_model=HealthSummary)
async def get_profile_health():
    profile = await storage.get_user_profile()
    return health_summary(profile)
