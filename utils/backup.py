from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from models import CheckInRecord, CompletedWorkout, Profile, UserProfile, WeightEntry, Workout
from schemas.backup import BACKUP_VERSION, BackupData, BackupPayload, ImportResult
from schemas.stats import CheckInData
from utils.dates import local_now
from utils.storage import (
    get_check_in_data,
    get_completed_workouts,
    get_user_profile,
    get_weight_entries,
    get_workouts,
    save_check_in_data,
    save_user_profile,
)

LOGGER = logging.getLogger(__name__)

_DOC_EXCLUDE = {"id", "revision_id", "created_at", "updated_at"}


def _plain(docs: list) -> List[Dict[str, Any]]:
    return [d.model_dump(mode="json", exclude=_DOC_EXCLUDE) for d in docs]


async def export_data() -> BackupData:
    profile = await get_user_profile()
    check_ins = await get_check_in_data()

    return BackupData(
        version=BACKUP_VERSION,
        export_date=local_now().isoformat(),
        data=BackupPayload(
            user_profile=profile.model_dump(mode="json"),
            check_ins=check_ins.model_dump(mode="json"),
            completed_workouts=_plain(await get_completed_workouts()),
            workouts=_plain(await get_workouts()),
            weight_entries=_plain(await get_weight_entries()),
        ),
    )


async def _replace_all(model, rows: List[Dict[str, Any]]) -> None:
    docs = [model(**row) for row in rows]
    previous = await model.find_all().to_list()
    await model.find_all().delete()
    try:
        for d in docs:
            await d.insert()
    except PyMongoError:
        LOGGER.error("restoring %s after failed import", model.Settings.name)
        await model.find_all().delete()
        for d in previous:
            await d.insert()
        raise


def _duplicate_keys(rows: List[Dict[str, Any]]) -> List[str]:
    seen, dupes = set(), []
    for row in rows:
        key = row.get("key")
        if key in seen:
            dupes.append(key)
        seen.add(key)
    return dupes


async def import_data(raw: Dict[str, Any]) -> ImportResult:
    """
    Restore a backup produced by export_data. Every collection present in the
    payload replaces what is stored; absent collections are left untouched.
    """
    if not isinstance(raw, dict) or not raw.get("version") or not isinstance(raw.get("data"), dict):
        raise HTTPException(status_code=400, detail="Invalid backup format")

    try:
        backup = BackupData.model_validate(raw)
        data = backup.data
        profile = UserProfile.model_validate(data.user_profile) if data.user_profile is not None else None
        check_ins = CheckInData.model_validate(data.check_ins) if data.check_ins is not None else None
        # validate every row before anything is replaced
        for model, rows in (
            (Workout, data.workouts),
            (CompletedWorkout, data.completed_workouts),
            (WeightEntry, data.weight_entries),
        ):
            for row in rows or []:
                model.model_validate(row)
            dupes = _duplicate_keys(rows or [])
            if dupes:
                LOGGER.warning("rejected backup import: duplicate %s keys %s", model.Settings.name, dupes)
                raise HTTPException(status_code=400, detail="Invalid backup file: duplicate keys")
    except ValidationError as e:
        LOGGER.warning("rejected backup import: %s", e)
        raise HTTPException(status_code=400, detail="Invalid backup file")

    result = ImportResult(
        workouts=len(data.workouts or []),
        completed_workouts=len(data.completed_workouts or []),
        check_ins=1 if check_ins is not None else 0,
        weight_entries=len(data.weight_entries or []),
        user_profile=profile is not None,
    )

    if profile is not None:
        await Profile.find_all().delete()
        await save_user_profile(profile)
        result.items_restored += 1
    if check_ins is not None:
        await CheckInRecord.find_all().delete()
        await save_check_in_data(check_ins)
        result.items_restored += 1
    if data.workouts is not None:
        await _replace_all(Workout, data.workouts)
        result.items_restored += 1
    if data.completed_workouts is not None:
        await _replace_all(CompletedWorkout, data.completed_workouts)
        result.items_restored += 1
    if data.weight_entries is not None:
        await _replace_all(WeightEntry, data.weight_entries)
        result.items_restored += 1

    result.success = True
    LOGGER.info("imported backup %s (%d collections)", backup.version, result.items_restored)
    return result
