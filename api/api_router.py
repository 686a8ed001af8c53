from fastapi                        import APIRouter
from .profile.profile               import router as profile_router
from .workout.workout               import router as workout_router
from .checkins.checkins             import router as checkins_router
from .stats.stats                   import router as stats_router
from .measurements.measurements     import router as measurements_router
from .backup.backup                 import router as backup_router


api_router = APIRouter(prefix="/api/v1")

api_router.include_router(profile_router)
api_router.include_router(workout_router)
api_router.include_router(checkins_router)
api_router.include_router(stats_router)
api_router.include_router(measurements_router)
api_router.include_router(backup_router)
