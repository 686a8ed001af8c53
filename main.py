import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL
from models import db, client, init_models
from api.api_router import api_router
from utils.storage import purge_expired_trash, seed_default_workouts

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models(db)
    await seed_default_workouts()
    await purge_expired_trash()
    LOGGER.info("storage ready (%s)", db.name)
    yield
    client.close()


app = FastAPI(
    lifespan=lifespan,
    title="fittrack_backend",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/healthcheck", status_code=200)
async def healthcheck():
    return {"status": "ok"}
