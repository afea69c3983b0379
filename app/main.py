import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_tables, async_session
from app.dependencies import verify_api_key
from app.seed import seed_data
from app.routers.auth import router as auth_router
from app.routers.partners import router as partners_router
from app.routers.vehicles import router as vehicles_router
from app.routers.rides import router as rides_router
from app.utils.exceptions import register_exception_handlers

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await create_tables()
    async with async_session() as session:
        await seed_data(session)
    yield


app = FastAPI(
    title="Fleet Back Office API",
    description="Partner vehicle management for the chauffeur dispatch dashboard",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

_api_key_dep = [Depends(verify_api_key)]

app.include_router(auth_router, prefix="/api", dependencies=_api_key_dep)
app.include_router(partners_router, prefix="/api", dependencies=_api_key_dep)
app.include_router(vehicles_router, prefix="/api", dependencies=_api_key_dep)
app.include_router(rides_router, prefix="/api", dependencies=_api_key_dep)


@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "fleet-backoffice", "version": "0.1.0"}
