"""
FastAPI application for the Swell app.

Serves the reflection scoring endpoint and the daily/progress API used by the
mobile client.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from swell.config import config
from swell.interfaces.api.routers import daily, progress, score

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Swell Getaway API",
    description="Mission scoring and progression API",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# AICODE-NOTE: Expo dev server origins by default, extend via CORS_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_origin_regex=r"^https?://localhost:\d+$|^https?://127\.0\.0\.1:\d+$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(score.router)
app.include_router(daily.router)
app.include_router(progress.router)

logger.info(f"Swell API ready ({config.ENVIRONMENT}), scorer at {config.SCORING_URL}")


@app.get("/api/health")
async def api_health():
    """API health check endpoint."""
    return {"status": "ok", "service": "swell-api"}
