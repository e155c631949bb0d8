"""FastAPI application entry point."""

import logging
import os
import sys
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load .env before anything reads LOG_LEVEL or CORS_ORIGINS
load_dotenv()

# Add src to path
# main.py is at <root>/src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.dependencies import get_settings
from api.errors import install_error_handlers
from api.routes import admin, analysis, auth, health
from adapter.mongodb.connection import get_mongodb_client
from adapter.mongodb.indexes import ensure_all_indexes
from utils.logging import setup_structured_logging

setup_structured_logging(os.getenv("LOG_LEVEL", "INFO").upper())

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
try:
    with open(_project_root / "pyproject.toml", "rb") as f:
        VERSION = tomllib.load(f)["project"]["version"]
except FileNotFoundError:
    VERSION = "0.0.0"

SERVICE_NAME = "UrbanSquare API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    settings = get_settings()

    client = get_mongodb_client(settings.mongo_url)
    if client:
        if ensure_all_indexes(client[settings.database_name]):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, skipping index creation")

    if settings.enable_email:
        logger.info("Email service enabled and configured", extra={"smtpHost": settings.smtp_host})
    else:
        logger.warning("Email service disabled (ENABLE_EMAIL is not 'true')")

    if not settings.llm_enabled:
        logger.warning("OPENAI_API_KEY not set, AI analysis endpoints will return 503")

    if not settings.admin_configured:
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set, admin login is disabled")

    yield


def _cors_options() -> tuple[list[str], bool]:
    # Browsers reject credentials with a wildcard origin
    cors_env = os.getenv("CORS_ORIGINS", "*")
    if cors_env.strip() == "*":
        return ["*"], False
    return [origin.strip() for origin in cors_env.split(",") if origin.strip()], True


app = FastAPI(
    title=SERVICE_NAME,
    description="Authentication, password reset and AI listing analysis for UrbanSquare",
    version=VERSION,
    lifespan=lifespan,
)

cors_origins, allow_credentials = _cors_options()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(auth.router)
app.include_router(admin.router)
app.include_router(analysis.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "success": True,
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        access_log=False,
    )
