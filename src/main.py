"""FastAPI application entry point.

Run locally with:
    uvicorn src.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api import auth, clientes, orcamentos
from src.api.error_handlers import register_exception_handlers
from src.config import get_settings
from src.database import init_db

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

APP_NAME = "Tattoo Studio API"
APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"{APP_NAME} started ({settings.environment})")
    yield
    logger.info(f"{APP_NAME} stopped")


app = FastAPI(
    title=APP_NAME,
    description="Clients and tattoo quotes with JWT authentication",
    version=APP_VERSION,
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

# Register routers
app.include_router(auth.router)
app.include_router(clientes.router)
app.include_router(orcamentos.router)


@app.get("/")
async def root():
    """Service information."""
    return {
        "success": True,
        "message": APP_NAME,
        "version": APP_VERSION,
        "endpoints": {
            "docs": "/docs",
            "auth": "/api/v1/auth",
            "clientes": "/api/v1/clientes",
            "orcamentos": "/api/v1/orcamentos",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "success": True,
        "status": "healthy",
        "environment": settings.environment,
        "timestamp": datetime.now(UTC).isoformat(),
        "version": APP_VERSION,
    }
