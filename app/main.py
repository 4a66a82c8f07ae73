"""
Coletivo À Margem - FastAPI Application

Main entry point: JSON API, database-backed images and the Sobre page.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from app.api import router as api_router
from app.core.config import get_settings
from app.db.base import Base
from app.db import models_registry  # noqa: F401 - Import to register models
from app.db.session import async_session_maker, engine
from app.pages import router as pages_router
from app.pages.templating import STATIC_DIR

settings = get_settings()


async def init_database() -> None:
    """Initialize database tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def init_seed_data() -> None:
    """Seed content from the configured YAML file, if any."""
    if not settings.seed_file:
        return

    from app.db.seed import seed_from_file

    async with async_session_maker() as db:
        await seed_from_file(db, settings.seed_file)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(f"Starting {settings.app_name}...")

    # Ensure data directory exists
    Path(settings.data_save_folder).mkdir(parents=True, exist_ok=True)

    await init_database()
    await init_seed_data()

    logger.info(f"{settings.app_name} started on port {settings.port}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await engine.dispose()
    logger.info(f"{settings.app_name} stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Coletivo À Margem - site content API",
    lifespan=lifespan,
    docs_url="/swagger" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# Exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Erro interno do servidor"},
    )


@app.get("/health", tags=["System"])
async def health() -> dict:
    """Liveness probe."""
    return {"status": "ok"}


@app.get("/", include_in_schema=False)
async def index() -> RedirectResponse:
    """Send visitors to the timeline."""
    return RedirectResponse(url="/sobre")


# Include routers
app.include_router(api_router)
app.include_router(pages_router)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
