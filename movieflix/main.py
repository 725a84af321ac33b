"""FastAPI application entry point with lifespan, logging, and middleware."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movieflix.config import settings
from movieflix.errors import CatalogError, Unauthenticated
from movieflix.models import HealthResponse
from movieflix.routers import genres, movies
from movieflix.services.catalog import CatalogService
from movieflix.services.database import DatabaseService

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = DatabaseService(settings.db_path)
    catalog = CatalogService(db)

    movies.init_router(catalog)
    genres.init_router(catalog)

    app.state.db = db
    app.state.catalog = catalog

    logger.info("Application started: db=%s", settings.db_path)
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="MovieFlix Catalog",
    description=(
        "Read-only movie and genre catalog. Every endpoint except /health "
        "requires a bearer token carrying the VISITOR or MEMBER role."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s → %d  (%.0f ms)",
        request.method, request.url.path, response.status_code, elapsed,
    )
    return response


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred. Please try again."},
    )


@app.get("/health", response_model=HealthResponse, tags=["system"])
async def health():
    """Check database connectivity."""
    db: DatabaseService = app.state.db
    db_ok = db.health_check()
    return HealthResponse(status="healthy" if db_ok else "degraded", database=db_ok)


app.include_router(movies.router)
app.include_router(genres.router)
