"""
Employee Directory - FastAPI application entry point.
REST API over MongoDB.
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import Database, Collections
from app.middleware.error_handler import add_exception_handlers
from app.repositories.employee_repository import EmployeeRepository
from app.routers import employees as employees_router
from app.utils.logger import setup_logging, log_api_response

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    setup_logging()
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    if Database.db is None:
        Database.connect()
    await EmployeeRepository(Database.get_db()[Collections.EMPLOYEES]).ensure_indexes()

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")
    Database.close()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    application = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Employee directory REST API",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_api_response(logger, request.method, request.url.path, response.status_code, duration_ms)
        return response

    add_exception_handlers(application)

    application.include_router(
        employees_router.router,
        prefix=f"{settings.API_PREFIX}/employees",
        tags=["employees"]
    )

    @application.get(f"{settings.API_PREFIX}/health")
    async def health_check():
        """Health check endpoint."""
        connected = await Database.ping()
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "database": "connected" if connected else "disconnected"
        }

    return application


app = create_app()
