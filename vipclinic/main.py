from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging
import time

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.deps import get_database
from .api.doctors import router as doctors_router
from .core.config import settings
from .core.database import Database, init_db
from .core.errors import ClinicError, InvalidRequestError
from .schemas.doctor import REQUIRED_FIELDS_MESSAGE
from .schemas.status import HealthResponse, RootResponse

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the pool, check connectivity and ensure the schema before serving."""
    logger.info("Starting VipClinic API...")

    database: Optional[Database] = app.state.database
    owns_database = database is None
    if owns_database:
        database = Database.from_settings(settings)
        app.state.database = database

    db_connected = database.check_connectivity()
    if db_connected:
        init_db(database)
    logger.info(f"Database: {'Connected' if db_connected else 'Disconnected'}")

    yield

    logger.info("Shutting down VipClinic API...")
    if owns_database:
        database.dispose()


def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    When ``database`` is omitted the lifespan constructs one from settings
    and disposes of it on shutdown.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.VERSION,
        description="Clinic registration API for doctors",
        lifespan=lifespan,
    )
    app.state.database = database

    # Middleware setup
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware for request logging and timing
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

    # Exception handlers
    @app.exception_handler(ClinicError)
    async def clinic_error_handler(request: Request, exc: ClinicError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Bodies that are not a JSON object of strings are treated like missing fields
        error = InvalidRequestError(REQUIRED_FIELDS_MESSAGE, error=str(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            message = "The requested resource was not found"
        else:
            message = str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "success": False,
                "message": message,
                "path": str(request.url.path)
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception):
        logger.error(f"Internal server error: {str(exc)}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An unexpected error occurred",
                "error": str(exc)
            }
        )

    # Include routers
    app.include_router(doctors_router, prefix="/api")

    @app.get("/", response_model=RootResponse)
    def root(database: Database = Depends(get_database)):
        """Root endpoint with service status."""
        return RootResponse(
            message="VipClinic API with PostgreSQL is running!",
            timestamp=_utc_timestamp(),
            database=database.engine.dialect.name,
        )

    @app.get("/health", response_model=HealthResponse)
    def health_check(database: Database = Depends(get_database)):
        """Health check endpoint; always 200, degraded when the database is unreachable."""
        db_connected = database.check_connectivity()
        return HealthResponse(
            status="healthy" if db_connected else "degraded",
            service=settings.APP_NAME,
            database="connected" if db_connected else "disconnected",
            timestamp=_utc_timestamp(),
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vipclinic.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
