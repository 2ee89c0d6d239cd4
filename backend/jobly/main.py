"""
FastAPI application entry point for the Jobly API.

This is the main app that:
- Initializes FastAPI with CORS
- Registers the API routers
- Maps service errors to client responses
- Provides health check endpoint
- Sets up database connection lifecycle
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobly import database
from jobly.config import settings
from jobly.errors import JoblyError
from jobly.validation import format_errors
# Import models so Base.metadata knows about all tables
from jobly import models  # noqa: F401
# Import API routers
from jobly.api import jobs

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    On startup: Create tables if configured to
    On shutdown: Close database connections gracefully
    """
    # Startup
    logger.info("🚀 Starting Jobly API...")
    logger.info(f"📊 Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else 'configured'}")
    logger.info(f"🔧 Debug mode: {settings.debug}")

    if settings.create_tables_on_startup:
        async with database.engine.begin() as conn:
            await conn.run_sync(database.Base.metadata.create_all)

    yield

    # Shutdown
    logger.info("👋 Shutting down Jobly API...")
    await database.engine.dispose()


# Initialize FastAPI app
app = FastAPI(
    title="Jobly API",
    description="API for job postings and applications",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS
allowed_origins = [
    "http://localhost:3000",  # Local development
]

# Add production origins from environment variable
if settings.allowed_origins:
    allowed_origins.extend(
        origin.strip() for origin in settings.allowed_origins.split(',') if origin.strip()
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers
@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError):
    """Single exit point for service errors: status from the error class, detail as message or list."""
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail()})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed path ids and bodies get the same 400 shape as schema failures."""
    errors = format_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} -> 400: {errors}")
    return JSONResponse(status_code=400, content={"detail": errors})


# Health check endpoint
@app.get("/health")
async def health_check():
    """Simple health check endpoint."""
    return {
        "status": "healthy",
        "service": "Jobly API",
        "version": "1.0.0",
    }


# Root endpoint
@app.get("/")
async def root():
    """API root with basic info."""
    return {
        "message": "Jobly API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


# Register API routers
app.include_router(jobs.router, prefix="/api/jobs", tags=["jobs"])
