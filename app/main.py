"""
FastAPI main application with DDD architecture
"""

import logging
from contextlib import asynccontextmanager

import redis
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import MarketplaceError, RateLimitError
from app.core.logging import configure_logging
from app.api.router import api_router
from app.db.database import SessionLocal, engine
from app.db.models import Base

# Import all ORM models to ensure relationships are resolved
import app.infrastructure.orm  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    configure_logging()
    if settings.TESTING or settings.DATABASE_URL.startswith("sqlite"):
        # Postgres schema is managed by alembic
        Base.metadata.create_all(bind=engine)
    logger.info("Starting %s %s (%s)", settings.PROJECT_NAME, settings.VERSION, settings.ENVIRONMENT)
    yield
    logger.info("Shutting down %s", settings.PROJECT_NAME)


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.DESCRIPTION,
    version=settings.VERSION,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MarketplaceError)
async def marketplace_error_handler(request: Request, exc: MarketplaceError):
    headers = None
    if isinstance(exc, RateLimitError) and exc.retry_after:
        headers = {"Retry-After": str(exc.retry_after)}
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(status_code=400, content={"error": "Invalid request."})

    first = errors[0]
    field = next((str(part) for part in reversed(first.get("loc", ())) if isinstance(part, str)), None)
    message = first.get("msg", "Invalid request.")
    if field and field not in ("body", "query", "path"):
        message = f"{field}: {message}"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint"""
    return {"message": f"{settings.PROJECT_NAME} API", "version": settings.VERSION}


@app.get("/health")
async def health_check():
    """Health check endpoint that verifies database connectivity"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1")).fetchone()
        db_status = "healthy"
    except SQLAlchemyError as e:
        logger.warning("Database health check failed: %s", e)
        db_status = "unhealthy"
    finally:
        db.close()

    # Redis is only needed by the shared rate limiter
    redis_status = "not_configured"
    if settings.RATE_LIMIT_BACKEND == "redis":
        try:
            redis.from_url(settings.REDIS_URL).ping()
            redis_status = "healthy"
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            redis_status = "unhealthy"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "database": db_status,
        "redis": redis_status,
        "version": settings.VERSION,
    }


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
