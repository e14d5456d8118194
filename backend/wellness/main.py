"""
FastAPI entrypoint for the wellness check-in backend.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from wellness.core.config import settings
from wellness.core.utils import format_error
from wellness.db.session import init_db
from wellness.api.router import api_router
from wellness.services.storage_service import SnapshotDecodeError

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    init_db()
    logger.info(f"{settings.APP_NAME} started with {settings.STORAGE_BACKEND} storage")
    yield


app = FastAPI(
    title="Wellness Check-in API",
    description="Daily mood check-ins with sentiment trends and recommendations",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SnapshotDecodeError)
async def snapshot_decode_error_handler(request: Request, exc: SnapshotDecodeError):
    """Corrupted stored data fails the request instead of reading as empty."""
    logger.error(f"Failed to load check-ins for {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Stored check-in data is corrupted", str(exc))
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Wellness Check-in API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
