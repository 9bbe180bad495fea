"""
Dhan Dashboard - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from dhan_dashboard.config import settings
from dhan_dashboard.api.routes import router as api_router
from dhan_dashboard.api.schemas import HealthResponse

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Dhan Dashboard...")
    if settings.dhan_access_token:
        logger.info("DHAN_ACCESS_TOKEN found, live Dhan data enabled")
    else:
        logger.warning("No DHAN_ACCESS_TOKEN, portfolio will serve mock data")

    yield

    logger.info("Dhan Dashboard stopped")


# Create FastAPI application
app = FastAPI(
    title="Dhan Dashboard",
    description="Live Dhan holdings and equity curve for the portfolio dashboard",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
# Note: allow_credentials=False when using wildcard origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "dhan-dashboard"}
