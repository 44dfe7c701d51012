"""
Signup Service Main Application

FastAPI application serving signup page data and recording signup steps.
Port: 8250
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from core.config import get_settings

from .factory import SignupServiceFactory
from .models import (
    Campaign,
    HealthResponse,
    LivenessResponse,
    PageMeta,
    ReadinessResponse,
    ResolutionStatus,
    SignupPageResponse,
    SignupRequest,
    SignupResponse,
)
from .protocols import (
    CampaignNotFoundError,
    CreatorNotFoundError,
    DataStoreError,
    PageNotFoundError,
)
from .signup_form import build_signup_steps

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.logging.level,
    format=settings.logging.log_format,
)
logger = logging.getLogger(__name__)

# Service configuration
SERVICE_NAME = settings.service_name
SERVICE_PORT = settings.service_port
SERVICE_VERSION = "1.0.0"

# Track startup time for uptime calculation
startup_time = time.time()

# Global factory instance
factory: Optional[SignupServiceFactory] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    global factory

    logger.info(f"Starting {SERVICE_NAME} on port {SERVICE_PORT}")

    factory = SignupServiceFactory(settings)
    await factory.initialize()

    yield

    # Cleanup
    logger.info(f"Shutting down {SERVICE_NAME}")
    await factory.close()


# Create FastAPI application
app = FastAPI(
    title="Signup Service",
    description="Campaign signup pages and multi-step signup submission",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)


# ====================
# Exception Handlers
# ====================


@app.exception_handler(CampaignNotFoundError)
async def campaign_not_found_handler(request: Request, exc: CampaignNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Campaign not found"},
    )


@app.exception_handler(PageNotFoundError)
async def page_not_found_handler(request: Request, exc: PageNotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "Page not found"},
    )


@app.exception_handler(CreatorNotFoundError)
async def creator_not_found_handler(request: Request, exc: CreatorNotFoundError):
    logger.error(f"Referential integrity failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "This page is unavailable"},
    )


@app.exception_handler(DataStoreError)
async def data_store_error_handler(request: Request, exc: DataStoreError):
    logger.error(f"Data store failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all exception handler"""
    logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ====================
# Dependencies
# ====================


def get_service():
    """Get signup service from factory"""
    if not factory:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return factory.service


async def get_campaign(request: Request, service=Depends(get_service)) -> Campaign:
    """Resolve the campaign from the request host"""
    domain = request.headers.get("host", "")
    return await service.get_campaign_for_domain(domain)


# ====================
# Health Endpoints
# ====================


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint"""
    dependencies = {}

    if factory:
        db_healthy = await factory.repository.health_check()
        dependencies["mongodb"] = "healthy" if db_healthy else "unhealthy"

    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        port=SERVICE_PORT,
        version=SERVICE_VERSION,
        dependencies=dependencies,
    )


@app.get("/health/ready", response_model=ReadinessResponse, tags=["Health"])
async def readiness_check():
    """Readiness check endpoint"""
    checks = {}
    details = {}

    if factory:
        db_healthy = await factory.repository.health_check()
        checks["database"] = db_healthy
        details["database"] = "Connected" if db_healthy else "Connection failed"
    else:
        checks["factory"] = False
        details["factory"] = "Factory not initialized"

    ready = all(checks.get(k, False) for k in ["database"])

    return ReadinessResponse(
        ready=ready,
        checks=checks,
        details=details,
    )


@app.get("/health/live", response_model=LivenessResponse, tags=["Health"])
async def liveness_check():
    """Liveness check endpoint"""
    return LivenessResponse(
        alive=True,
        uptime_seconds=time.time() - startup_time,
    )


# ====================
# Signup Endpoints
# ====================


@app.get(
    "/api/v1/pages/{code}",
    response_model=SignupPageResponse,
    tags=["Pages"],
)
async def get_signup_page(
    code: str,
    campaign: Campaign = Depends(get_campaign),
    service=Depends(get_service),
):
    """
    Get signup page props

    Returns the resolved page, its share metadata and the form steps.
    """
    resolution = await service.resolve_page(code, campaign)

    if resolution.status == ResolutionStatus.NOT_FOUND:
        raise PageNotFoundError(f"Page {resolution.code!r} not found", code=resolution.code)
    if resolution.status == ResolutionStatus.ERROR:
        raise resolution.error

    view = resolution.view
    return SignupPageResponse(
        page=view,
        meta=PageMeta.for_view(view),
        steps=[step.describe() for step in build_signup_steps(view)],
    )


@app.post(
    "/api/v1/signup",
    response_model=SignupResponse,
    tags=["Signup"],
)
async def submit_signup(
    request: SignupRequest,
    campaign: Campaign = Depends(get_campaign),
    service=Depends(get_service),
):
    """Record one step of a signup"""
    return await service.record_signup(request, campaign)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=SERVICE_PORT)
