"""
System API endpoints
"""
from fastapi import APIRouter
from datetime import datetime
import platform

from app.config import SERVICE_NAME, SERVICE_VERSION, SERVICE_DESCRIPTION
from app.models.system import HealthResponse, InfoResponse

# Create router
router = APIRouter(tags=["System"])

# Define endpoints
@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthResponse)
async def health_check():
    """Report the service as up. No dependency is probed."""
    return HealthResponse(
        status="UP",
        timestamp=datetime.now(),
        service=SERVICE_NAME,
    )

@router.api_route("/info", methods=["GET", "HEAD"], response_model=InfoResponse)
async def info():
    """Return service metadata along with the host runtime details"""
    return InfoResponse(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        description=SERVICE_DESCRIPTION,
        timestamp=datetime.now(),
        java_version=platform.python_version(),
        os_name=platform.system(),
    )
