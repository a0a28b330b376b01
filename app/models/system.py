"""
System-related data models
"""
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

class HealthResponse(BaseModel):
    """Response model for health check endpoint"""
    status: str = Field(..., description="Service health status")
    timestamp: datetime = Field(..., description="Current server time")
    service: str = Field(..., description="Service name")

class InfoResponse(BaseModel):
    """Response model for service info endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    description: str = Field(..., description="Service description")
    timestamp: datetime = Field(..., description="Current server time")
    # Wire names are kept for existing clients; values describe the Python runtime
    java_version: str = Field(..., alias="java.version", description="Runtime version")
    os_name: str = Field(..., alias="os.name", description="Host operating system name")
