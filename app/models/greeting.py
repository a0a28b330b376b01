"""
Greeting-related data models
"""
from datetime import datetime

from pydantic import BaseModel, Field

class GreetingResponse(BaseModel):
    """Response model for root greeting endpoint"""
    message: str = Field(..., description="Greeting text")
    timestamp: datetime = Field(..., description="Current server time")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")

class HelloResponse(BaseModel):
    """Response model for the named greeting endpoint"""
    message: str = Field(..., description="Greeting addressed to the caller")
    timestamp: datetime = Field(..., description="Current server time")
    service: str = Field(..., description="Service name")
