"""
Greeting API endpoints
"""
from fastapi import APIRouter
from datetime import datetime
import logging

from app.config import SERVICE_NAME, SERVICE_VERSION
from app.models.greeting import GreetingResponse, HelloResponse

# Create logger
logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Hello from Spring Boot Microservice!"

# Create router
router = APIRouter(tags=["Greeting"])

# Define endpoints
@router.api_route("/", methods=["GET", "HEAD"], response_model=GreetingResponse)
async def root():
    """Return the fixed service greeting"""
    return GreetingResponse(
        message=ROOT_MESSAGE,
        timestamp=datetime.now(),
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
    )

@router.api_route("/hello/{name}", methods=["GET", "HEAD"], response_model=HelloResponse)
async def hello(name: str):
    """
    Greet the caller by name

    The name is used exactly as it arrives in the path, after URL decoding.
    An empty segment never reaches this handler: /hello/ is a 404.
    """
    logger.debug(f"Greeting {name[:50]!r}")
    return HelloResponse(
        message=f"Hello {name}!",
        timestamp=datetime.now(),
        service=SERVICE_NAME,
    )
