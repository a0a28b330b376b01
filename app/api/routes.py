"""
Route registration for the demo microservice
"""
import logging
from fastapi import FastAPI

from app.api.v1 import greeting, system

# Configure logger
logger = logging.getLogger(__name__)

def register_routes(app: FastAPI) -> FastAPI:
    """
    Add the service endpoints to the FastAPI app

    Args:
        app: FastAPI app

    Returns:
        The same app, with GET /, /hello/{name}, /health and /info mounted
    """
    app.include_router(greeting.router)
    app.include_router(system.router)
    logger.info("Service endpoints added to application")
    return app
