"""
Demo Microservice
A small FastAPI service with greeting, health and info endpoints
"""
import os
import logging
from logging.handlers import RotatingFileHandler

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

# Load environment variables before settings are read
load_dotenv()

from app.api.routes import register_routes
from app.config import (
    SERVICE_NAME,
    SERVICE_VERSION,
    SERVICE_DESCRIPTION,
    Settings,
    settings,
)
from app.middleware.logging import logging_middleware

# Get a logger for this module
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(config: Settings) -> None:
    """Send log records to the console and to a rotating file in LOG_DIR"""
    os.makedirs(config.LOG_DIR, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        os.path.join(config.LOG_DIR, f"{SERVICE_NAME}.log"),
        maxBytes=10485760,  # 10MB
        backupCount=10,
    )
    file_handler.setFormatter(formatter)

    # force replaces handlers left over from an earlier call
    logging.basicConfig(
        level=config.LOG_LEVEL,
        handlers=[console_handler, file_handler],
        force=True,
    )

async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "An unexpected error occurred. Please try again later."},
    )

def create_app(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application

    Interactive docs are only served in the development environment, so
    every other deployment exposes nothing beyond the service endpoints.
    """
    docs = config.docs_enabled
    app = FastAPI(
        title=SERVICE_NAME,
        description=SERVICE_DESCRIPTION,
        version=SERVICE_VERSION,
        docs_url="/docs" if docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs else None,
    )

    app.middleware("http")(logging_middleware)
    app.add_exception_handler(Exception, global_exception_handler)

    register_routes(app)

    logger.info(f"{SERVICE_NAME} {SERVICE_VERSION} configured for {config.ENVIRONMENT}")
    return app

configure_logging(settings)
app = create_app(settings)

def run() -> None:
    """Start the server with uvicorn"""
    # Enable hot reload in development only
    reload = settings.ENVIRONMENT == "development"

    logger.info(f"Starting {SERVICE_NAME} on {settings.HOST}:{settings.PORT} (reload={reload})")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=reload,
    )

if __name__ == "__main__":
    run()
