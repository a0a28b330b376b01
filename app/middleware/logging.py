"""
Request logging middleware for the demo microservice
"""
import time
import logging
from fastapi import Request

from app.config import SERVICE_NAME

logger = logging.getLogger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"

def completion_level(status_code: int) -> int:
    """Failed requests (4xx, 5xx) are logged at WARNING, the rest at INFO"""
    return logging.WARNING if status_code >= 400 else logging.INFO

async def logging_middleware(request: Request, call_next):
    """
    Time each request, expose the duration in X-Process-Time and log it

    Routing failures such as 404 and 405 never reach a handler, so this is
    the only place they are recorded.
    """
    start_time = time.perf_counter()
    logger.debug("[%s] %s %s started", SERVICE_NAME, request.method, request.url.path)

    response = await call_next(request)

    process_time = time.perf_counter() - start_time
    response.headers[PROCESS_TIME_HEADER] = str(process_time)

    logger.log(
        completion_level(response.status_code),
        "[%s] %s %s -> %d in %.4fs",
        SERVICE_NAME,
        request.method,
        request.url.path,
        response.status_code,
        process_time,
    )
    return response
