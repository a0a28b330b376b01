"""
Application factory tests
"""
import logging
import pytest
from fastapi.testclient import TestClient

from app.api.v1 import greeting, system
from app.config import Settings
from app.main import configure_logging, create_app

@pytest.fixture
def failing_app():
    """An app with an extra route that always raises"""
    app = create_app(Settings(ENVIRONMENT="test"))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return app

def test_unhandled_exception_returns_500(failing_app):
    """Test the global exception handler"""
    with TestClient(failing_app, raise_server_exceptions=False) as client:
        response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {
        "detail": "An unexpected error occurred. Please try again later."
    }

def test_routes_registered():
    """Test that exactly the service endpoints are mounted"""
    app = create_app(Settings(ENVIRONMENT="production"))
    assert set(app.openapi()["paths"]) == {"/", "/hello/{name}", "/health", "/info"}
    with TestClient(app) as client:
        for path in ["/docs", "/openapi.json", "/redoc", "/hello", "/actuator/health"]:
            assert client.get(path).status_code == 404

def test_docs_enabled_in_development():
    """Test that API docs are served in development"""
    app = create_app(Settings(ENVIRONMENT="development"))
    with TestClient(app) as client:
        assert client.get("/docs").status_code == 200
        assert client.get("/openapi.json").status_code == 200

def test_configure_logging_writes_file(tmp_path):
    """Test that logging goes to a rotating file in LOG_DIR"""
    root_logger = logging.getLogger()
    previous_handlers = root_logger.handlers[:]
    log_dir = tmp_path / "logs"
    configure_logging(Settings(LOG_DIR=str(log_dir), LOG_LEVEL="info"))
    try:
        logging.getLogger("app.test").info("hello log")
        for handler in root_logger.handlers:
            handler.flush()
        assert "hello log" in (log_dir / "demo-microservice.log").read_text()
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(logging.WARNING)

@pytest.mark.asyncio
async def test_handlers_called_directly():
    """Test handlers without going through HTTP"""
    root = await greeting.root()
    assert root.message == "Hello from Spring Boot Microservice!"

    hello = await greeting.hello("")
    assert hello.message == "Hello !"

    health = await system.health_check()
    assert health.status == "UP"

    info = await system.info()
    dumped = info.model_dump(by_alias=True)
    assert dumped["java.version"] == info.java_version
    assert dumped["os.name"] == info.os_name
