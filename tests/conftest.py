"""
PyTest configuration and fixtures
"""
import os
import shutil
import pytest
import logging
import tempfile
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

# Set test environment variables
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="demo-microservice-logs-")

# Import the FastAPI app
from app.main import app

# Disable logging during tests
logging.getLogger().setLevel(logging.WARNING)

@pytest.fixture(scope="session", autouse=True)
def log_dir():
    """
    Remove the test log directory once the session ends
    """
    path = os.environ["LOG_DIR"]
    yield path
    for handler in logging.getLogger().handlers:
        handler.close()
    shutil.rmtree(path, ignore_errors=True)

@pytest.fixture
def client():
    """
    Test client fixture for FastAPI app
    """
    with TestClient(app) as test_client:
        yield test_client
