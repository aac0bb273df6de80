import pytest
from fastapi.testclient import TestClient

from exercise_naming.main import app
from exercise_naming.settings import settings

# --------------- Settings ---------------


@pytest.fixture
def name_limits(monkeypatch):
    """
    Fixture returning a function that overrides the name length limits
    for the duration of a test.
    Example:
        name_limits(min_length=5, max_length=20)
    """

    def _set(min_length: int | None = None, max_length: int | None = None) -> None:
        if min_length is not None:
            monkeypatch.setattr(settings, "MIN_NAME_LENGTH", min_length)
        if max_length is not None:
            monkeypatch.setattr(settings, "MAX_NAME_LENGTH", max_length)

    return _set


# --------------- Test Clients ---------------


@pytest.fixture(scope="session")
def app_instance():
    return app


@pytest.fixture
def client(app_instance):
    """Plain client, real dependencies."""
    return TestClient(app_instance, raise_server_exceptions=False)
