"""
Pytest configuration and fixtures
"""
import sys
import threading
import time
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from student_registry_api.app.core.config import Settings  # noqa: E402
from student_registry_api.app.core.errors import SeedFetchError  # noqa: E402
from student_registry_api.app.main import create_app  # noqa: E402
from student_registry_api.app.schemas.student import StudentRead  # noqa: E402


SEED_STUDENTS = [
    StudentRead(id=1, name="Leanne Graham"),
    StudentRead(id=2, name="Ervin Howell"),
    StudentRead(id=3, name="Clementine Bauch"),
]


class FakeSeedClient:
    """Stands in for SeedClient and counts how often it was asked for data."""

    def __init__(self, students=None, fail_times=0, delay=0.0):
        self.students = list(SEED_STUDENTS if students is None else students)
        self.fail_times = fail_times
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def fetch_students(self):
        with self._lock:
            self.calls += 1
            attempt = self.calls
        if self.delay:
            time.sleep(self.delay)
        if attempt <= self.fail_times:
            raise SeedFetchError("remote API answered with status 503")
        return list(self.students)


@pytest.fixture
def seed_client():
    return FakeSeedClient()


@pytest.fixture
def settings():
    return Settings(seed_url="http://seed.test/users", preload_students=False)


@pytest.fixture
def app(settings, seed_client):
    return create_app(settings=settings, seed_client=seed_client)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
