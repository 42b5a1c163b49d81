"""
Root conftest.py - Shared fixtures for all tests.

Provides:
- A fixed clock for time-dependent predicates
- Runner model factory
- FastAPI test client bound to the fixed clock
"""
import pytest
from fastapi.testclient import TestClient

from runnerspec.api.main import create_app
from runnerspec.domain.entities import Runner
from runnerspec.infrastructure.config import Config

from tests.factories import FIXED_NOW, runner_document


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def make_runner():
    """Factory returning a Runner model built from spec/status documents."""

    def _make(spec=None, status=None, name="runner-1"):
        return Runner.model_validate(runner_document(spec, status, name=name))

    return _make


@pytest.fixture
def valid_template():
    return {
        "storageClassName": "standard",
        "accessModes": ["ReadWriteOnce"],
        "resources": {"requests": {"storage": "10Gi"}},
    }


@pytest.fixture
def app():
    return create_app(Config(), clock=lambda: FIXED_NOW)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
