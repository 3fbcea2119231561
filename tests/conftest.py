import pytest

from app import create_app
from services.radar_service import RadarService
from tests.sentences import RECEIVED_AT


@pytest.fixture
def received_at():
    return RECEIVED_AT


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    RadarService._instance = None


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def radar_service(app):
    return RadarService.get_instance()
