import pytest

from config import Settings
from main import create_app

MATERIAL = (
    "Photosynthesis converts light energy into chemical energy. "
    "Chlorophyll inside the chloroplast absorbs sunlight, and the plant "
    "produces glucose and oxygen from carbon dioxide and water."
)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


@pytest.fixture
def material():
    return MATERIAL


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
