import json
import httpx
import pytest
from fastapi.testclient import TestClient
from moodtunes.config.settings import Settings
from moodtunes.main import create_app
from moodtunes.service.spotify_service import SpotifyApiService

class FakeSpotify:
    """Records outbound requests and answers them with a canned handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond_json(self, payload, status_code=200):
        self.handler = lambda request: httpx.Response(status_code, content=json.dumps(payload).encode(),
                                                      headers={"Content-Type": "application/json"})

    def respond_text(self, text, status_code=200):
        self.handler = lambda request: httpx.Response(status_code, text=text)

    def fail_with(self, exc_type):
        def handler(request):
            raise exc_type("upstream unreachable", request=request)
        self.handler = handler

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

@pytest.fixture
def setting():
    return Settings(
        _env_file=None,
        CLIENT_ID="client-id",
        CLIENT_SECRET="client-secret",
        REDIRECT_URI="http://localhost:5000/callback",
        FRONT_BASE_URL="http://localhost:5173",
    )

@pytest.fixture
def fake_spotify():
    return FakeSpotify()

@pytest.fixture
def spotify_service(setting, fake_spotify):
    return SpotifyApiService(setting, transport=httpx.MockTransport(fake_spotify))

@pytest.fixture
def client(setting, spotify_service):
    app = create_app(setting, spotify_service)
    with TestClient(app, follow_redirects=False) as test_client:
        yield test_client
