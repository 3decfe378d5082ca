"""Shared fixtures: a fake ARSO upstream, a manual clock, and a wired app."""
import httpx
import pytest
from fastapi.testclient import TestClient

from arso.config import Settings
from arso.main import create_app
from arso.storage import ResponseCache
from tests.upstream import EARTHQUAKE_URL, INDEX_URL, STATION_HOST, FakeClock, FakeUpstream


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def http_client(upstream):
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def app_settings(tmp_path):
    static_dir = tmp_path / "static"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>ARSO</h1>")
    files_dir = static_dir / "files"
    files_dir.mkdir()
    (files_dir / "postaje.csv").write_text("id,title\n")
    return Settings(
        earthquake_url=EARTHQUAKE_URL,
        station_index_url=INDEX_URL,
        station_host=STATION_HOST,
        static_dir=str(static_dir),
        max_concurrency=2,
    )


@pytest.fixture
def response_cache(clock):
    return ResponseCache(ttl=300.0, sweep_interval=60.0, clock=clock)


@pytest.fixture
def client(app_settings, http_client, response_cache):
    app = create_app(settings=app_settings, client=http_client, cache=response_cache)
    return TestClient(app)
