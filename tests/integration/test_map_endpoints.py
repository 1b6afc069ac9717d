"""
Integration tests for the view surface against a mocked remote service
"""
import httpx
import pytest
from fastapi.testclient import TestClient

from h2ok.config.settings import MapSettings, Settings
from h2ok.core.dependencies import ServiceContainer
from h2ok.main import create_app
from h2ok.services.map_sync_coordinator import LOAD_ERROR_MESSAGE


class FakeBackend:
    """Stands in for the partners/updates service; tests swap its responses."""

    def __init__(self, make_payload):
        self.requests = []
        self.partners = (200, {"json": {"items": [make_payload(id="a"), make_payload(id="b", is_new=True)]}})
        self.updates = (200, {"json": {"items": [{"id": 1, "title": "Hello", "content": "First post"}]}})

    def __call__(self, request):
        self.requests.append(request)
        if request.url.path == "/api/partners":
            status, kwargs = self.partners
        elif request.url.path == "/api/updates":
            status, kwargs = self.updates
        else:
            status, kwargs = 404, {}
        return httpx.Response(status, **kwargs)

    def partner_params(self):
        return [dict(r.url.params) for r in self.requests if r.url.path == "/api/partners"]


@pytest.fixture
def backend(make_payload):
    return FakeBackend(make_payload)


@pytest.fixture
def client(backend):
    container = ServiceContainer(
        settings=Settings(_env_file=None, backend_url="http://backend.test"),
        transport=httpx.MockTransport(backend),
    )
    with TestClient(create_app(container)) as test_client:
        yield test_client


def test_map_before_activation(client, backend):
    r = client.get("/map")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    data = body["data"]
    assert data["markers"] == []
    assert data["error"] is None
    assert data["viewport"] == {"center": [57.15303, 65.53433], "zoom": 12, "mode": "default"}
    assert [c["key"] for c in data["categories"]] == ["all", "shop", "cafe", "university", "sports"]
    assert [c["key"] for c in data["categories"] if c["selected"]] == ["all"]
    assert backend.requests == []


def test_activation_loads_markers(client, backend):
    data = client.post("/map/activate").json()["data"]

    assert backend.partner_params() == [{"has_cold": "true"}]
    assert [m["key"] for m in data["markers"]] == ["a", "b"]
    marker = data["markers"][1]
    assert marker["label"] == "Coffee Point (new)"
    assert marker["position"] == [57.15, 65.53]
    assert marker["popup"][-1] == "Access: free"
    assert marker["directions_url"].endswith("?api=1&destination=57.15,65.53")
    assert marker["icon"]["icon_size"] == [25, 41]


def test_filter_toggles_and_search_send_only_hot(client, backend):
    client.post("/map/filters", json={"require_cold": False})
    client.post("/map/filters", json={"require_hot": True})
    client.post("/map/search")

    assert backend.partner_params()[-1] == {"has_hot": "true"}


def test_text_filter_is_sent_only_on_search(client, backend):
    client.post("/map/filters", json={"query_text": "lenina"})
    assert backend.partner_params() == []

    data = client.post("/map/search").json()["data"]
    assert backend.partner_params() == [{"has_cold": "true", "q": "lenina"}]
    assert data["query_text"] == "lenina"


def test_category_filter_is_instant(client, backend):
    data = client.post("/map/filters", json={"category": "cafe"}).json()["data"]
    assert backend.partner_params() == [{"category": "cafe", "has_cold": "true"}]
    assert [c["key"] for c in data["categories"] if c["selected"]] == ["cafe"]


def test_unknown_category_is_rejected(client):
    r = client.post("/map/filters", json={"category": "bar"})
    assert r.status_code == 422
    assert r.json()["status"] == "error"


def test_empty_items_shows_empty_map_without_error(client, backend):
    backend.partners = (200, {"json": {"items": []}})
    data = client.post("/map/activate").json()["data"]
    assert data["markers"] == []
    assert data["error"] is None


def test_malformed_response_shows_error_and_keeps_markers(client, backend):
    client.post("/map/activate")
    backend.partners = (200, {"content": b"<html>oops</html>"})

    data = client.post("/map/search").json()["data"]

    assert data["error"] == LOAD_ERROR_MESSAGE
    assert [m["key"] for m in data["markers"]] == ["a", "b"]
    assert data["loading"] is False


def test_locate_recenters_and_denial_is_silent(client):
    data = client.post("/map/locate", json={"latitude": 55.75, "longitude": 37.62}).json()["data"]
    assert data["viewport"] == {"center": [55.75, 37.62], "zoom": 13, "mode": "user_centered"}

    r = client.post("/map/locate", json={})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["viewport"]["center"] == [55.75, 37.62]
    assert data["error"] is None


def test_updates_feed(client):
    body = client.get("/updates").json()
    assert body["status"] == "ok"
    page = body["data"]
    assert page["items"] == [{"id": "1", "title": "Hello", "content": "First post", "external_url": None}]
    assert page["empty_text"] == "No updates yet"
    assert page["read_more_label"] == "Read more"


def test_updates_feed_failure_is_empty(client, backend):
    backend.updates = (503, {})
    body = client.get("/updates").json()
    assert body["status"] == "ok"
    assert body["data"]["items"] == []


def test_about_page(client):
    data = client.get("/about").json()["data"]
    assert data["community_url"] == "https://t.me/H2OK_tyumen"
    assert [link["label"] for link in data["navigation"]] == ["Map", "Updates", "About", "Telegram"]


def test_views_before_startup_return_error_envelope():
    app = create_app(ServiceContainer(settings=Settings(_env_file=None)))
    client = TestClient(app)
    r = client.get("/map")
    assert r.status_code == 503
    assert r.json()["status"] == "error"


def test_views_use_the_injected_settings(backend):
    settings = Settings(
        _env_file=None,
        backend_url="http://backend.test",
        app_name="H2Ok Staging",
        community_url="https://t.me/h2ok_staging",
        map=MapSettings(tile_url="https://tiles.test/{z}/{x}/{y}.png"),
    )
    container = ServiceContainer(settings=settings, transport=httpx.MockTransport(backend))
    app = create_app(container)
    assert app.title == "H2Ok Staging"

    with TestClient(app) as test_client:
        assert test_client.get("/map").json()["data"]["tile_url"] == "https://tiles.test/{z}/{x}/{y}.png"
        about = test_client.get("/about").json()["data"]
        assert about["community_url"] == "https://t.me/h2ok_staging"
        assert test_client.get("/health").json()["backend_url"] == "http://backend.test"
