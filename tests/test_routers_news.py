import pytest
from unittest.mock import MagicMock

from aiwebnews.models.news import GroundingChunk, NewsItem, WebSource
from aiwebnews.models.view import Failed, Loading, Ready

SAMPLE_READY = Ready(
    news_items=[NewsItem(title="T", summary="S")],
    sources=[GroundingChunk(web=WebSource(uri="https://example.com", title="example.com"))],
)


@pytest.fixture
def mock_view(mocker):
    view = MagicMock()
    view.state = Loading()
    mocker.patch("aiwebnews.services.view.get_news_view", return_value=view)
    return view


@pytest.fixture
def client(mock_view, api_client):
    return api_client


class TestNewsState:
    def test_loading(self, client, mock_view):
        resp = client.get("/api/news")
        assert resp.status_code == 200
        assert resp.json() == {"status": "loading"}

    def test_ready(self, client, mock_view):
        mock_view.state = SAMPLE_READY
        resp = client.get("/api/news")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ready"
        assert data["news_items"] == [{"title": "T", "summary": "S"}]
        assert data["sources"][0]["web"]["uri"] == "https://example.com"

    def test_failed(self, client, mock_view):
        mock_view.state = Failed(message="boom")
        resp = client.get("/api/news")
        assert resp.json() == {"status": "failed", "message": "boom"}


class TestPage:
    def test_loading_page(self, client, mock_view):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert 'role="progressbar"' in resp.text

    def test_ready_page(self, client, mock_view):
        mock_view.state = SAMPLE_READY
        resp = client.get("/")
        assert "<h2>T</h2>" in resp.text
        assert 'class="sources"' in resp.text

    def test_failed_page(self, client, mock_view):
        mock_view.state = Failed(message="boom")
        resp = client.get("/")
        assert 'role="alert"' in resp.text
        assert "boom" in resp.text
        assert "<article>" not in resp.text


class TestStatus:
    def test_reports_configuration_and_state(self, client, mock_view, mocker):
        mocker.patch("aiwebnews.main.get_settings", return_value=MagicMock(api_key="k"))
        mock_view.state = SAMPLE_READY
        resp = client.get("/api/status")
        assert resp.json() == {"configured": True, "state": "ready"}

    def test_unconfigured(self, client, mock_view, mocker):
        mocker.patch("aiwebnews.main.get_settings", return_value=MagicMock(api_key=""))
        resp = client.get("/api/status")
        assert resp.json() == {"configured": False, "state": "loading"}


class TestRootApp:
    def test_non_local_client_forbidden(self, mock_view):
        from aiwebnews.main import app
        from fastapi.testclient import TestClient
        resp = TestClient(app).get("/api/news")
        assert resp.status_code == 403
        assert resp.json() == {"error_code": "forbidden", "message": "Localhost access only"}

    def test_lifespan_mounts_and_unmounts_view(self, mock_view, mocker):
        configure = mocker.patch("aiwebnews.main.configure_logging")
        mocker.patch("aiwebnews.main.get_settings", return_value=MagicMock(log_level="DEBUG"))
        from aiwebnews.main import app
        from fastapi.testclient import TestClient
        with TestClient(app):
            mock_view.mount.assert_called_once()
            mock_view.unmount.assert_not_called()
        mock_view.unmount.assert_called_once()
        configure.assert_called_once_with("DEBUG")
