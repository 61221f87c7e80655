"""Tests for the FastAPI service."""

from __future__ import annotations

import base64
import json
from typing import Any, Dict

import pytest

try:
    from fastapi.testclient import TestClient
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    pytest.skip("fastapi not installed", allow_module_level=True)

from install_bridge.service import RequestConfigError, ServiceSettings, create_app, decode_config_param
from install_bridge.service.pages import render_fallback_page

MAC_UA = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)"
WINDOWS_UA = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


def _encode(config: Dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(config).encode("utf-8")).decode("ascii")


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(ServiceSettings(max_config_size=1024)))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_root_page_lists_endpoints(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert "Install Bridge Server" in response.text
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert response.headers["access-control-allow-origin"] == "*"


def test_badge_endpoint_returns_svg(client: TestClient, sample_config) -> None:
    response = client.get("/badge.svg", params={"config": _encode(sample_config)})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert response.headers["cache-control"] == "public, max-age=3600"
    assert "TestApp" in response.text


def test_badge_endpoint_rejects_missing_config(client: TestClient) -> None:
    response = client.get("/badge.svg")
    assert response.status_code == 400
    assert response.text == "Missing config parameter"


def test_badge_endpoint_rejects_invalid_config(client: TestClient) -> None:
    response = client.get("/badge.svg", params={"config": _encode({"name": "TestApp"})})
    assert response.status_code == 400
    assert response.text == "Invalid config: installers is required and must be an object"


def test_badge_endpoint_rejects_large_config(client: TestClient, sample_config) -> None:
    sample_config["homepage"] = "https://example.com/" + "a" * 2048
    response = client.get("/badge.svg", params={"config": _encode(sample_config)})
    assert response.status_code == 400
    assert response.text == "Config too large"


def test_install_redirects_to_platform_installer(client: TestClient, sample_config) -> None:
    response = client.get(
        "/install",
        params={"config": _encode(sample_config)},
        headers={"User-Agent": MAC_UA},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/app.dmg"


def test_install_redirects_to_fallback(client: TestClient, sample_config) -> None:
    sample_config["fallback"] = "https://example.com/download"
    response = client.get(
        "/install",
        params={"config": _encode(sample_config)},
        headers={"User-Agent": WINDOWS_UA},
        follow_redirects=False,
    )
    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/download"


def test_install_renders_download_page_without_fallback(client: TestClient, sample_config) -> None:
    response = client.get(
        "/install",
        params={"config": _encode(sample_config)},
        headers={"User-Agent": WINDOWS_UA},
        follow_redirects=False,
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Detected OS: Windows" in response.text
    assert "No installer available for your platform" in response.text
    assert '<a class="btn" href="https://example.com/app.dmg">Download for macOS</a>' in response.text
    assert "Download for Linux" in response.text


def test_install_page_for_unknown_user_agent(client: TestClient, sample_config) -> None:
    response = client.get(
        "/install",
        params={"config": _encode(sample_config)},
        headers={"User-Agent": "Some weird device"},
        follow_redirects=False,
    )
    assert response.status_code == 200
    assert "Detected OS" not in response.text
    assert "No installer available" not in response.text
    assert "Download for macOS" in response.text
    assert "Download for Linux" in response.text


def test_install_page_links_homepage(client: TestClient, sample_config) -> None:
    sample_config["installers"] = {"darwin": "https://example.com/app.dmg"}
    sample_config["homepage"] = "https://example.com/?a=1&b=2"
    page = render_fallback_page(sample_config, "win32")
    assert '<div class="footer"><a href="https://example.com/?a=1&amp;b=2">Learn more &rarr;</a></div>' in page
    assert "Detected OS: Windows" in page


def test_options_returns_no_content(client: TestClient) -> None:
    response = client.options("/install")
    assert response.status_code == 204
    assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"


def test_unknown_path_returns_plain_not_found(client: TestClient) -> None:
    response = client.get("/nope")
    assert response.status_code == 404
    assert response.text == "Not Found"


def test_decode_config_param_accepts_urlsafe_without_padding() -> None:
    text = '{"name": "A?>"}'
    encoded = base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")
    assert decode_config_param(encoded) == text


def test_decode_config_param_restores_plus_from_query_spaces() -> None:
    text = '{"k": ">>>"}'
    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    assert "+" in encoded
    assert decode_config_param(encoded.replace("+", " ")) == text


def test_decode_config_param_rejects_garbage() -> None:
    with pytest.raises(RequestConfigError, match="Invalid config encoding"):
        decode_config_param("*not base64*")


def test_service_settings_from_env() -> None:
    settings = ServiceSettings.from_env({"PORT": "8080", "MAX_CONFIG_SIZE": "bogus"})
    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.max_config_size == 8 * 1024
