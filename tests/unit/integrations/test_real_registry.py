"""Tests for RealRegistry against an in-process httpx transport."""

import httpx
import pytest

from registry_sync.core.errors import ComponentNotFound, RegistryMalformed, RegistryUnavailable
from registry_sync.core.registry.real import RealRegistry

BASE_URL = "https://ui.example.com"


def _registry(handler) -> RealRegistry:
    return RealRegistry(BASE_URL, transport=httpx.MockTransport(handler))


def test_fetch_manifest_filters_names() -> None:
    """Test that demo, index and theme entries are dropped and duplicates collapse."""
    requested: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(
            200,
            json={
                "name": "redpanda-ui",
                "items": [
                    {"name": "button", "type": "registry:ui"},
                    {"name": "button-demo"},
                    {"name": "index"},
                    {"name": "theme"},
                    {"name": "use-toast"},
                    {"name": "button"},
                ],
            },
        )

    manifest = _registry(handler).fetch_manifest()

    assert requested == [f"{BASE_URL}/r/registry.json"]
    assert manifest.component_names() == ("button", "use-toast")


def test_fetch_manifest_non_success_status() -> None:
    """Test that a non-success status raises RegistryUnavailable with status and reason."""
    registry = _registry(lambda request: httpx.Response(503))

    with pytest.raises(RegistryUnavailable, match="503 Service Unavailable"):
        registry.fetch_manifest()


def test_fetch_manifest_transport_error() -> None:
    """Test that connection failures raise RegistryUnavailable."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RegistryUnavailable, match="connection refused"):
        _registry(handler).fetch_manifest()


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>not json</html>"),
        httpx.Response(200, json={"components": []}),
        httpx.Response(200, json={"items": "button"}),
        httpx.Response(200, json=[{"name": "button"}]),
        httpx.Response(200, json={"items": [{"title": "no name"}]}),
    ],
)
def test_fetch_manifest_malformed_payload(response: httpx.Response) -> None:
    """Test that schema violations raise RegistryMalformed."""
    with pytest.raises(RegistryMalformed):
        _registry(lambda request: response).fetch_manifest()


def test_fetch_component_details() -> None:
    """Test parsing of a component bundle, including the type field."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == f"{BASE_URL}/r/button.json"
        return httpx.Response(
            200,
            json={
                "name": "button",
                "files": [
                    {
                        "path": "registry/components/button.tsx",
                        "content": "export const Button = () => null\n",
                        "type": "registry:ui",
                    }
                ],
            },
        )

    details = _registry(handler).fetch_component_details("button")

    assert details.name == "button"
    assert len(details.files) == 1
    assert details.files[0].path == "registry/components/button.tsx"
    assert details.files[0].kind == "registry:ui"


def test_fetch_component_details_not_found() -> None:
    """Test that a 404 raises ComponentNotFound with the status."""
    registry = _registry(lambda request: httpx.Response(404))

    with pytest.raises(ComponentNotFound, match='"chart": 404 Not Found'):
        registry.fetch_component_details("chart")


def test_fetch_component_details_malformed() -> None:
    """Test that a bundle without files raises RegistryMalformed."""
    registry = _registry(lambda request: httpx.Response(200, json={"name": "button"}))

    with pytest.raises(RegistryMalformed):
        registry.fetch_component_details("button")
