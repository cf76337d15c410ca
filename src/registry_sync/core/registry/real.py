"""Production registry client over HTTPS using httpx."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from registry_sync.core.errors import ComponentNotFound, RegistryMalformed, RegistryUnavailable
from registry_sync.core.registry.abc import Registry
from registry_sync.core.registry.types import ComponentDetails, RegistryManifest

logger = logging.getLogger(__name__)


def manifest_url(base_url: str) -> str:
    """URL of the registry index."""
    return f"{base_url}/r/registry.json"


def component_url(base_url: str, name: str) -> str:
    """URL of a single component bundle."""
    return f"{base_url}/r/{name}.json"


class RealRegistry(Registry):
    """Registry client issuing one GET per call, without retries."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create a registry client.

        Args:
            base_url: Registry root, without trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def fetch_manifest(self) -> RegistryManifest:
        url = manifest_url(self._base_url)
        try:
            response = self._get(url)
        except httpx.RequestError as e:
            raise RegistryUnavailable(f"Failed to fetch registry: {e}") from e

        if not response.is_success:
            raise RegistryUnavailable(
                f"Failed to fetch registry: {response.status_code} {response.reason_phrase}"
            )

        data = _decode_json(response, "registry")
        if not isinstance(data, dict) or not isinstance(data.get("items"), list):
            raise RegistryMalformed("Invalid registry format: missing items array")

        try:
            manifest = RegistryManifest.model_validate(data)
        except ValidationError as e:
            raise RegistryMalformed(f"Invalid registry format: {e}") from e

        logger.debug("Fetched %d registry items from %s", len(manifest.items), url)
        return manifest

    def fetch_component_details(self, name: str) -> ComponentDetails:
        url = component_url(self._base_url, name)
        try:
            response = self._get(url)
        except httpx.RequestError as e:
            raise ComponentNotFound(f'Failed to fetch component "{name}": {e}') from e

        if not response.is_success:
            raise ComponentNotFound(
                f'Failed to fetch component "{name}": '
                f"{response.status_code} {response.reason_phrase}"
            )

        data = _decode_json(response, f'component "{name}"')
        try:
            details = ComponentDetails.model_validate(data)
        except ValidationError as e:
            raise RegistryMalformed(f'Invalid format for component "{name}": {e}') from e

        logger.debug("Fetched %d files for component %s", len(details.files), name)
        return details

    def _get(self, url: str) -> httpx.Response:
        with httpx.Client(
            timeout=self._timeout, transport=self._transport, follow_redirects=True
        ) as client:
            return client.get(url)


def _decode_json(response: httpx.Response, what: str) -> Any:
    # Third-party API exception handling: httpx raises JSONDecodeError (a ValueError)
    try:
        return response.json()
    except ValueError as e:
        raise RegistryMalformed(f"Invalid JSON in {what} response") from e
