"""Registry service for container registry management."""

from loguru import logger

from doclient.core.response import Response
from doclient.schemas.registry import (
    DockerConfig,
    Registry,
    RegistryCreateRequest,
    RegistryRoot,
)
from doclient.services.base_service import BaseService

REGISTRY_PATH = "/v2/registry"


class RegistryService(BaseService):
    """
    Handles the Registry endpoints of the DigitalOcean API.

    See: https://developers.digitalocean.com/documentation/v2#registry
    """

    async def get(self) -> tuple[Registry | None, Response]:
        """Retrieve the account's registry. Raises APIError (404) if none exists."""
        request = self.client.new_request("GET", REGISTRY_PATH)
        root, response = await self.client.do(request, RegistryRoot)
        return (root.registry if root else None), response

    async def create(self, create: RegistryCreateRequest) -> tuple[Registry | None, Response]:
        """Create a registry."""
        request = self.client.new_request("POST", REGISTRY_PATH, create)
        root, response = await self.client.do(request, RegistryRoot)
        registry = root.registry if root else None
        logger.info(f"Registry created: {registry.name if registry else None}")
        return registry, response

    async def delete(self) -> Response:
        """
        Delete the registry.

        There is no way to recover a registry once it has been destroyed.
        """
        request = self.client.new_request("DELETE", REGISTRY_PATH)
        _, response = await self.client.do(request)
        logger.info("Registry deleted")
        return response

    async def docker_credentials(self) -> tuple[DockerConfig, Response]:
        """
        Retrieve a Docker config file with the registry's credentials.

        The body is returned byte for byte; it is never decoded.
        """
        request = self.client.new_request("GET", f"{REGISTRY_PATH}/docker-credentials")
        _, response = await self.client.do(request)
        return DockerConfig(docker_config_json=response.content), response
