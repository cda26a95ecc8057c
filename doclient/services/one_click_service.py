"""1-Click service for the application catalog."""

from loguru import logger

from doclient.core.response import Response
from doclient.schemas.one_click import (
    InstallKubernetesAppsRequest,
    InstallKubernetesAppsResponse,
    OneClick,
    OneClicksRoot,
)
from doclient.services.base_service import BaseService

ONE_CLICK_PATH = "/v2/1-clicks"


class OneClickService(BaseService):
    """Handles the 1-Click endpoints of the DigitalOcean API."""

    async def list(self, one_click_type: str = "") -> tuple[list[OneClick], Response]:
        """
        List 1-Click applications.

        Args:
            one_click_type: Optional category filter, e.g. "droplet" or "kubernetes"

        Returns:
            Entries in the order the API sent them
        """
        params = {"type": one_click_type} if one_click_type else None
        request = self.client.new_request("GET", ONE_CLICK_PATH, params=params)
        root, response = await self.client.do(request, OneClicksRoot)
        return (root.one_clicks if root else []), response

    async def install_kubernetes(
        self, install: InstallKubernetesAppsRequest
    ) -> tuple[InstallKubernetesAppsResponse | None, Response]:
        """Install 1-Click applications onto a Kubernetes cluster."""
        request = self.client.new_request("POST", ONE_CLICK_PATH, install)
        result, response = await self.client.do(request, InstallKubernetesAppsResponse)
        logger.info(f"1-Click install requested: cluster={install.cluster_uuid}, slugs={install.slugs}")
        return result, response
