"""
DigitalOcean API client.

Usage:
    from doclient import Client

    async with Client(token="...") as client:
        one_clicks, resp = await client.one_click.list("droplet")
"""

__version__ = "0.1.0"

from loguru import logger

from doclient.core.client import Client
from doclient.core.errors import (
    APIError,
    DecodeError,
    DigitalOceanError,
    EncodeError,
    RequestTimeoutError,
    TransportError,
)
from doclient.core.response import Rate, Response
from doclient.schemas import (
    DockerConfig,
    InstallKubernetesAppsRequest,
    InstallKubernetesAppsResponse,
    OneClick,
    Registry,
    RegistryCreateRequest,
)

# Library: silent unless the application calls logger.enable("doclient").
logger.disable("doclient")

__all__ = [
    "__version__",
    # Client
    "Client",
    "Rate",
    "Response",
    # Errors
    "APIError",
    "DecodeError",
    "DigitalOceanError",
    "EncodeError",
    "RequestTimeoutError",
    "TransportError",
    # Schemas
    "DockerConfig",
    "InstallKubernetesAppsRequest",
    "InstallKubernetesAppsResponse",
    "OneClick",
    "Registry",
    "RegistryCreateRequest",
]
