"""Pydantic schemas for API request/response bodies."""

from doclient.schemas.one_click import (
    InstallKubernetesAppsRequest,
    InstallKubernetesAppsResponse,
    OneClick,
    OneClicksRoot,
)
from doclient.schemas.registry import (
    DockerConfig,
    Registry,
    RegistryCreateRequest,
    RegistryRoot,
)

__all__ = [
    # OneClick
    "InstallKubernetesAppsRequest",
    "InstallKubernetesAppsResponse",
    "OneClick",
    "OneClicksRoot",
    # Registry
    "DockerConfig",
    "Registry",
    "RegistryCreateRequest",
    "RegistryRoot",
]
