"""Registry schemas for API request/response."""

from dataclasses import dataclass

from pydantic import BaseModel


class RegistryCreateRequest(BaseModel):
    """Registry creation request."""

    name: str | None = None


class Registry(BaseModel):
    """Container registry tied to the account."""

    name: str | None = None


class RegistryRoot(BaseModel):
    """Envelope of registry responses: {"registry": {...}}."""

    registry: Registry | None = None


@dataclass
class DockerConfig:
    """
    Content of a Docker config file used by the docker CLI.

    See: https://docs.docker.com/engine/reference/commandline/cli/#configjson-properties
    """
    docker_config_json: bytes
