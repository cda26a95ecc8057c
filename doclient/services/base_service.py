"""Base service class holding the shared API client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doclient.core.client import Client


class BaseService:
    """Base for resource services; every request goes through the shared client."""

    def __init__(self, client: "Client"):
        self.client = client
