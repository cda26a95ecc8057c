"""Resource services of the DigitalOcean API."""

from doclient.services.base_service import BaseService
from doclient.services.one_click_service import OneClickService
from doclient.services.registry_service import RegistryService

__all__ = [
    "BaseService",
    "OneClickService",
    "RegistryService",
]
