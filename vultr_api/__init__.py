"""Vultr API client factory."""
from __future__ import annotations
from typing import Optional

from vultr_api.clients.http_client import HttpClient
from vultr_api.clients.vultr_client import VultrClient
from vultr_api.config.settings import Settings
from vultr_api.exceptions.custom_exceptions import VultrError
from vultr_api.mappers.params import ServerCreateOptions
from vultr_api.utils.constants import MISSING_API_KEY
from vultr_api.utils.logger import configure_logging, get_logger

log = get_logger(__name__)

__all__ = ["create_client", "Settings", "ServerCreateOptions", "VultrClient", "VultrError"]


def create_client(settings: Optional[Settings] = None, api_key: Optional[str] = None) -> VultrClient:
    """Create a configured client.

    Settings default to the environment; an explicit `api_key` wins over
    VULTR_API_KEY.
    """
    settings = settings or Settings.from_env()
    configure_logging(settings)

    key = api_key or settings.api_key
    if not key:
        raise VultrError(MISSING_API_KEY)

    http = HttpClient(
        timeout_seconds=settings.request_timeout_seconds,
        base_url=settings.api_base_url,
        user_agent=settings.app_name,
    )
    log.debug("Client created for %s", settings.api_base_url)
    return VultrClient(http=http, api_key=key)
