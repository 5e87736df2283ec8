import logging
from typing import TYPE_CHECKING, Optional

import httpx

from ...infrastructure.http.client import build_async_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer
    from ...core.config import Settings

logger = logging.getLogger(__name__)

HTTP_CLIENT_KEY = "http_client"


class HttpClientProvider:
    """Centralized upstream client provider - single source of truth for the shared HTTP client"""
    
    @staticmethod
    def register(
        container: "BaseContainer",
        settings: "Settings",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Build the shared upstream client once and register it.
        Every repository receives this same instance.
        """
        config = settings.upstream_config()
        container.register_singleton(HTTP_CLIENT_KEY, build_async_client(config, transport=transport))
        logger.info(f"Upstream client ready for {config.base_url} (timeout {config.timeout_seconds}s)")
