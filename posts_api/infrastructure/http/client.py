"""
Upstream HTTP Client
====================

Builder for the single ``httpx.AsyncClient`` shared by every repository,
plus the request helpers that turn transport failures into
``UpstreamError``.

The client is built once from a frozen ``UpstreamClientConfig`` and is
never reconfigured afterwards.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from posts_api.domain.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamClientConfig:
    """Read-only connection settings for the upstream API."""
    base_url: str
    timeout_seconds: float = 30.0
    headers: Dict[str, str] = field(default_factory=lambda: {"Accept": "application/json"})


def build_async_client(
    config: UpstreamClientConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the shared upstream client.
    
    Args:
        config: Base address, timeout and default headers
        transport: Optional transport override (tests use ``httpx.MockTransport``)
        
    Returns:
        Configured ``httpx.AsyncClient``
    """
    return httpx.AsyncClient(
        base_url=config.base_url,
        timeout=httpx.Timeout(config.timeout_seconds),
        headers=dict(config.headers),
        transport=transport,
    )


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    action: str,
    **kwargs: Any,
) -> httpx.Response:
    """
    Send a request and map transport failures to ``UpstreamError``.
    
    Args:
        client: Shared upstream client
        method: HTTP method
        url: Path relative to the client's base URL
        action: Human readable description used in logs and errors (e.g. "fetching post 3")
        **kwargs: Forwarded to ``httpx.AsyncClient.request``
        
    Returns:
        The upstream response, whatever its status
    """
    try:
        return await client.request(method, url, **kwargs)
    except httpx.TimeoutException as exc:
        logger.error(f"Upstream timed out while {action}")
        raise UpstreamError(f"Upstream timed out while {action}") from exc
    except httpx.HTTPError as exc:
        logger.error(f"Upstream request failed while {action}: {exc}")
        raise UpstreamError(f"Upstream request failed while {action}") from exc


def ensure_success(response: httpx.Response, *, action: str) -> None:
    """Raise ``UpstreamError`` unless the response has a 2xx status."""
    if response.is_success:
        return
    logger.error(f"Upstream returned {response.status_code} while {action}")
    raise UpstreamError(
        f"Upstream returned {response.status_code} while {action}",
        status_code=response.status_code,
    )


def decode_json(response: httpx.Response, *, action: str) -> Any:
    """
    Decode a JSON body.
    
    Returns:
        Parsed payload, or None for an empty body
    """
    if not response.content.strip():
        return None
    try:
        return response.json()
    except ValueError as exc:
        logger.error(f"Upstream sent an unparseable body while {action}")
        raise UpstreamError(f"Upstream sent an unparseable body while {action}") from exc


def decode_json_list(response: httpx.Response, *, action: str) -> list:
    """Decode a JSON array body; an empty or null body is an empty list."""
    payload = decode_json(response, action=action)
    if payload is None:
        return []
    if not isinstance(payload, list):
        logger.error(f"Upstream sent a non-list body while {action}")
        raise UpstreamError(f"Upstream sent a non-list body while {action}")
    return payload
