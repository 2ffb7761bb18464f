"""Thin aiohttp wrapper shared by the provider adapters.

Opens a session per request and holds no state between calls, so one instance
can be built at startup and shared by concurrent resolutions. Every failure
mode surfaces as ProviderTransportError.
"""

import asyncio
from typing import Any, Optional

import aiohttp

from src.utils.errors import ProviderTransportError


class JsonHttpClient:
    """GET JSON documents from provider APIs."""

    def __init__(self, user_agent: str = "recipe-image-service/1.0") -> None:
        self.user_agent = user_agent

    async def get_json(
        self,
        url: str,
        *,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        timeout: float = 8.0,
    ) -> Any:
        """Fetch and decode a JSON response.

        Args:
            url: Endpoint URL.
            params: Query string parameters.
            headers: Extra request headers (e.g. Authorization).
            timeout: Total request timeout in seconds.

        Returns:
            Decoded JSON body.

        Raises:
            ProviderTransportError: On timeout, connection error, non-2xx
                status or an undecodable body.
        """
        request_headers = {"User-Agent": self.user_agent, **(headers or {})}
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(
                    url,
                    params=params,
                    headers=request_headers,
                    timeout=aiohttp.ClientTimeout(total=timeout),
                ) as response:
                    if not 200 <= response.status < 300:
                        raise ProviderTransportError(f"HTTP {response.status} from {url}", status=response.status)
                    return await response.json(content_type=None)
        except ProviderTransportError:
            raise
        except asyncio.TimeoutError as e:
            raise ProviderTransportError(f"Timed out after {timeout}s: {url}") from e
        except aiohttp.ClientError as e:
            raise ProviderTransportError(f"Connection error for {url}: {e}") from e
        except ValueError as e:
            raise ProviderTransportError(f"Malformed JSON from {url}: {e}") from e
