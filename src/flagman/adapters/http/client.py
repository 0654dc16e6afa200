"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

import logging
from collections.abc import Collection
from typing import Any

import httpx

from flagman.kernel.errors import RemoteError

logger = logging.getLogger(__name__)


class HttpxHttpClient:
    """Thin async httpx wrapper that maps every failure to :class:`RemoteError`.

    ``operation`` and ``target`` are carried into the error so a failure can
    be traced to the flag or page that caused it. Statuses listed in
    ``expected`` count as success; anything else raises.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, headers=headers, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def request(
        self,
        method: str,
        url: str,
        *,
        operation: str,
        target: str | int | None = None,
        expected: Collection[int] = (200,),
        **kwargs: Any,
    ) -> httpx.Response:
        logger.debug("http.request method=%s url=%s", method, url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TimeoutException as exc:
            raise RemoteError(
                f"HTTP request timed out: {method} {url}",
                operation=operation,
                target=target,
                cause=exc,
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            raise RemoteError(
                f"HTTP request failed: {method} {url}: {exc}",
                operation=operation,
                target=target,
                cause=exc,
            ) from exc
        if response.status_code not in expected:
            raise RemoteError(
                f"HTTP {response.status_code} {response.reason_phrase} from {method} {url}",
                operation=operation,
                target=target,
                status_code=response.status_code,
            )
        return response


__all__ = ["HttpxHttpClient"]
