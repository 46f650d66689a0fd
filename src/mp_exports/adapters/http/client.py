"""HTTP adapter – HttpxHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from mp_exports.kernel.errors import RemoteError, TransientNetworkError


def _error_detail(response: httpx.Response) -> str | None:
    """Return the ``detail`` string of a JSON error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return None


class HttpxHttpClient:
    """Thin async httpx wrapper that maps failures onto the producer error set.

    * ``httpx.NetworkError`` / ``httpx.TimeoutException`` → :class:`TransientNetworkError`
    * ``httpx.HTTPStatusError`` → :class:`RemoteError` with ``status_code``
    * any other ``httpx.HTTPError`` → :class:`RemoteError`
    """

    def __init__(self, base_url: str = "", timeout: float = 10.0, **kwargs: Any) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, **kwargs)

    async def __aenter__(self) -> "HttpxHttpClient":
        await self._client.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.__aexit__(*args)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self._request("POST", url, **kwargs)

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response
        except (httpx.NetworkError, httpx.TimeoutException) as exc:
            raise TransientNetworkError(
                resource=url,
                message=f"NetworkError when attempting to fetch {method} {url}: {exc}",
                cause=exc,
            ) from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = _error_detail(exc.response)
            raise RemoteError(
                service=url,
                message=detail or f"HTTP {status} from {method} {url}",
                status_code=status,
                detail={"status_code": status, "body": exc.response.text[:500]},
                cause=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise RemoteError(service=url, message=str(exc) or repr(exc), cause=exc) from exc


HttpClient = HttpxHttpClient

__all__ = ["HttpClient", "HttpxHttpClient"]
