"""Downloading favicons and encoding them as ``data:`` URIs."""

from __future__ import annotations

import base64

import httpx

from .errors import CustomError, NetworkError

DEFAULT_MIME = "image/png"
_UNKNOWN_STATUS = "<unknown status code>"


def _status_error(response: httpx.Response) -> CustomError:
    reason = httpx.codes.get_reason_phrase(response.status_code) or _UNKNOWN_STATUS
    return CustomError(f"HTTP {response.status_code} {reason}")


def _data_uri(response: httpx.Response) -> str:
    mime = response.headers.get("content-type", DEFAULT_MIME)
    encoded = base64.b64encode(response.content).decode("ascii")
    return f"data:{mime};base64,{encoded}"


def fetch_favicon_base64(url: str) -> str:
    """Download ``url`` and return it as a base64 ``data:`` URI."""
    try:
        response = httpx.get(url, follow_redirects=True, timeout=None)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(exc) from exc
    if not response.is_success:
        raise _status_error(response)
    return _data_uri(response)


async def fetch_favicon_base64_async(url: str) -> str:
    """Asynchronous form of :func:`fetch_favicon_base64`."""
    try:
        async with httpx.AsyncClient(follow_redirects=True, timeout=None) as client:
            response = await client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NetworkError(exc) from exc
    if not response.is_success:
        raise _status_error(response)
    return _data_uri(response)