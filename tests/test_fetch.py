import base64

import httpx
import pytest
import respx

from faviconbuddy.errors import CustomError, NetworkError
from faviconbuddy.fetch import fetch_favicon_base64, fetch_favicon_base64_async

URL = "https://icons.example.com/favicon.ico"


def _payload(data_uri):
    header, encoded = data_uri.split(",", 1)
    return header, base64.b64decode(encoded)


def test_success_uses_content_type():
    with respx.mock:
        respx.get(URL).mock(
            return_value=httpx.Response(
                200, content=b"\x00\x01icon", headers={"content-type": "image/x-icon"}
            )
        )
        result = fetch_favicon_base64(URL)
    header, data = _payload(result)
    assert header == "data:image/x-icon;base64"
    assert data == b"\x00\x01icon"


def test_missing_content_type_defaults_to_png():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(200, content=b"png-bytes"))
        result = fetch_favicon_base64(URL)
    header, data = _payload(result)
    assert header == "data:image/png;base64"
    assert data == b"png-bytes"


def test_http_error_status_raises_custom_error():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(404))
        with pytest.raises(CustomError) as info:
            fetch_favicon_base64(URL)
    assert str(info.value) == "HTTP 404 Not Found"


def test_connection_failure_raises_network_error():
    with respx.mock:
        respx.get(URL).mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(NetworkError) as info:
            fetch_favicon_base64(URL)
    assert "refused" in str(info.value)


@pytest.mark.asyncio
async def test_async_success():
    with respx.mock:
        respx.get(URL).mock(
            return_value=httpx.Response(200, content=b"abc", headers={"content-type": "image/gif"})
        )
        result = await fetch_favicon_base64_async(URL)
    header, data = _payload(result)
    assert header == "data:image/gif;base64"
    assert data == b"abc"


@pytest.mark.asyncio
async def test_async_error_status():
    with respx.mock:
        respx.get(URL).mock(return_value=httpx.Response(500))
        with pytest.raises(CustomError) as info:
            await fetch_favicon_base64_async(URL)
    assert str(info.value).startswith("HTTP 500")


@pytest.mark.asyncio
async def test_async_connection_failure():
    with respx.mock:
        respx.get(URL).mock(side_effect=httpx.ConnectError("down"))
        with pytest.raises(NetworkError):
            await fetch_favicon_base64_async(URL)