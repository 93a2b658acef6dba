import base64
import threading

import httpx
import pytest
import respx

from faviconbuddy import i18n
from faviconbuddy.cache import get_cache_path, load_cache, save_cache
from faviconbuddy.errors import FileOperationError
from faviconbuddy.process import extract_domain, process_bookmarks
from faviconbuddy.utils import LogBuffer, Progress

CACHED_ICON = "data:image/png;base64,AAAA"


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    monkeypatch.setattr(i18n, "_bundles", {})
    return tmp_path


async def _run(input_path, output_path, abort=False):
    log = LogBuffer()
    progress = Progress()
    event = threading.Event()
    if abort:
        event.set()
    await process_bookmarks(str(input_path), str(output_path), log, event, progress)
    return log, progress


def test_extract_domain_lowercases_host():
    assert extract_domain("https://Example.com/path?q=1") == "example.com"


@pytest.mark.parametrize("url", ["javascript:void(0)", "not a url", "//example.com/x", ""])
def test_extract_domain_rejects_urls_without_host(url):
    assert extract_domain(url) is None


@pytest.mark.asyncio
async def test_cached_favicons_are_embedded(home):
    save_cache(
        {"example.com": CACHED_ICON, "bad.example.com": None}, get_cache_path()
    )
    source = home / "bookmarks.html"
    source.write_text(
        '<DL><DT><A HREF="https://example.com/page" ADD_DATE="1">Ok</A>\n'
        '<DT><A HREF="https://bad.example.com/">Bad</A>\n'
        '<DT><A HREF="place:sort=8">Smart</A>\n</DL>\n',
        encoding="utf-8",
    )
    output = home / "out.html"
    log, progress = await _run(source, output)

    result = output.read_text(encoding="utf-8")
    assert f'<A HREF="https://example.com/page" ADD_DATE="1" ICON="{CACHED_ICON}">' in result
    assert '<A HREF="https://bad.example.com/">Bad</A>' in result
    assert '<A HREF="place:sort=8">Smart</A>' in result
    assert progress.get() == (2, 3)
    assert "last_request_failed" in log.text()
    assert "processing_completed_summary" in log.text()


@pytest.mark.asyncio
async def test_fetches_and_caches_results(home):
    source = home / "bookmarks.html"
    source.write_text(
        '<A HREF="https://good.example.com/">G</A>\n'
        '<A HREF="https://bad.example.com/">B</A>\n'
        '<A HREF="https://good.example.com/other">G2</A>\n',
        encoding="utf-8",
    )
    output = home / "out.html"

    def respond(request):
        if request.url.params["domain"] == "good.example.com":
            return httpx.Response(200, content=b"icon", headers={"content-type": "image/x-icon"})
        return httpx.Response(500)

    with respx.mock:
        route = respx.get(host="www.google.com").mock(side_effect=respond)
        log, progress = await _run(source, output)
        assert route.call_count == 2

    cache = load_cache(get_cache_path())
    icon = cache["good.example.com"]
    assert cache["bad.example.com"] is None
    header, encoded = icon.split(",", 1)
    assert header == "data:image/x-icon;base64"
    assert base64.b64decode(encoded) == b"icon"

    result = output.read_text(encoding="utf-8")
    assert result.count(f'ICON="{icon}"') == 2
    assert "HTTP 500 Internal Server Error" in log.text()
    assert progress.get() == (3, 3)
    assert "processing: 3/3 (100.0%)" in log.text()


@pytest.mark.asyncio
async def test_missing_input_raises(home):
    log = LogBuffer()
    with pytest.raises(FileOperationError):
        await process_bookmarks(
            str(home / "missing.html"), str(home / "out.html"), log, threading.Event(), Progress()
        )
    assert "Failed to read file" in log.text()
    assert not (home / "out.html").exists()


@pytest.mark.asyncio
async def test_abort_skips_output(home):
    source = home / "bookmarks.html"
    source.write_text('<A HREF="https://example.com/">E</A>\n', encoding="utf-8")
    output = home / "out.html"
    log, progress = await _run(source, output, abort=True)
    assert not output.exists()
    assert "processing_aborted_by_user" in log.text()
    assert progress.get() == (0, 1)


@pytest.mark.asyncio
async def test_line_endings_preserved(home):
    save_cache({"example.com": CACHED_ICON}, get_cache_path())
    source = home / "bookmarks.html"
    source.write_bytes(b'<DL>\r\n<A HREF="https://example.com/">E</A>\r\n</DL>\r\n')
    output = home / "out.html"
    await _run(source, output)
    data = output.read_bytes()
    assert data.count(b"\r\n") == 3
    assert f'ICON="{CACHED_ICON}"'.encode() in data