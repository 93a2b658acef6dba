"""Embedding favicons into a browser bookmarks HTML export."""

from __future__ import annotations

import re
import threading
from urllib.parse import urlsplit

from . import i18n
from .cache import get_cache_path, load_cache, save_cache
from .config import AppConfig
from .errors import AppError, CustomError, FileOperationError
from .fetch import fetch_favicon_base64_async
from .utils import LogBuffer, Progress, format_log_message

_ANCHOR = re.compile(r"""<A\b[^>]*HREF\s*=\s*['"](.*?)['"][^>]*>""")
_HREF = re.compile(r"""HREF\s*=\s*['"](.*?)['"]""")
_SEPARATOR = "\n----------------------------------------\n"
SAVE_INTERVAL = 50
PROGRESS_LOG_INTERVAL = 10


def extract_domain(url: str) -> str | None:
    """Return the host of an absolute URL, or ``None`` if it has none."""
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host or any(ch.isspace() for ch in host):
        return None
    return f"[{host}]" if ":" in host else host


def _persist(cache: dict[str, str | None], path: str, log: LogBuffer) -> None:
    try:
        save_cache(cache, path)
    except FileOperationError as exc:
        log.append(f"Failed to write cache file: {exc.detail}\n")


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text(path: str, text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)


async def process_bookmarks(
    input_path: str,
    output_path: str,
    log: LogBuffer | None = None,
    abort_event: threading.Event | None = None,
    progress: Progress | None = None,
) -> None:
    """Add an ``ICON`` attribute to every bookmark whose favicon can be found.

    Raises :class:`FileOperationError` when the input cannot be read or the
    output cannot be written. Stopping via ``abort_event`` leaves the output
    unwritten but keeps what was cached so far.
    """
    log = log if log is not None else LogBuffer()
    abort_event = abort_event if abort_event is not None else threading.Event()
    progress = progress if progress is not None else Progress()

    cache_path = get_cache_path()
    cache = load_cache(cache_path)

    log.append(_SEPARATOR)
    log.append(format_log_message(i18n.get_message("starting_to_process")) + "\n")
    try:
        html = _read_text(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        log.append(f"Failed to read file: {exc}\n")
        raise FileOperationError(exc) from exc
    log.append(f"Successfully read bookmarks file, {len(html.encode('utf-8'))} bytes\n")

    matches = list(_ANCHOR.finditer(html))
    total = len(matches)
    progress.set(0, total)
    log.append(
        f"{i18n.get_message('found')} {total} {i18n.get_message('bookmarks')}\n"
    )

    config = AppConfig.load()
    pieces: list[str] = []
    last_end = 0
    processed = success_count = failed_count = last_save = 0

    for match in matches:
        if abort_event.is_set():
            log.append(f"{i18n.get_message('processing_aborted_by_user')}\n")
            _persist(cache, cache_path, log)
            return

        tag = match.group(0)
        href = _HREF.search(tag)
        if href is None:
            raise CustomError("Failed to extract HREF")
        url = tag[href.start() + 6 : href.end() - 1]

        domain = extract_domain(url)
        if domain is None:
            continue

        log.append(
            f"[{processed:>3}/{total}] {i18n.get_message('fetching')} {domain}... "
        )
        favicon: str | None
        if domain in cache:
            favicon = cache[domain]
            if favicon is not None:
                log.append(f"{i18n.get_message('success')}\n")
                success_count += 1
            else:
                log.append(
                    f"{i18n.get_message('failed')}: "
                    f"{i18n.get_message('last_request_failed')}\n"
                )
                failed_count += 1
        else:
            try:
                favicon = await fetch_favicon_base64_async(config.get_favicon_url(domain))
            except AppError as exc:
                log.append(f"{i18n.get_message('failed')}: {exc}\n")
                cache[domain] = None
                failed_count += 1
                favicon = None
            else:
                cache[domain] = favicon
                log.append(f"{i18n.get_message('success')}\n")
                success_count += 1

        if favicon is not None:
            icon_tag = f' ICON="{favicon}"'
            pieces.append(html[last_end : match.start()])
            pieces.append(tag.replace(">", f"{icon_tag}>"))
            last_end = match.end()

        processed += 1
        progress.set(processed, total)
        if processed % PROGRESS_LOG_INTERVAL == 0 or processed == total:
            log.append(
                f"{i18n.get_message('processing')}: {processed}/{total} "
                f"({processed / total * 100:.1f}%)\n"
            )

        if processed - last_save >= SAVE_INTERVAL:
            _persist(cache, cache_path, log)
            last_save = processed

    pieces.append(html[last_end:])
    try:
        _write_text(output_path, "".join(pieces))
    except OSError as exc:
        log.append(f"Failed to save output file: {exc}\n")
        raise FileOperationError(exc) from exc

    _persist(cache, cache_path, log)

    if abort_event.is_set():
        log.append(
            f"\n[Stop] Saved: {output_path}\nCompleted: {success_count} bookmarks, "
            f"Failed: {failed_count} bookmarks, Total: {total} bookmarks\n"
        )
    else:
        summary = i18n.get_message(
            "processing_completed_summary",
            {"success": str(success_count), "failed": str(failed_count), "total": str(total)},
        )
        saved = i18n.get_message("saved_to_path", {"path": output_path})
        log.append(f"\n{summary}\n{saved}\n")