import os
import threading
from datetime import datetime

from faviconbuddy.utils import LogBuffer, Progress, format_log_message, generate_output_filename

NOW = datetime(2024, 1, 2, 3, 4, 5)


def test_output_filename_without_directory():
    assert (
        generate_output_filename("bookmarks.html", NOW)
        == "bookmarks-with-favicons--2024-01-02-030405.html"
    )


def test_output_filename_keeps_directory():
    plain = generate_output_filename("bookmarks.html", NOW)
    result = generate_output_filename(os.path.join("exports", "bookmarks.html"), NOW)
    assert result.startswith("exports")
    assert result.endswith(plain)


def test_output_filename_keeps_extension():
    result = generate_output_filename("marks.htm", NOW)
    assert result.startswith("marks-with-favicons--")
    assert result.endswith(".htm")


def test_output_filename_defaults_extension():
    result = generate_output_filename("notes", NOW)
    assert result.startswith("notes-with-favicons--")
    assert result.endswith(".html")


def test_output_filename_empty_input_uses_output_stem():
    assert generate_output_filename("", NOW).startswith("output-with-favicons--")


def test_format_log_message():
    assert format_log_message("hello", NOW) == "[2024-01-02 03:04:05] hello"


def test_log_buffer_append_and_lines():
    log = LogBuffer()
    log.append("first\r\n")
    log.append("second\nthird")
    assert log.lines() == ["first", "second", "third"]
    assert log.text() == "first\r\nsecond\nthird"


def test_log_buffer_clear():
    log = LogBuffer()
    log.append("x\n")
    log.clear()
    assert log.text() == ""
    assert log.lines() == []


def test_log_buffer_concurrent_appends():
    log = LogBuffer()

    def worker():
        for _ in range(200):
            log.append("l\n")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(log.lines()) == 4 * 200


def test_progress_set_get():
    progress = Progress()
    assert progress.get() == (0, 0)
    progress.set(3, 10)
    assert progress.get() == (3, 10)