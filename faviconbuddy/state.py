"""State shared between the main window and the background processing thread."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import dataclass, field

from . import i18n
from .config import AppConfig
from .errors import AppError, CustomError
from .process import process_bookmarks
from .utils import LogBuffer, Progress, format_log_message, generate_output_filename


@dataclass
class AppState:
    """Everything the interface shows and the worker thread updates."""

    input_path: str | None = None
    log: LogBuffer = field(default_factory=LogBuffer)
    processing: threading.Event = field(default_factory=threading.Event)
    abort_event: threading.Event = field(default_factory=threading.Event)
    progress: Progress = field(default_factory=Progress)
    config: AppConfig = field(default_factory=AppConfig.load)
    new_service_name: str = ""
    new_service_url: str = ""
    show_settings_dialog: bool = False
    current_locale: str = field(default_factory=i18n.get_locale)
    available_locales: list[str] = field(default_factory=i18n.get_supported_locales)
    _worker: threading.Thread | None = field(default=None, init=False, repr=False)

    def select_file(self, path: str) -> None:
        """Choose the bookmarks file to process."""
        if self.processing.is_set():
            raise CustomError("cannot change the file while processing")
        self.input_path = path

    def selected_file_label(self) -> str | None:
        """Return the label describing the chosen file, if any."""
        if self.input_path is None:
            return None
        return i18n.get_message("selected_file", {"path": self.input_path})

    def can_start(self) -> bool:
        return not self.processing.is_set() and self.input_path is not None

    def start_processing(self) -> str:
        """Start processing in a background thread and return the output path."""
        if self.input_path is None:
            raise CustomError("no bookmarks file selected")
        if self.processing.is_set():
            raise CustomError("processing is already running")

        input_path = self.input_path
        output_path = generate_output_filename(input_path)
        self.processing.set()
        self.abort_event.clear()

        def run() -> None:
            try:
                asyncio.run(
                    process_bookmarks(
                        input_path, output_path, self.log, self.abort_event, self.progress
                    )
                )
            except AppError as exc:
                message = i18n.get_message("processing_error", {"error": str(exc)})
                self.log.append(f"{message}\n")
            finally:
                self.processing.clear()

        self._worker = threading.Thread(target=run, daemon=True)
        self._worker.start()
        return output_path

    def stop_processing(self) -> None:
        """Ask the running job to stop at the next bookmark."""
        self.abort_event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the background job; return ``True`` once it has finished."""
        if self._worker is not None:
            self._worker.join(timeout)
        return not self.processing.is_set()

    def clear_log(self) -> None:
        """Empty the log, leaving a timestamped note that it was cleared."""
        if self.processing.is_set():
            raise CustomError("cannot clear the log while processing")
        self.log.clear()
        self.log.append(format_log_message(i18n.get_message("log_cleared")) + "\n")

    def progress_fraction(self) -> float | None:
        """Return the completed fraction while processing, else ``None``."""
        current, total = self.progress.get()
        if self.processing.is_set() and total > 0:
            return current / total
        return None