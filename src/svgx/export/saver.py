"""Asynchronous saving of converted output (auto-save)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from svgx.config import AppConfig
from svgx.export.files import atomic_write_bytes, generate_output_filename


@dataclass(frozen=True)
class SaveResult:
    path: str


class _SaveSignals(QObject):
    finished = Signal(object)  # SaveResult
    failed = Signal(str)


class _SaveWorker(QRunnable):
    def __init__(self, text: str, out_dir: Path, filename: str) -> None:
        super().__init__()
        self._text = text
        self._out_dir = out_dir
        self._filename = filename
        self.signals = _SaveSignals()

    def run(self) -> None:
        try:
            out_path = self._out_dir / self._filename
            atomic_write_bytes(out_path, self._text.encode("utf-8"))
        except Exception as e:
            self.signals.failed.emit(str(e))
            return
        self.signals.finished.emit(SaveResult(path=str(out_path)))


class OutputAutoSaver(QObject):
    """Manages optional disk saving of converted output text."""

    saved = Signal(str)  # path
    error = Signal(str)

    def __init__(self, config: AppConfig, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pool = QThreadPool.globalInstance()
        self._cfg = config

    def set_config(self, config: AppConfig) -> None:
        self._cfg = config

    def save_async(self, *, text: str, svg_hash: str, extension: str) -> None:
        if not self._cfg.save_enabled:
            return
        out_dir = Path(self._cfg.save_dir).expanduser()
        filename = generate_output_filename(svg_hash, extension)
        worker = _SaveWorker(text, out_dir, filename)
        worker.signals.finished.connect(lambda r: self.saved.emit(r.path))
        worker.signals.failed.connect(self.error.emit)
        self._pool.start(worker)
