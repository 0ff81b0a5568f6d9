"""Qt application wiring."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QLockFile, QObject, QRunnable, QThreadPool, Signal
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication, QDialog, QFileDialog, QMessageBox

from svgx.clipboard.watcher import ClipboardWatcher
from svgx.config import AppConfig, get_config_path
from svgx.convert.converter import ConversionResult, SvgConverter
from svgx.convert.optimizer import format_bytes
from svgx.convert.svg_detect import is_valid_svg
from svgx.export.bulk import default_archive_name, export_files
from svgx.export.saver import OutputAutoSaver
from svgx.ui.main_window import MainWindow
from svgx.ui.settings_dialog import SettingsDialog
from svgx.ui.tray import TrayController

APP_TITLE = "SVGX"


def _setup_logging() -> None:
    config_path = get_config_path()
    log_dir = config_path.parent
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / "app.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )


class _BulkSignals(QObject):
    progress = Signal(int, int)
    finished = Signal(str)  # archive path
    failed = Signal(str)


class _BulkExportWorker(QRunnable):
    def __init__(self, out_path: Path, files: list[tuple[str, str]], config: AppConfig) -> None:
        super().__init__()
        self._out_path = out_path
        self._files = files
        self._formats = list(config.bulk_formats)
        self._convention = config.naming_convention
        self._rename = config.rename_options()
        self.signals = _BulkSignals()

    def run(self) -> None:
        try:
            path = export_files(
                self._out_path,
                self._files,
                self._formats,
                self._convention,
                rename=self._rename,
                progress=self.signals.progress.emit,
            )
        except Exception as e:
            self.signals.failed.emit(str(e))
            return
        self.signals.finished.emit(str(path))


class AppController(QObject):
    """Owns top-level app state and connects UI to services."""

    def __init__(self) -> None:
        super().__init__()
        self._log = logging.getLogger("svgx")

        self._config = AppConfig.load()
        self._log.info(
            "config_loaded mode=%s name=%s optimize=%s save_enabled=%s save_dir=%s",
            self._config.output_mode,
            self._config.component_name,
            bool(self._config.optimize),
            bool(self._config.save_enabled),
            self._config.save_dir,
        )

        self._window = MainWindow()
        self._window.set_listening(bool(self._config.listen_enabled))
        self._window.set_mode(self._config.output_mode)
        self._window.listen_toggled.connect(self._on_listen_toggled)
        self._window.mode_changed.connect(self._on_mode_changed)
        self._window.settings_requested.connect(self._open_settings)
        self._window.bulk_export_requested.connect(self._start_bulk_export)
        self._window.exit_requested.connect(QApplication.instance().quit)
        self._window.close_requested.connect(self._on_close_requested)

        self._watcher = ClipboardWatcher(self._config, parent=self)
        self._watcher.info.connect(self._window.set_status_text)
        self._watcher.error.connect(self._on_error)
        self._watcher.converted.connect(self._on_converted)

        self._converter = SvgConverter(self._config)
        self._watcher.set_converter(self._converter.convert)

        self._saver = OutputAutoSaver(self._config, parent=self)
        self._saver.saved.connect(self._on_saved)
        self._saver.error.connect(self._on_error)

        self._bulk_pool = QThreadPool(self)
        self._bulk_pool.setMaxThreadCount(1)

        self._tray = TrayController(parent=self)
        self._tray.toggle_listen_requested.connect(self._on_listen_toggled)
        self._tray.mode_selected.connect(self._on_mode_changed)
        self._tray.open_settings_requested.connect(self._open_settings)
        self._tray.bulk_export_requested.connect(self._start_bulk_export)
        self._tray.show_window_requested.connect(self._show_main_window)
        self._tray.exit_requested.connect(QApplication.instance().quit)
        self._tray.set_listening(bool(self._config.listen_enabled))
        self._tray.set_mode(self._config.output_mode)
        self._tray.set_save_dir(enabled=bool(self._config.save_enabled), path=self._config.save_dir)
        self._tray.show()

        self._window.show()

        if self._config.listen_enabled:
            self._watcher.start()

    def _apply_config(self) -> None:
        self._config.save()
        self._window.set_listening(bool(self._config.listen_enabled))
        self._window.set_mode(self._config.output_mode)
        self._tray.set_listening(bool(self._config.listen_enabled))
        self._tray.set_mode(self._config.output_mode)
        self._tray.set_save_dir(enabled=bool(self._config.save_enabled), path=self._config.save_dir)
        self._watcher.set_config(self._config)
        self._converter.set_config(self._config)
        self._saver.set_config(self._config)

    def _on_listen_toggled(self, enabled: bool) -> None:
        self._config.listen_enabled = bool(enabled)
        self._config.save()
        self._window.set_listening(enabled)
        self._tray.set_listening(enabled)
        if enabled:
            self._watcher.start()
        else:
            self._watcher.stop()
        self._log.info("listen=%s", enabled)

    def _on_mode_changed(self, mode: str) -> None:
        self._config.output_mode = mode
        self._apply_config()
        self._log.info("mode=%s", mode)

    def _open_settings(self) -> None:
        # No parent so the dialog always shows, even when the main window is hidden to tray.
        self._log.info("settings_opened")
        dlg = SettingsDialog(self._config, parent=None)
        result = int(dlg.exec())
        self._log.info("settings_closed result=%s", result)
        if result != int(QDialog.DialogCode.Accepted):
            return

        self._config = dlg.result_config()
        self._apply_config()
        self._log.info(
            "settings_applied mode=%s name=%s naming=%s optimize=%s save_enabled=%s save_dir=%s",
            self._config.output_mode,
            self._config.component_name,
            self._config.naming_convention,
            bool(self._config.optimize),
            bool(self._config.save_enabled),
            self._config.save_dir,
        )
        self._tray.notify_info(
            APP_TITLE,
            f"Settings saved: output={self._config.output_mode}, name={self._config.component_name}",
        )

    def _on_error(self, message: str) -> None:
        self._log.warning("error=%s", message)
        self._window.set_status_text(f"Error: {message}")
        self._tray.notify_error(APP_TITLE, message)

    def _on_converted(self, result: ConversionResult) -> None:
        # Our own write triggers dataChanged; never convert it again.
        self._watcher.suppress_events_for(0.5)
        self._watcher.mark_processed(result.output)
        QGuiApplication.clipboard().setText(result.output)

        status = f"Converted {result.document_count} SVG(s) to {result.mode} in {result.render_ms:.0f} ms"
        if result.optimization is not None:
            opt = result.optimization
            status += (
                f" (optimized {format_bytes(opt.original_size)} → "
                f"{format_bytes(opt.optimized_size)}, -{opt.reduction}%)"
            )
        self._window.set_status_text(status)

        self._saver.save_async(text=result.output, svg_hash=result.svg_hash, extension=result.extension)

    def _on_saved(self, path: str) -> None:
        self._log.info("saved=%s", path)
        self._window.set_status_text(f"Saved: {path}")

    def _read_svg_files(self, paths: list[str]) -> list[tuple[str, str]]:
        files: list[tuple[str, str]] = []
        for p in paths:
            path = Path(p)
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                self._log.warning("bulk_read_failed path=%s error=%s", path, e)
                continue
            if not is_valid_svg(content):
                self._log.warning("bulk_invalid_svg path=%s", path)
                continue
            files.append((path.name, content))
        return files

    def _start_bulk_export(self) -> None:
        paths, _ = QFileDialog.getOpenFileNames(None, "Select SVG files", "", "SVG files (*.svg)")
        if not paths:
            return
        files = self._read_svg_files(paths)
        if not files:
            self._on_error("No valid SVG content found in the selected files.")
            return

        start_dir = self._config.save_dir or str(Path.home())
        out, _ = QFileDialog.getSaveFileName(
            None, "Save export archive", str(Path(start_dir) / default_archive_name()), "ZIP archives (*.zip)"
        )
        if not out:
            return

        worker = _BulkExportWorker(Path(out), files, self._config)
        worker.signals.progress.connect(self._on_bulk_progress)
        worker.signals.finished.connect(self._on_bulk_finished)
        worker.signals.failed.connect(self._on_error)
        self._bulk_pool.start(worker)
        self._log.info(
            "bulk_started files=%d formats=%s rename=%s",
            len(files),
            ",".join(self._config.bulk_formats),
            self._config.rename_pattern or "none",
        )

    def _on_bulk_progress(self, completed: int, total: int) -> None:
        pct = int(round(completed / total * 100)) if total else 100
        self._window.set_status_text(f"Exporting… {pct}%")

    def _on_bulk_finished(self, path: str) -> None:
        self._log.info("bulk_finished path=%s", path)
        self._window.set_status_text(f"Exported: {path}")
        self._tray.notify_info(APP_TITLE, f"Bulk export saved to {path}")

    def _show_main_window(self) -> None:
        self._window.show()
        self._window.raise_()
        self._window.activateWindow()

    def _on_close_requested(self) -> None:
        self._window.hide()
        self._tray.notify_info(APP_TITLE, "Running in background (tray).")


def run_app() -> None:
    _setup_logging()

    app = QApplication([])
    app.setQuitOnLastWindowClosed(False)

    lock_path = get_config_path().parent / "instance.lock"
    lock = QLockFile(str(lock_path))
    lock.setStaleLockTime(10_000)
    if not lock.tryLock(0) and not (lock.removeStaleLockFile() and lock.tryLock(0)):
        QMessageBox.information(
            None,
            APP_TITLE,
            "SVGX is already running.\n\nCheck the system tray (near the clock).",
        )
        raise SystemExit(0)

    _ = AppController()
    raise SystemExit(app.exec())
