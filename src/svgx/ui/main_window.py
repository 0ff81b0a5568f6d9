"""Main application window (minimal control surface)."""

from __future__ import annotations

from PySide6.QtCore import Signal, QSignalBlocker
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from svgx.convert.dispatch import OutputMode

MODE_LABELS: dict[str, str] = {
    OutputMode.PREVIEW.value: "SVG (as is)",
    OutputMode.JSX.value: "JSX markup",
    OutputMode.HTML.value: "HTML",
    OutputMode.REACT_JS.value: "React (JS)",
    OutputMode.REACT_TS.value: "React (TS)",
    OutputMode.NEXTJS.value: "Next.js",
}


class MainWindow(QMainWindow):
    """Main window.

    The app is meant to run tray-first; this window only carries the controls.
    """

    listen_toggled = Signal(bool)
    mode_changed = Signal(str)
    settings_requested = Signal()
    bulk_export_requested = Signal()
    exit_requested = Signal()
    close_requested = Signal()

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("SVGX")

        self._listen_btn = QPushButton("Listen")
        self._listen_btn.setCheckable(True)
        self._listen_btn.toggled.connect(self.listen_toggled)

        self._mode = QComboBox()
        for value, label in MODE_LABELS.items():
            self._mode.addItem(label, value)
        self._mode.currentIndexChanged.connect(self._on_mode_index_changed)

        self._settings_btn = QPushButton("Settings")
        self._settings_btn.clicked.connect(self.settings_requested)

        self._bulk_btn = QPushButton("Bulk Export…")
        self._bulk_btn.clicked.connect(self.bulk_export_requested)

        self._exit_btn = QPushButton("Exit")
        self._exit_btn.clicked.connect(self.exit_requested)

        self._status = QLabel("Stopped")

        btn_row = QHBoxLayout()
        btn_row.addWidget(self._listen_btn)
        btn_row.addWidget(self._mode)
        btn_row.addWidget(self._settings_btn)
        btn_row.addWidget(self._bulk_btn)
        btn_row.addStretch(1)
        btn_row.addWidget(self._exit_btn)

        root = QVBoxLayout()
        root.addLayout(btn_row)
        root.addWidget(self._status)

        w = QWidget()
        w.setLayout(root)
        self.setCentralWidget(w)

        self.resize(640, 120)

    def set_listening(self, enabled: bool) -> None:
        if self._listen_btn.isChecked() != enabled:
            with QSignalBlocker(self._listen_btn):
                self._listen_btn.setChecked(enabled)
        self._status.setText("Listening" if enabled else "Stopped")

    def set_mode(self, mode: str) -> None:
        idx = self._mode.findData(mode)
        if idx < 0 or idx == self._mode.currentIndex():
            return
        with QSignalBlocker(self._mode):
            self._mode.setCurrentIndex(idx)

    def set_status_text(self, text: str) -> None:
        self._status.setText(text)

    def _on_mode_index_changed(self, index: int) -> None:
        self.mode_changed.emit(str(self._mode.itemData(index)))

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.close_requested.emit()
        event.ignore()
