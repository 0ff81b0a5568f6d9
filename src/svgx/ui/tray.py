"""Tray icon: quick access to listening, the output mode and bulk export."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QObject, QSignalBlocker, QUrl, Signal
from PySide6.QtGui import QAction, QActionGroup, QDesktopServices, QIcon
from PySide6.QtWidgets import QMenu, QStyle, QSystemTrayIcon, QWidget

from svgx.ui.main_window import MODE_LABELS


class TrayController(QObject):
    toggle_listen_requested = Signal(bool)
    mode_selected = Signal(str)
    open_settings_requested = Signal()
    bulk_export_requested = Signal()
    show_window_requested = Signal()
    exit_requested = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        style = QWidget().style()
        self._icon = style.standardIcon(QStyle.StandardPixmap.SP_FileDialogDetailedView)
        self._tray = QSystemTrayIcon(self._icon, None)
        self._listening = False
        self._mode = ""
        self._save_dir: Path | None = None

        self._menu = QMenu()
        self._listen_action = self._menu.addAction("Convert clipboard SVG")
        self._listen_action.setCheckable(True)
        self._listen_action.toggled.connect(self.toggle_listen_requested)

        self._mode_actions = self._build_mode_menu(self._menu.addMenu("Output"))
        self._menu.addSeparator()

        for label, slot in (
            ("Show Window", self.show_window_requested.emit),
            ("Settings…", self.open_settings_requested.emit),
            ("Bulk Export…", self.bulk_export_requested.emit),
        ):
            self._menu.addAction(label).triggered.connect(slot)

        self._save_dir_action = self._menu.addAction("Open Save Folder")
        self._save_dir_action.triggered.connect(self._open_save_dir)
        self._save_dir_action.setEnabled(False)

        self._menu.addSeparator()
        self._menu.addAction("Quit SVGX").triggered.connect(self.exit_requested.emit)

        self._tray.setContextMenu(self._menu)
        self._tray.activated.connect(self._on_activated)
        self._refresh_tooltip()

    def _build_mode_menu(self, menu: QMenu) -> dict[str, QAction]:
        group = QActionGroup(menu)
        group.setExclusive(True)
        actions: dict[str, QAction] = {}
        for mode, label in MODE_LABELS.items():
            action = menu.addAction(label)
            action.setCheckable(True)
            action.setData(mode)
            group.addAction(action)
            actions[mode] = action
        group.triggered.connect(lambda a: self.mode_selected.emit(str(a.data())))
        return actions

    def show(self) -> None:
        self._tray.show()

    def hide(self) -> None:
        self._tray.hide()

    def set_listening(self, enabled: bool) -> None:
        self._listening = enabled
        with QSignalBlocker(self._listen_action):
            self._listen_action.setChecked(enabled)
        self._refresh_tooltip()

    def set_mode(self, mode: str) -> None:
        self._mode = mode
        action = self._mode_actions.get(mode)
        if action is not None:
            with QSignalBlocker(action):
                action.setChecked(True)
        self._refresh_tooltip()

    def set_save_dir(self, *, enabled: bool, path: str) -> None:
        self._save_dir = Path(path) if enabled and path else None
        self._save_dir_action.setEnabled(self._save_dir is not None)

    def notify_error(self, title: str, message: str) -> None:
        self._tray.showMessage(title, message, QSystemTrayIcon.MessageIcon.Critical)

    def notify_info(self, title: str, message: str) -> None:
        self._tray.showMessage(title, message, self._icon)

    def _refresh_tooltip(self) -> None:
        state = "listening" if self._listening else "paused"
        label = MODE_LABELS.get(self._mode, self._mode or "-")
        self._tray.setToolTip(f"SVGX ({state})\nOutput: {label}")

    def _on_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        if reason in (QSystemTrayIcon.ActivationReason.Trigger, QSystemTrayIcon.ActivationReason.DoubleClick):
            self.show_window_requested.emit()

    def _open_save_dir(self) -> None:
        if self._save_dir is not None:
            QDesktopServices.openUrl(QUrl.fromLocalFile(str(self._save_dir)))
