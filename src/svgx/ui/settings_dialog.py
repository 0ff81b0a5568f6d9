"""Settings dialog for conversion, bulk export and auto-save behavior."""

from __future__ import annotations

import re
from dataclasses import replace
from pathlib import Path

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from svgx.config import AppConfig
from svgx.convert.naming import NamingConvention, RenamePattern, is_valid_component_name
from svgx.export.bulk import OUTPUT_FORMATS
from svgx.ui.main_window import MODE_LABELS


def _normalize_component_name(value: str) -> str:
    v = value.strip()
    if not v:
        return "Icon"
    if not is_valid_component_name(v):
        raise ValueError("Component name must be a valid identifier (letters, digits, _ or $).")
    return v


class SettingsDialog(QDialog):
    """Modal dialog used to edit `AppConfig`."""

    def __init__(self, config: AppConfig, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)

        self._allow_close_without_accept = False

        self._original = config
        self._working = replace(config, bulk_formats=list(config.bulk_formats))

        self._mode = QComboBox()
        for value, label in MODE_LABELS.items():
            self._mode.addItem(label, value)
        self._mode.setCurrentIndex(max(0, self._mode.findData(self._working.output_mode)))

        self._name = QLineEdit(self._working.component_name)
        self._name.setPlaceholderText("Icon")

        self._naming = QComboBox()
        for conv in NamingConvention:
            self._naming.addItem(conv.value, conv.value)
        self._naming.setCurrentIndex(max(0, self._naming.findData(self._working.naming_convention)))

        self._optimize = QCheckBox("Optimize SVG before converting")
        self._optimize.setChecked(bool(self._working.optimize))

        self._precision = QSpinBox()
        self._precision.setRange(0, 8)
        self._precision.setValue(int(self._working.optimize_precision))

        self._format_output = QCheckBox("Re-indent markup output")
        self._format_output.setChecked(bool(self._working.format_output))

        self._indent = QSpinBox()
        self._indent.setRange(1, 8)
        self._indent.setValue(int(self._working.indent_width))

        self._save_enabled = QCheckBox("Save converted output to disk")
        self._save_enabled.setChecked(bool(self._working.save_enabled))

        self._save_dir = QLineEdit(self._working.save_dir)
        self._save_dir.setPlaceholderText("Select an output folder…")
        self._save_dir_btn = QPushButton("Browse…")
        self._save_dir_btn.clicked.connect(self._browse_save_dir)
        self._open_dir_btn = QPushButton("Open")
        self._open_dir_btn.clicked.connect(self._open_save_dir)

        save_row = QHBoxLayout()
        save_row.addWidget(self._save_dir)
        save_row.addWidget(self._save_dir_btn)
        save_row.addWidget(self._open_dir_btn)

        self._bulk_group = QGroupBox("Bulk export formats")
        bulk_row = QHBoxLayout()
        self._bulk_checks: dict[str, QCheckBox] = {}
        for fmt in OUTPUT_FORMATS:
            cb = QCheckBox(fmt.label)
            cb.setChecked(fmt.id in self._working.bulk_formats)
            self._bulk_checks[fmt.id] = cb
            bulk_row.addWidget(cb)
        self._bulk_group.setLayout(bulk_row)

        self._rename_group = QGroupBox("Bulk rename (applied before naming)")
        rename_form = QFormLayout()

        self._rename_pattern = QComboBox()
        self._rename_pattern.addItem("None", "")
        for pattern in RenamePattern:
            self._rename_pattern.addItem(pattern.value.capitalize(), pattern.value)
        self._rename_pattern.setCurrentIndex(max(0, self._rename_pattern.findData(self._working.rename_pattern)))
        rename_form.addRow("Pattern", self._rename_pattern)

        self._rename_prefix = QLineEdit(self._working.rename_prefix)
        self._rename_suffix = QLineEdit(self._working.rename_suffix)
        self._rename_find = QLineEdit(self._working.rename_find)
        self._rename_find.setPlaceholderText("Regular expression")
        self._rename_replace = QLineEdit(self._working.rename_replace)
        self._rename_start = QSpinBox()
        self._rename_start.setRange(0, 99_999)
        self._rename_start.setValue(int(self._working.rename_start))
        self._rename_padding = QSpinBox()
        self._rename_padding.setRange(1, 6)
        self._rename_padding.setValue(int(self._working.rename_padding))

        rename_form.addRow("Prefix", self._rename_prefix)
        rename_form.addRow("Suffix", self._rename_suffix)
        rename_form.addRow("Find", self._rename_find)
        rename_form.addRow("Replace with", self._rename_replace)
        rename_form.addRow("Start at", self._rename_start)
        rename_form.addRow("Digits", self._rename_padding)
        self._rename_group.setLayout(rename_form)

        self._adv_group = QGroupBox("Advanced")
        adv_form = QFormLayout()

        self._debounce = QSpinBox()
        self._debounce.setRange(50, 2000)
        self._debounce.setValue(int(self._working.debounce_ms))
        adv_form.addRow("Debounce (ms)", self._debounce)

        self._max_svg = QSpinBox()
        self._max_svg.setRange(10_000, 200_000_000)
        self._max_svg.setSingleStep(100_000)
        self._max_svg.setValue(int(self._working.max_svg_chars))
        adv_form.addRow("Max SVG size (chars)", self._max_svg)

        self._adv_group.setLayout(adv_form)

        form = QFormLayout()
        form.addRow("Output", self._mode)
        form.addRow("Component name", self._name)
        form.addRow("Bulk naming", self._naming)
        form.addRow("", self._optimize)
        form.addRow("Decimal precision", self._precision)
        form.addRow("", self._format_output)
        form.addRow("Indent width", self._indent)
        form.addRow("", self._save_enabled)
        form.addRow("Save folder", save_row)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self._on_cancel)

        err = QLabel("")
        err.setTextInteractionFlags(Qt.TextSelectableByMouse)
        err.setStyleSheet("color: #a00;")
        self._error = err

        root = QVBoxLayout()
        root.addLayout(form)
        root.addWidget(self._bulk_group)
        root.addWidget(self._rename_group)
        root.addWidget(self._adv_group)
        root.addWidget(self._error)
        root.addWidget(buttons)

        self.setLayout(root)
        self.resize(600, 560)

        self._save_enabled.toggled.connect(self._sync_save_enabled_ui)
        self._sync_save_enabled_ui(self._save_enabled.isChecked())
        self._optimize.toggled.connect(self._precision.setEnabled)
        self._precision.setEnabled(self._optimize.isChecked())
        self._rename_pattern.currentIndexChanged.connect(self._sync_rename_ui)
        self._sync_rename_ui()

    def _on_cancel(self) -> None:
        self._allow_close_without_accept = True
        super().reject()

    def result_config(self) -> AppConfig:
        return self._working

    def _sync_save_enabled_ui(self, enabled: bool) -> None:
        self._save_dir.setEnabled(enabled)
        self._save_dir_btn.setEnabled(enabled)
        self._open_dir_btn.setEnabled(enabled)

    def _sync_rename_ui(self) -> None:
        pattern = str(self._rename_pattern.currentData())
        self._rename_prefix.setEnabled(pattern == RenamePattern.PREFIX)
        self._rename_suffix.setEnabled(pattern == RenamePattern.SUFFIX)
        self._rename_find.setEnabled(pattern == RenamePattern.REPLACE)
        self._rename_replace.setEnabled(pattern == RenamePattern.REPLACE)
        self._rename_start.setEnabled(pattern == RenamePattern.NUMBERING)
        self._rename_padding.setEnabled(pattern == RenamePattern.NUMBERING)

    def _browse_save_dir(self) -> None:
        start = self._save_dir.text().strip()
        if start and not Path(start).exists():
            start = ""
        path = QFileDialog.getExistingDirectory(self, "Select output folder", start)
        if path:
            self._save_dir.setText(path)

    def _open_save_dir(self) -> None:
        path = self._save_dir.text().strip()
        if not path:
            return
        QDesktopServices.openUrl(QUrl.fromLocalFile(path))

    def accept(self) -> None:
        self._error.setText("")
        try:
            self._working.output_mode = str(self._mode.currentData())
            self._working.component_name = _normalize_component_name(self._name.text())
            self._working.naming_convention = str(self._naming.currentData())
            self._working.optimize = bool(self._optimize.isChecked())
            self._working.optimize_precision = int(self._precision.value())
            self._working.format_output = bool(self._format_output.isChecked())
            self._working.indent_width = int(self._indent.value())
            self._working.save_enabled = bool(self._save_enabled.isChecked())
            self._working.save_dir = self._save_dir.text().strip()
            self._working.debounce_ms = int(self._debounce.value())
            self._working.max_svg_chars = int(self._max_svg.value())
            self._working.bulk_formats = [k for k, cb in self._bulk_checks.items() if cb.isChecked()]
            self._working.rename_pattern = str(self._rename_pattern.currentData())
            self._working.rename_prefix = self._rename_prefix.text()
            self._working.rename_suffix = self._rename_suffix.text()
            self._working.rename_find = self._rename_find.text()
            self._working.rename_replace = self._rename_replace.text()
            self._working.rename_start = int(self._rename_start.value())
            self._working.rename_padding = int(self._rename_padding.value())

            if self._working.save_enabled and not self._working.save_dir:
                raise ValueError("Auto-save is enabled, but no output folder is selected.")
            if not self._working.bulk_formats:
                raise ValueError("Select at least one bulk export format.")
            if self._working.rename_pattern == RenamePattern.REPLACE and self._working.rename_find:
                try:
                    re.compile(self._working.rename_find)
                except re.error as e:
                    raise ValueError(f"Invalid rename pattern: {e}") from e
        except ValueError as e:
            self._error.setText(str(e))
            return

        super().accept()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        # Window close (X) is an implicit "OK"; explicit "Cancel" still discards changes.
        if self._allow_close_without_accept:
            event.accept()
            return
        event.ignore()
        self.accept()
