# modules/log_tab.py
# 日志信息标签页，以及把 logging 记录转发到标签页的 Handler

import datetime
import logging
from collections import deque
from typing import NamedTuple

from PyQt5.QtWidgets import QVBoxLayout, QWidget, QTextEdit, QHBoxLayout, QLabel, QComboBox, QPushButton, QFileDialog, QCheckBox
from PyQt5.QtGui import QFont, QColor, QTextCursor

LEVEL_LABELS = {
    logging.DEBUG: "调试",
    logging.INFO: "信息",
    logging.WARNING: "警告",
    logging.ERROR: "错误",
}
MAX_ENTRIES = 10000
ALL_LEVELS = "所有"
LEVEL_COLORS = {"调试": QColor(100, 100, 100), "信息": QColor(0, 0, 0), "警告": QColor(255, 165, 0), "错误": QColor(255, 0, 0)}


def level_label(levelno: int) -> str:
    if levelno >= logging.ERROR:
        return LEVEL_LABELS[logging.ERROR]
    if levelno >= logging.WARNING:
        return LEVEL_LABELS[logging.WARNING]
    if levelno >= logging.INFO:
        return LEVEL_LABELS[logging.INFO]
    return LEVEL_LABELS[logging.DEBUG]


class QtLogHandler(logging.Handler):
    """Forwards log records to a LogTab. Must only receive records from the GUI thread."""

    def __init__(self, log_tab: "LogTab", level: int = logging.NOTSET):
        super().__init__(level)
        self.__log_tab = log_tab
        self.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            self.__log_tab.add_log_entry(self.format(record), level_label(record.levelno))
        except Exception:
            self.handleError(record)


class LogEntry(NamedTuple):
    level: str
    line: str


class LogTab(QWidget):
    """Keeps the last MAX_ENTRIES lines; the view shows those matching the level combo."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.entries = deque(maxlen=MAX_ENTRIES)
        self.paused = False
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)

        ctrl = QHBoxLayout()
        ctrl.addWidget(QLabel("日志级别:"))
        self.level_combo = QComboBox()
        self.level_combo.addItems([ALL_LEVELS] + list(LEVEL_COLORS))
        self.level_combo.currentTextChanged.connect(self.refresh_view)
        ctrl.addWidget(self.level_combo)

        self.pause_btn = QPushButton("暂停")
        self.pause_btn.setCheckable(True)
        self.pause_btn.toggled.connect(self.on_pause)
        self.clear_btn = QPushButton("清除")
        self.clear_btn.clicked.connect(self.clear)
        self.save_btn = QPushButton("保存")
        self.save_btn.clicked.connect(self.save)
        self.auto_scroll = QCheckBox("自动滚动")
        self.auto_scroll.setChecked(True)
        for widget in (self.pause_btn, self.clear_btn, self.save_btn, self.auto_scroll):
            ctrl.addWidget(widget)
        layout.addLayout(ctrl)

        self.text = QTextEdit()
        self.text.setReadOnly(True)
        self.text.setFont(QFont("Courier New", 9))
        layout.addWidget(self.text)

    def on_pause(self, paused):
        self.paused = paused
        self.pause_btn.setText("继续" if paused else "暂停")

    def _visible(self, entry: LogEntry) -> bool:
        wanted = self.level_combo.currentText()
        return wanted == ALL_LEVELS or wanted == entry.level

    def _append_line(self, entry: LogEntry):
        cursor = self.text.textCursor()
        cursor.movePosition(QTextCursor.End)
        fmt = cursor.charFormat()
        fmt.setForeground(LEVEL_COLORS.get(entry.level, QColor(0, 0, 0)))
        cursor.setCharFormat(fmt)
        cursor.insertText(entry.line + "\n")
        if self.auto_scroll.isChecked():
            self.text.moveCursor(QTextCursor.End)

    def add_log_entry(self, message: str, level: str = "信息"):
        if self.paused:
            return
        ts = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        entry = LogEntry(level, f"[{ts}] [{level}] {message}")
        self.entries.append(entry)
        if self._visible(entry):
            self._append_line(entry)

    def refresh_view(self, *_):
        """Redraw the view from the stored entries under the current level filter."""
        self.text.clear()
        for entry in self.entries:
            if self._visible(entry):
                self._append_line(entry)

    def clear(self):
        self.entries.clear()
        self.text.clear()

    def save(self):
        filename, _ = QFileDialog.getSaveFileName(self, "保存日志", f"ipconv_log_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.txt", "Text Files (*.txt)")
        if filename:
            self.write_entries(filename)

    def write_entries(self, filename: str):
        with open(filename, "w", encoding="utf-8") as f:
            for entry in self.entries:
                f.write(entry.line + "\n")
