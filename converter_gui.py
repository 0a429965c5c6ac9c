# converter_gui.py
# Main GUI assembly which composes the converter and log tabs.
import logging
from typing import Any, Dict, Optional

from PyQt5.QtWidgets import QMainWindow, QTabWidget, QVBoxLayout, QWidget

from converter_controller import ConverterController
from modules.converter_tab import ConverterTab
from modules.log_tab import LogTab, QtLogHandler
from settings import DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

_LEVELS = {"调试": logging.DEBUG, "信息": logging.INFO, "警告": logging.WARNING, "错误": logging.ERROR}


class ConverterGUI(QMainWindow):
    """Main application window that composes modular tabs."""

    def __init__(self, settings: Optional[Dict[str, Any]] = None):
        super().__init__()
        self.settings = dict(settings or DEFAULT_SETTINGS)
        self.controller = ConverterController(
            binary_display=self.settings['binary_display'],
            history_size=self.settings['history_size'],
        )
        self.setWindowTitle(self.settings['window_title'])
        self.resize(self.settings['window_width'], self.settings['window_height'])

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout()
        central.setLayout(layout)

        self.tabs = QTabWidget()
        layout.addWidget(self.tabs)

        # Status bar
        self.status_bar = self.statusBar()
        self.status_bar.showMessage("就绪")

        # log tab first so the converter tab can log while it fills in the initial address
        self.logs_tab = LogTab(parent=self)
        # the core only logs at DEBUG; the tab shows it whatever the console level is
        self.core_logger = logging.getLogger("ipconv")
        self._core_level = self.core_logger.level
        self.log_handler = QtLogHandler(self.logs_tab, level=logging.DEBUG)
        self.core_logger.addHandler(self.log_handler)
        self.core_logger.setLevel(logging.DEBUG)

        self.converter_tab = ConverterTab(self.controller, parent=self,
                                          initial_address=self.settings['initial_address'])

        self.tabs.addTab(self.converter_tab, "地址转换")
        self.tabs.addTab(self.logs_tab, "日志")

    def log_message(self, message: str, level: str = "信息"):
        """Central log dispatcher called by submodules."""
        self.status_bar.showMessage(message, 5000)
        if hasattr(self, 'logs_tab'):
            self.logs_tab.add_log_entry(message, level)
        logger.log(_LEVELS.get(level, logging.INFO), message)

    def closeEvent(self, event):
        self.core_logger.removeHandler(self.log_handler)
        self.core_logger.setLevel(self._core_level)
        event.accept()
