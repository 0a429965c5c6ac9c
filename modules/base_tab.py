# modules/base_tab.py
# 基础标签页类：持有转换控制器，向主窗口转发日志与状态栏消息

from typing import Optional

from PyQt5.QtWidgets import QWidget


class BaseTab(QWidget):
    def __init__(self, controller, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.parent_window = parent

    def log(self, message: str, level: str = "信息"):
        if hasattr(self.parent_window, "log_message"):
            self.parent_window.log_message(message, level)

    def show_status(self, message: str, timeout: int = 5000):
        if hasattr(self.parent_window, "statusBar"):
            self.parent_window.statusBar().showMessage(message, timeout)
