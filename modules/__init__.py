# modules/__init__.py
# package exports for UI modules
from .base_tab import BaseTab
from .converter_tab import ConverterTab
from .log_tab import LogTab, QtLogHandler

__all__ = [
    "BaseTab", "ConverterTab", "LogTab", "QtLogHandler",
]
