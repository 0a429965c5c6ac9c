"""
IPv4 记法转换界面工具函数模块
包含记法显示名称、输入提示、历史记录格式化等通用工具
"""
import time
from typing import Any, Dict

from PyQt5.QtGui import QColor

from ipconv import Notation

# 界面显示名称
NOTATION_LABELS: Dict[Notation, str] = {
    Notation.DOTTED_DECIMAL: "点分十进制",
    Notation.BINARY: "二进制",
    Notation.DOTTED_HEX: "点分十六进制",
    Notation.DOTTED_OCTAL: "点分八进制",
    Notation.DECIMAL: "十进制整数",
}

# 输入框占位提示
NOTATION_PLACEHOLDERS: Dict[Notation, str] = {
    Notation.DOTTED_DECIMAL: "192.168.1.1",
    Notation.BINARY: "11000000.10101000.00000001.00000001",
    Notation.DOTTED_HEX: "c0.a8.01.01",
    Notation.DOTTED_OCTAL: "300.250.001.001",
    Notation.DECIMAL: "3232235777",
}


class HelperFunctions:
    """工具函数类"""

    @staticmethod
    def notation_label(notation: Notation) -> str:
        return NOTATION_LABELS.get(notation, notation.label)

    @staticmethod
    def get_color_for_state(ok: bool) -> QColor:
        """根据转换结果返回输入框边框颜色"""
        if ok:
            return QColor(0, 160, 0)  # 绿色 - 成功
        return QColor(255, 0, 0)  # 红色 - 失败

    @staticmethod
    def timestamp_to_str(timestamp: float) -> str:
        """将时间戳转换为可读字符串"""
        return time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(timestamp))

    @staticmethod
    def format_history_entry(entry: Dict[str, Any]) -> str:
        """格式化一条历史记录: [时间] 来源记法 输入 -> 点分十进制"""
        source = entry['source']
        dotted = entry['results'].get(Notation.DOTTED_DECIMAL, '')
        return (f"[{HelperFunctions.timestamp_to_str(entry['time'])}] "
                f"{HelperFunctions.notation_label(source)} {entry['input']} -> {dotted}")


# 创建全局实例
helper = HelperFunctions()
