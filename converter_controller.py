# converter_controller.py
# 转换控制器（封装常用操作，供 GUI / CLI 调用）
# 核心转换错误在这里被捕获，返回 (ok, payload) 而不是抛出

import logging
import time
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Tuple

from ipconv import ConversionError, Notation, convert_all, group_binary

logger = logging.getLogger(__name__)


class ConverterController:
    def __init__(self, binary_display: str = "grouped", history_size: int = 50):
        self.binary_display = binary_display
        self.history: Deque[Dict[str, Any]] = deque(maxlen=history_size)
        self.last_results: Dict[Notation, str] = {}

    # ---------- conversion ----------
    def convert_from(self, source: Notation, text: str) -> Tuple[bool, Any]:
        """
        Convert ``text`` written in ``source`` notation into all five notations.

        Returns (True, {Notation: display string}) on success, or (False, error message).
        Nothing is stored on failure.
        """
        text = (text or "").strip()
        if not text:
            return False, f"{source.label}: 输入为空"
        try:
            results = convert_all(text, source)
        except ConversionError as e:
            logger.warning("conversion from %s rejected %r: %s", source.key, text, e)
            return False, f"转换失败: {e}"

        if self.binary_display == "grouped":
            results[Notation.BINARY] = group_binary(results[Notation.BINARY])
        self.last_results = dict(results)
        self.history.append({'time': time.time(), 'source': source, 'input': text, 'results': dict(results)})
        logger.info("converted %s %r -> %s", source.key, text, results[Notation.DOTTED_DECIMAL])
        return True, results

    def convert_to_others(self, source: Notation, text: str) -> Tuple[bool, Any]:
        """Same as convert_from but without the source notation in the payload."""
        ok, payload = self.convert_from(source, text)
        if not ok:
            return ok, payload
        return True, {n: v for n, v in payload.items() if n is not source}

    # ---------- history ----------
    def get_history(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Most recent conversion first."""
        entries = list(reversed(self.history))
        return entries[:limit] if limit else entries

    def clear_history(self) -> Tuple[bool, str]:
        self.history.clear()
        self.last_results = {}
        return True, "历史记录已清空"

    # ---------- utility ----------
    @staticmethod
    def format_results(results: Dict[Notation, str]) -> List[str]:
        return [f"{notation.key}: {results[notation]}" for notation in Notation if notation in results]
