# modules/converter_tab.py
# 地址转换标签页：每种记法一个输入框和一个"转换"按钮
# 点击某一行的按钮时读取该行输入，转换成功后写入其余四个输入框；失败时不改动任何输入框

from typing import Dict

from PyQt5.QtWidgets import (
    QGroupBox, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QTextEdit
)
from PyQt5.QtGui import QFont

from ipconv import Notation
from .base_tab import BaseTab
from .helper import helper, NOTATION_PLACEHOLDERS

HISTORY_ROWS = 20


class ConverterTab(BaseTab):
    def __init__(self, controller, parent=None, initial_address: str = ""):
        super().__init__(controller, parent)
        self.inputs: Dict[Notation, QLineEdit] = {}
        self.convert_buttons: Dict[Notation, QPushButton] = {}
        self._build_ui()
        if initial_address:
            self.inputs[Notation.DOTTED_DECIMAL].setText(initial_address)
            self.on_convert(Notation.DOTTED_DECIMAL)

    def _build_ui(self):
        layout = QVBoxLayout()
        self.setLayout(layout)

        group = QGroupBox("IPv4 地址")
        g_layout = QVBoxLayout()
        group.setLayout(g_layout)

        mono = QFont("Courier New", 10)
        for notation in Notation:
            row = QHBoxLayout()
            label = QLabel(f"{helper.notation_label(notation)}:")
            label.setMinimumWidth(110)
            row.addWidget(label)
            field = QLineEdit()
            field.setFont(mono)
            field.setPlaceholderText(NOTATION_PLACEHOLDERS[notation])
            field.returnPressed.connect(lambda n=notation: self.on_convert(n))
            row.addWidget(field)
            btn = QPushButton("转换")
            btn.clicked.connect(lambda _checked=False, n=notation: self.on_convert(n))
            row.addWidget(btn)
            self.inputs[notation] = field
            self.convert_buttons[notation] = btn
            g_layout.addLayout(row)

        btn_row = QHBoxLayout()
        self.clear_btn = QPushButton("清空输入")
        self.clear_btn.clicked.connect(self.clear_fields)
        btn_row.addWidget(self.clear_btn)
        btn_row.addStretch()
        g_layout.addLayout(btn_row)

        self.status = QTextEdit()
        self.status.setReadOnly(True)
        self.status.setMaximumHeight(90)

        history_group = QGroupBox("历史记录")
        h_layout = QVBoxLayout()
        history_group.setLayout(h_layout)
        self.history_text = QTextEdit()
        self.history_text.setReadOnly(True)
        h_layout.addWidget(self.history_text)
        self.clear_history_btn = QPushButton("清空历史")
        self.clear_history_btn.clicked.connect(self.clear_history)
        h_layout.addWidget(self.clear_history_btn)

        layout.addWidget(group)
        layout.addWidget(self.status)
        layout.addWidget(history_group)

    def append_status(self, text: str):
        self.status.append(text)
        self.show_status(text)

    def _mark(self, notation: Notation, ok: bool):
        color = helper.get_color_for_state(ok)
        self.inputs[notation].setStyleSheet(f"QLineEdit {{ border: 1px solid {color.name()}; }}")

    def on_convert(self, source: Notation):
        text = self.inputs[source].text()
        ok, payload = self.controller.convert_to_others(source, text)
        if not ok:
            # leave every field untouched so the bad input stays visible
            self._mark(source, False)
            self.append_status(payload)
            self.log(payload, "错误")
            return
        for notation, value in payload.items():
            self.inputs[notation].setText(value)
            self.inputs[notation].setStyleSheet("")
        self._mark(source, True)
        dotted = self.controller.last_results[Notation.DOTTED_DECIMAL]
        message = f"已从{helper.notation_label(source)}转换: {dotted}"
        self.append_status(message)
        self.log(message, "信息")
        self.refresh_history()

    def clear_fields(self):
        for field in self.inputs.values():
            field.clear()
            field.setStyleSheet("")

    def refresh_history(self):
        self.history_text.clear()
        for entry in self.controller.get_history(HISTORY_ROWS):
            self.history_text.append(helper.format_history_entry(entry))

    def clear_history(self):
        ok, message = self.controller.clear_history()
        self.refresh_history()
        self.log(message, "信息")
