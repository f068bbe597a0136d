"""
Qt Surface
Places the grid's visuals as absolutely positioned children of a host widget.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QLabel, QLineEdit, QWidget

from keyvaluegrid.controller.surface import Rect


class QtSurface:
    def __init__(self, host: QWidget) -> None:
        self.host = host

    def _place(self, widget: QWidget, rect: Rect) -> QWidget:
        widget.setGeometry(rect.x, rect.y, rect.w, rect.h)
        # Children added to an already visible parent stay hidden otherwise
        widget.show()
        return widget

    def create_container(self, rect: Rect) -> QFrame:
        frame = QFrame(self.host)
        frame.setFrameShape(QFrame.Shape.StyledPanel)
        frame.setFrameShadow(QFrame.Shadow.Raised)
        return self._place(frame, rect)

    def create_label(self, rect: Rect, text: str, font_size: int) -> QLabel:
        label = QLabel(text, self.host)
        label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        font = label.font()
        font.setPointSize(font_size)
        label.setFont(font)
        # Group name labels sit on the box border and need an opaque background
        label.setAutoFillBackground(True)
        return self._place(label, rect)

    def create_input(self, rect: Rect, text: str) -> QLineEdit:
        line = QLineEdit(self.host)
        line.setText(text)
        return self._place(line, rect)

    def input_text(self, handle: QLineEdit) -> str:
        return handle.text()

    def detach(self, handle: QWidget) -> None:
        handle.hide()
        handle.setParent(None)
        handle.deleteLater()

    def redraw(self) -> None:
        self.host.update()
