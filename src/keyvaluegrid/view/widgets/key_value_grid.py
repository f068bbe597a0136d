"""
Key-Value Grid Widget
Qt wrapper that hosts a KeyValueGrid on itself.
"""
from __future__ import annotations

from typing import Iterable, Mapping

from PySide6.QtCore import Signal
from PySide6.QtGui import QResizeEvent
from PySide6.QtWidgets import QWidget

from keyvaluegrid.config import DEFAULT_METRICS, LayoutMetrics
from keyvaluegrid.controller.grid import KeyValueGrid
from keyvaluegrid.model.tree import GroupedKeyValueTree
from keyvaluegrid.view.qt_surface import QtSurface


class KeyValueGridWidget(QWidget):
    """
    Editable grouped key-value grid.

    The grid's bounding box follows the widget rect. After every refresh the
    minimum height tracks the content, so the widget scrolls properly inside a
    QScrollArea with `widgetResizable` enabled.
    """
    data_changed = Signal()
    cleared = Signal()

    def __init__(self, parent: QWidget | None = None, metrics: LayoutMetrics = DEFAULT_METRICS) -> None:
        super().__init__(parent)
        self.surface = QtSurface(self)
        self.grid = KeyValueGrid(self.surface, 0, 0, self.width(), self.height(), metrics)

    def _sync_height(self) -> None:
        self.setMinimumHeight(self.grid.content_bottom)

    def add(self, group_name: str, key: str = "", value: str = "") -> bool:
        ok = self.grid.add(group_name, key, value)
        if ok:
            self._sync_height()
            self.data_changed.emit()
        return ok

    def add_many(self, items: Iterable[tuple[str, str, str]]) -> int:
        accepted = self.grid.add_many(items)
        if accepted:
            self._sync_height()
            self.data_changed.emit()
        return accepted

    def load(self, data: Mapping[str, Mapping[str, str]]) -> None:
        self.grid.load(data)
        self._sync_height()
        self.data_changed.emit()

    def delete(self, group_name: str, key: str = "") -> bool:
        ok = self.grid.delete(group_name, key)
        if ok:
            self._sync_height()
            self.data_changed.emit()
        return ok

    def clear_all(self) -> None:
        self.grid.clear_all()
        self._sync_height()
        self.cleared.emit()

    def refresh(self) -> None:
        self.grid.refresh()
        self._sync_height()

    def get_data(self) -> GroupedKeyValueTree:
        return self.grid.get_data()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        # Geometry depends on width only; growing to the content height must not rebuild again
        if event.size().width() == event.oldSize().width() and self.grid.layout is not None:
            return
        self.grid.resize(0, 0, self.width(), self.height())
        self._sync_height()
