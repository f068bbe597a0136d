from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

import pytest

from keyvaluegrid.controller.grid import KeyValueGrid
from keyvaluegrid.controller.surface import Rect


@dataclass
class FakeWidget:
    kind: str
    rect: Rect
    text: str = ""
    font_size: Optional[int] = None
    attached: bool = True


@dataclass
class FakeSurface:
    """In-memory surface that records every call the grid makes."""
    created: list[FakeWidget] = field(default_factory=list)
    events: list[tuple[str, FakeWidget]] = field(default_factory=list)
    redraws: int = 0

    def _new(self, kind: str, rect: Rect, text: str = "", font_size: Optional[int] = None) -> FakeWidget:
        w = FakeWidget(kind=kind, rect=rect, text=text, font_size=font_size)
        self.created.append(w)
        self.events.append(("create", w))
        return w

    def create_container(self, rect):
        return self._new("container", rect)

    def create_label(self, rect, text, font_size):
        return self._new("label", rect, text, font_size)

    def create_input(self, rect, text):
        return self._new("input", rect, text)

    def input_text(self, handle):
        return handle.text

    def detach(self, handle):
        assert handle.attached, "widget detached twice"
        handle.attached = False
        self.events.append(("detach", handle))

    def redraw(self):
        self.redraws += 1

    def attached(self, kind: Optional[str] = None) -> list[FakeWidget]:
        return [w for w in self.created if w.attached and (kind is None or w.kind == kind)]


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def grid(surface) -> KeyValueGrid:
    return KeyValueGrid(surface, 20, 20, 460, 350)


@pytest.fixture
def qt_app(monkeypatch):
    monkeypatch.setenv("QT_QPA_PLATFORM", os.getenv("QT_QPA_PLATFORM", "offscreen"))
    QApplication = pytest.importorskip("PySide6.QtWidgets").QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
