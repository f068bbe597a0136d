from __future__ import annotations

from typing import Any, NamedTuple, Protocol


class Rect(NamedTuple):
    x: int
    y: int
    w: int
    h: int


class Surface(Protocol):
    """
    Host region the grid draws into.

    Handles returned by the `create_*` methods are opaque to the grid; it only
    hands them back to `input_text` and `detach`.
    """
    def create_container(self, rect: Rect) -> Any: ...
    def create_label(self, rect: Rect, text: str, font_size: int) -> Any: ...
    def create_input(self, rect: Rect, text: str) -> Any: ...
    def input_text(self, handle: Any) -> str: ...
    def detach(self, handle: Any) -> None: ...
    def redraw(self) -> None: ...
