"""
Key-Value Grid Controller
=========================
Public surface of the grid: the only way to mutate or query the data shown.

Why is this file needed?
------------------------
It owns the GroupedKeyValueTree and orchestrates the layout engine and the
widget binding, so that after every accepted call the rendered widgets mirror
the tree exactly. User edits typed into the value fields reach the tree only
when `get_data()` is called.

Operations report failures through their boolean result and never raise for
bad input.
"""
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from keyvaluegrid.config import DEFAULT_METRICS, LayoutMetrics
from keyvaluegrid.controller.binding import WidgetBinding
from keyvaluegrid.controller.layout import GridLayout, compute_layout
from keyvaluegrid.controller.surface import Rect, Surface
from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPelement, KVPgroup

logger = logging.getLogger(__name__)


class KeyValueGrid:
    """Displays and edits a GroupedKeyValueTree on an injected surface."""

    def __init__(
        self,
        surface: Surface,
        x: int,
        y: int,
        w: int,
        h: int,
        metrics: LayoutMetrics = DEFAULT_METRICS,
    ) -> None:
        self.surface = surface
        self.metrics = metrics
        self._tree = GroupedKeyValueTree()
        self._bounds = Rect(x, y, w, h)
        self._binding = WidgetBinding(surface, metrics)
        self._layout: Optional[GridLayout] = None
        self._next_y = y + metrics.top_offset

    # ---- read-only state ----

    @property
    def tree(self) -> GroupedKeyValueTree:
        """The live tree, without pulling back pending edits (see `get_data`)."""
        return self._tree

    @property
    def bounds(self) -> Rect:
        return self._bounds

    @property
    def layout(self) -> Optional[GridLayout]:
        return self._layout

    @property
    def binding(self) -> WidgetBinding:
        return self._binding

    @property
    def content_bottom(self) -> int:
        return self._next_y

    @property
    def key_width(self) -> int:
        return self._layout.key_width if self._layout else self.metrics.min_key_width

    # ---- geometry ----

    def resize(self, x: int, y: int, w: int, h: int) -> None:
        """Update the bounding box and lay everything out again."""
        self._bounds = Rect(x, y, w, h)
        self.refresh()

    def refresh(self) -> None:
        """Rebuild all widgets from the current data and geometry."""
        self._layout = compute_layout(self._tree, self._bounds, self.metrics)
        self._binding.rebuild(self._tree, self._layout)
        self._next_y = self._layout.bottom
        logger.debug(
            f"Refreshed grid: {len(self._layout.groups)} groups shown, "
            f"key width {self._layout.key_width}, bottom {self._next_y}."
        )

    # ---- mutation ----

    def _insert(self, group_name: str, key: str, value: str) -> bool:
        """Apply one add without refreshing."""
        group_name = group_name.strip()
        key = key.strip()

        if not group_name:
            logger.debug("Rejected add: empty group name.")
            return False

        group = self._tree.find_group(group_name)
        if group is None:
            group = KVPgroup(name=group_name)
            self._tree.groups.append(group)
            logger.debug(f"Created group '{group_name}'.")

        if not key:
            return True

        elem = group.find_element(key)
        if elem is not None:
            # An empty value never clears an existing one
            if value != "":
                elem.value = value
            return True

        group.elements.append(KVPelement(key=key, value=value))
        return True

    def add(self, group_name: str, key: str = "", value: str = "") -> bool:
        """
        Insert or update a key-value pair.

        Args:
            group_name: Group to add to; created when missing. Surrounding
                whitespace is ignored.
            key: Key inside the group. Empty only ensures the group exists.
            value: New value. For an existing key an empty value is ignored.

        Returns:
            False if `group_name` is empty, True otherwise.
        """
        if not self._insert(group_name, key, value):
            return False
        self.refresh()
        return True

    def add_many(self, items: Iterable[tuple[str, str, str]]) -> int:
        """Add several (group, key, value) triples with a single refresh."""
        accepted = sum(1 for g, k, v in items if self._insert(g, k, v))
        if accepted:
            self.refresh()
        return accepted

    def load(self, data: Mapping[str, Mapping[str, str]]) -> None:
        """Replace all data with `{group: {key: value}}` and refresh once."""
        self._binding.detach_all()
        self._tree.groups.clear()
        for group_name, pairs in data.items():
            if not self._insert(group_name, "", ""):
                continue
            for key, value in pairs.items():
                self._insert(group_name, key, value)
        logger.info(f"Loaded {len(self._tree)} groups.")
        self.refresh()

    def delete(self, group_name: str, key: str = "") -> bool:
        """
        Remove a whole group (empty `key`) or a single key of a group.

        Returns:
            True if something was removed.
        """
        group_name = group_name.strip()
        key = key.strip()

        gi = self._tree.group_index(group_name)
        if gi < 0:
            logger.debug(f"Rejected delete: no group '{group_name}'.")
            return False

        if not key:
            del self._tree.groups[gi]
            logger.debug(f"Deleted group '{group_name}'.")
            self.refresh()
            return True

        group = self._tree.groups[gi]
        ei = group.element_index(key)
        if ei < 0:
            logger.debug(f"Rejected delete: no key '{key}' in group '{group_name}'.")
            return False

        del group.elements[ei]
        logger.debug(f"Deleted '{group_name}/{key}'.")
        self.refresh()
        return True

    def clear_all(self) -> None:
        """Remove every widget and every group."""
        self._binding.detach_all()
        self._tree.groups.clear()
        self._layout = None
        self._next_y = self._bounds.y + self.metrics.top_offset
        self.surface.redraw()
        logger.debug("Cleared grid.")

    # ---- query ----

    def get_data(self) -> GroupedKeyValueTree:
        """
        Copy on-screen edits into the tree and return it.

        The returned tree is the live one, not a copy.
        """
        copied = self._binding.pull_back()
        logger.debug(f"Pulled back {copied} values.")
        return self._tree
