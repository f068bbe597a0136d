"""
Widget Binding
Keeps the rendered widgets of every displayed group in step with the tree.

The binding is a derived cache: it is thrown away and rebuilt as a whole on
every refresh and never outlives a structural change of the tree.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from keyvaluegrid.config import DEFAULT_METRICS, LayoutMetrics
from keyvaluegrid.controller.layout import GridLayout, GroupGeometry
from keyvaluegrid.controller.surface import Surface
from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPgroup

logger = logging.getLogger(__name__)


@dataclass
class GroupWidgets:
    """Widgets rendered for a single group."""
    box: Any
    label: Any
    group: KVPgroup  # elements are index-aligned with `inputs`
    key_labels: list[Any] = field(default_factory=list)
    inputs: list[Any] = field(default_factory=list)

    def handles(self) -> Iterator[Any]:
        """All handles, children first, so the container goes last."""
        yield from self.inputs
        yield from self.key_labels
        yield self.label
        yield self.box


class WidgetBinding:
    def __init__(self, surface: Surface, metrics: LayoutMetrics = DEFAULT_METRICS) -> None:
        self.surface = surface
        self.metrics = metrics
        self._groups: dict[str, GroupWidgets] = {}

    def detach_all(self) -> None:
        """Detach every rendered widget of every group, unconditionally."""
        count = 0
        for gw in self._groups.values():
            for handle in gw.handles():
                self.surface.detach(handle)
                count += 1
        self._groups = {}
        if count:
            logger.debug(f"Detached {count} widgets.")

    def rebuild(self, tree: GroupedKeyValueTree, layout: GridLayout) -> None:
        """
        Replace all widgets with a fresh set built from `layout`.

        Every old widget is detached before the first new one is created.
        """
        self.detach_all()

        for geometry in layout.groups:
            group = tree.find_group(geometry.name)
            if group is None:
                raise ValueError(f"Layout refers to unknown group '{geometry.name}'.")
            self._groups[group.name] = self._build_group(group, geometry)

        self.surface.redraw()

    def _build_group(self, group: KVPgroup, geometry: GroupGeometry) -> GroupWidgets:
        m = self.metrics
        box = self.surface.create_container(geometry.box_rect)
        label = self.surface.create_label(geometry.label_rect, group.name, m.group_label_font_size)
        gw = GroupWidgets(box=box, label=label, group=group)

        for elem, row in zip(group.elements, geometry.rows):
            gw.key_labels.append(self.surface.create_label(row.key_rect, elem.key, m.key_label_font_size))
            gw.inputs.append(self.surface.create_input(row.value_rect, elem.value))
        return gw

    def pull_back(self) -> int:
        """
        Copy the text of every input into the matching element value.

        Returns:
            Number of values copied.
        """
        copied = 0
        for name, gw in self._groups.items():
            elements = gw.group.elements
            if len(gw.inputs) != len(elements):
                # Inputs and elements are built together, so this is a bug
                logger.error(
                    f"Group '{name}' has {len(gw.inputs)} inputs for {len(elements)} elements; "
                    f"skipping out-of-range rows."
                )
            for i, handle in enumerate(gw.inputs):
                if i >= len(elements):
                    break
                elements[i].value = self.surface.input_text(handle)
                copied += 1
        return copied

    def get(self, name: str) -> Optional[GroupWidgets]:
        return self._groups.get(name)

    def group_names(self) -> list[str]:
        return list(self._groups)

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __len__(self) -> int:
        return len(self._groups)
