"""
Layout Engine
Computes the vertical flow of group boxes for the grid.

Geometry is a pure function of the ordered tree contents, the grid's bounding
box and the metrics, so running it twice on the same data yields equal results.
"""
from __future__ import annotations

from dataclasses import dataclass

from keyvaluegrid.config import DEFAULT_METRICS, LayoutMetrics
from keyvaluegrid.controller.surface import Rect
from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPgroup


@dataclass(frozen=True)
class RowGeometry:
    key: str
    key_rect: Rect
    value_rect: Rect


@dataclass(frozen=True)
class GroupGeometry:
    name: str
    box_rect: Rect
    label_rect: Rect
    rows: tuple[RowGeometry, ...]


@dataclass(frozen=True)
class GridLayout:
    key_width: int
    groups: tuple[GroupGeometry, ...]
    bottom: int  # vertical cursor after the last group


def key_column_width(tree: GroupedKeyValueTree, metrics: LayoutMetrics = DEFAULT_METRICS) -> int:
    """Width of the key column, sized for the longest key and floored at `min_key_width`."""
    longest = tree.longest_key()
    if not longest:
        return metrics.min_key_width
    return max(len(longest) * metrics.char_width + metrics.key_padding, metrics.min_key_width)


def group_box_height(row_count: int, metrics: LayoutMetrics = DEFAULT_METRICS) -> int:
    return (metrics.label_height // 2
            + row_count * metrics.input_height
            + (row_count + 1) * metrics.input_pad)


def layout_group(
    group: KVPgroup,
    bounds: Rect,
    cursor: int,
    key_width: int,
    metrics: LayoutMetrics = DEFAULT_METRICS,
) -> GroupGeometry:
    """
    Place a single non-empty group whose top edge sits at `cursor`.

    Args:
        group: The group to place.
        bounds: Bounding box of the whole grid.
        cursor: Current vertical position.
        key_width: Shared key column width (see `key_column_width`).
        metrics: Sizing constants.

    Returns:
        The box, name label and per-row rectangles of the group.
    """
    m = metrics
    box_left = bounds.x + m.side_margin
    box_width = bounds.w - 2 * m.side_margin
    box_height = group_box_height(len(group.elements), m)

    box_rect = Rect(box_left, cursor + m.label_height // 4, box_width, box_height)
    label_rect = Rect(
        box_left + m.label_inset,
        cursor - m.label_raise,
        len(group.name) * m.char_width + m.label_padding,
        m.label_height,
    )

    rows = []
    value_left = box_left + m.row_inset + key_width + m.value_gap
    value_width = box_width - (key_width + m.value_right_margin)
    for i, elem in enumerate(group.elements):
        y = cursor + m.label_height // 2 + m.input_pad + i * (m.input_height + m.input_pad)
        rows.append(RowGeometry(
            key=elem.key,
            key_rect=Rect(box_left + m.row_inset, y, key_width, m.input_height),
            value_rect=Rect(value_left, y, value_width, m.input_height),
        ))

    return GroupGeometry(name=group.name, box_rect=box_rect, label_rect=label_rect, rows=tuple(rows))


def compute_layout(
    tree: GroupedKeyValueTree,
    bounds: Rect,
    metrics: LayoutMetrics = DEFAULT_METRICS,
) -> GridLayout:
    """Lay out every non-empty group of `tree` top to bottom inside `bounds`."""
    key_width = key_column_width(tree, metrics)
    cursor = bounds.y + metrics.top_offset

    groups = []
    for group in tree.groups:
        # Empty groups take no space and get no widgets
        if not group.elements:
            continue
        geometry = layout_group(group, bounds, cursor, key_width, metrics)
        groups.append(geometry)
        cursor += geometry.box_rect.h + metrics.label_height // 2 + metrics.group_gap

    return GridLayout(key_width=key_width, groups=tuple(groups), bottom=cursor)
