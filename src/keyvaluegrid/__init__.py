"""
Editable grid of grouped key-value pairs.

The core (model, layout, binding, controller) is toolkit independent and
draws through an injected Surface; `keyvaluegrid.view` supplies the PySide6
implementation.
"""
from keyvaluegrid.config import DEFAULT_METRICS, LayoutMetrics
from keyvaluegrid.controller.grid import KeyValueGrid
from keyvaluegrid.controller.surface import Rect, Surface
from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPelement, KVPgroup

__all__ = [
    "DEFAULT_METRICS",
    "GroupedKeyValueTree",
    "KVPelement",
    "KVPgroup",
    "KeyValueGrid",
    "LayoutMetrics",
    "Rect",
    "Surface",
]
