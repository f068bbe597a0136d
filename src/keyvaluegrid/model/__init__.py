"""
The MODEL layer contains pure data structures.
It has NO knowledge of the GUI (Qt) or of the layout engine.
"""
from keyvaluegrid.model.tree import GroupedKeyValueTree, KVPelement, KVPgroup

__all__ = ["GroupedKeyValueTree", "KVPelement", "KVPgroup"]
