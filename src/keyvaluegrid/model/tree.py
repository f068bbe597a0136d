"""
Grouped Key-Value Tree (Data Model)
===================================
Plain ordered hierarchy shown by the grid: the tree holds named groups,
each group holds key/value elements.

Classes:
    KVPelement: A single key/value pair.
    KVPgroup: A named, ordered collection of elements.
    GroupedKeyValueTree: The root container, groups in display order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class KVPelement:
    """A single key-value pair within a group."""
    key: str
    value: str = ""


@dataclass
class KVPgroup:
    """A group of key-value pairs, identified by name."""
    name: str
    elements: list[KVPelement] = field(default_factory=list)

    def element_index(self, key: str) -> int:
        for i, elem in enumerate(self.elements):
            if elem.key == key:
                return i
        return -1

    def find_element(self, key: str) -> Optional[KVPelement]:
        i = self.element_index(key)
        return self.elements[i] if i >= 0 else None

    def __len__(self) -> int:
        return len(self.elements)


@dataclass
class GroupedKeyValueTree:
    """
    Root of the data shown by the grid.

    Order of `groups` is insertion order and is also the display order.
    Uniqueness of group names and of keys inside a group is enforced by the
    grid controller, not here.
    """
    groups: list[KVPgroup] = field(default_factory=list)

    def group_index(self, name: str) -> int:
        for i, group in enumerate(self.groups):
            if group.name == name:
                return i
        return -1

    def find_group(self, name: str) -> Optional[KVPgroup]:
        i = self.group_index(name)
        return self.groups[i] if i >= 0 else None

    def longest_key(self) -> str:
        """Longest key across all groups, ties keep the first one encountered."""
        longest = ""
        for group in self.groups:
            for elem in group.elements:
                if len(elem.key) > len(longest):
                    longest = elem.key
        return longest

    def is_empty(self) -> bool:
        return not self.groups

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {g.name: {e.key: e.value for e in g.elements} for g in self.groups}

    def __iter__(self) -> Iterator[KVPgroup]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)
