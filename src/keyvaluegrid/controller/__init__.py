"""
The CONTROLLER layer: layout engine, widget binding and the grid controller.
It talks to the GUI only through the injected Surface protocol.
"""
from keyvaluegrid.controller.grid import KeyValueGrid
from keyvaluegrid.controller.surface import Rect, Surface

__all__ = ["KeyValueGrid", "Rect", "Surface"]
