"""
Core module: Total order of filtration cells.
"""

from pershom.core.order import CellKey, OrderEntry, TotalOrder

__all__ = ["CellKey", "OrderEntry", "TotalOrder"]
