"""
PivotNav: Interactive hierarchical cross-tabulation over flat records.

Choose record attributes as row and column groupings, get header
hierarchies for both axes plus a grid of summed cells with grand totals,
and drill into nested dimensions by expanding header nodes.
"""

__version__ = "0.1.0"
__author__ = "PivotNav Team"

from pivotnav.table.schema import Axis, Dimension, PivotConfig
from pivotnav.table.engine import PivotEngine, TableData, Cell
from pivotnav.table.headers import HeaderNode

__all__ = [
    "Axis",
    "Dimension",
    "PivotConfig",
    "PivotEngine",
    "TableData",
    "Cell",
    "HeaderNode",
]
