"""
Table module: Data structures and engine for hierarchical pivot tables.
"""

from pivotnav.table.schema import Axis, Dimension, PivotConfig
from pivotnav.table.store import RecordStore
from pivotnav.table.state import ExpansionState
from pivotnav.table.headers import (
    HeaderNode, HeaderRole, ROW_LABELS, ROW_SUM, COLUMN_SUM,
    build_axis_headers, format_value,
)
from pivotnav.table.engine import PivotEngine, TableData, Cell, Row
from pivotnav.table.sorting import sorting_value, sort_rows
from pivotnav.table.errors import (
    PivotError, ConfigurationError, UnsupportedMutationError, InvalidSortTargetError
)

__all__ = [
    "Axis", "Dimension", "PivotConfig",
    "RecordStore", "ExpansionState",
    "HeaderNode", "HeaderRole", "ROW_LABELS", "ROW_SUM", "COLUMN_SUM",
    "build_axis_headers", "format_value",
    "PivotEngine", "TableData", "Cell", "Row",
    "sorting_value", "sort_rows",
    "PivotError", "ConfigurationError", "UnsupportedMutationError", "InvalidSortTargetError",
]
