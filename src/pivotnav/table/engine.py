"""
Pivot Engine: assembles cross-tabulated tables and tracks drill-down state.

This module handles:
- Header hierarchies for both axes (via headers.build_axis_headers)
- Grand-total pseudo headers on both axes
- Cell aggregation by ancestor-chain filtering
- Expand/contract of header nodes per axis
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Union, Sequence, Mapping

import pandas as pd

from pivotnav.table.schema import Axis, PivotConfig
from pivotnav.table.store import RecordStore
from pivotnav.table.state import ExpansionState
from pivotnav.table.errors import UnsupportedMutationError
from pivotnav.table.headers import (
    HeaderNode, HeaderRole, ROW_SUM, COLUMN_SUM,
    build_axis_headers, format_value,
    create_row_labels_header, create_row_sum_header, create_column_sum_header,
)

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    """
    One grid cell: either a header-display cell or an aggregated value.

    Attributes:
        is_header: True if the cell displays a header instead of a sum
        header: The displayed header (header cells only)
        label: Display text
        value: Numeric sum (value cells only)
    """
    is_header: bool
    header: Optional[HeaderNode] = None
    label: str = ""
    value: Optional[Union[int, float]] = None

    @classmethod
    def for_header(cls, header: HeaderNode) -> "Cell":
        return cls(is_header=True, header=header, label=header.label)

    @classmethod
    def for_value(cls, value: Union[int, float]) -> "Cell":
        return cls(is_header=False, label=format_value(value), value=value)

    def to_dict(self) -> Dict[str, Any]:
        if self.is_header:
            return {"is_header": True, "header": self.header.to_dict()}
        return {"is_header": False, "label": self.label, "value": self.value}


Row = Dict[str, Cell]  # column path_id -> cell


@dataclass
class TableData:
    """
    Result of a table build.

    Attributes:
        column_headers: Row-label pseudo header, column hierarchy, grand-total column
        rows: One mapping per row header, keyed by column path_id
        can_sort_columns: False when any row header is expanded
        row_headers: Row hierarchy followed by the grand-total row header
    """
    column_headers: List[HeaderNode]
    rows: List[Row]
    can_sort_columns: bool = True
    row_headers: List[HeaderNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.column_headers and not self.rows

    @property
    def column_ids(self) -> List[str]:
        return [h.path_id for h in self.column_headers]

    @property
    def grand_total(self) -> Optional[Union[int, float]]:
        """Value of the grand-total corner cell (None for an empty table)."""
        if self.is_empty:
            return None
        return self.rows[-1][ROW_SUM].value

    def to_frame(self) -> pd.DataFrame:
        """
        Numeric values as a DataFrame.

        Columns are labelled by column header, rows by row header (indented
        by depth). The row-label column is dropped since it becomes the index.
        """
        if self.is_empty:
            return pd.DataFrame()

        value_headers = [
            h for h in self.column_headers if h.role != HeaderRole.ROW_LABELS
        ]
        index = pd.Index(
            ["  " * h.depth + h.label for h in self.row_headers], name=""
        )
        data = [[row[h.path_id].value for h in value_headers] for row in self.rows]
        return pd.DataFrame(data, index=index, columns=[h.label for h in value_headers])

    def get_summary(self) -> Dict[str, Any]:
        return {
            "column_count": len(self.column_headers),
            "row_count": len(self.rows),
            "can_sort_columns": self.can_sort_columns,
            "grand_total": self.grand_total,
        }


class PivotEngine:
    """
    In-memory pivot table engine.

    The chosen dimension lists are owned by the caller and read on every
    build; the two expansion states are owned by the engine and only change
    through expand/contract.
    """

    def __init__(self, config: PivotConfig):
        """
        Initialize with a configuration.

        Args:
            config: Records, measure and initial dimension selection
        """
        config.validate()
        self.config = config
        self.available = config.available
        self.chosen_rows = config.chosen_rows
        self.chosen_columns = config.chosen_columns
        self.store = RecordStore(config.records, config.measure)
        self._expansion: Dict[Axis, ExpansionState] = {
            Axis.ROWS: ExpansionState(),
            Axis.COLUMNS: ExpansionState(),
        }

    def set_records(self, records: Union[Sequence[Mapping[str, Any]], pd.DataFrame]):
        """Replace the record collection; the dimension selection is kept."""
        self.store = RecordStore(records, self.config.measure)

    # ------------------------------------------------------------------
    # Expansion state
    # ------------------------------------------------------------------

    def expansion_state(self, axis: Axis) -> ExpansionState:
        if axis not in self._expansion:
            raise UnsupportedMutationError(f"Unknown axis: {axis!r}")
        return self._expansion[axis]

    def _check_target(self, axis: Axis, header: HeaderNode):
        if axis not in self._expansion:
            raise UnsupportedMutationError(f"Unknown axis: {axis!r}")
        if header.is_pseudo:
            raise UnsupportedMutationError(
                f"Pseudo header '{header.path_id}' cannot be expanded or contracted"
            )
        if header.axis != axis:
            raise UnsupportedMutationError(
                f"Header '{header.path_id}' belongs to {header.axis.value}, not {axis.value}"
            )

    def expand(self, axis: Axis, header: HeaderNode):
        """Drill into a header on the given axis."""
        self._check_target(axis, header)
        self._expansion[axis].expand(header.path_id)
        logger.info(f"Expanded {axis.value} header {header.path_id}")

    def contract(self, axis: Axis, header: HeaderNode):
        """Collapse a header and everything nested under it."""
        self._check_target(axis, header)
        removed = self._expansion[axis].contract(header.path_id)
        logger.info(
            f"Contracted {axis.value} header {header.path_id} "
            f"({len(removed)} expanded paths removed)"
        )

    def expand_column(self, header: HeaderNode):
        self.expand(Axis.COLUMNS, header)

    def contract_column(self, header: HeaderNode):
        self.contract(Axis.COLUMNS, header)

    def expand_row(self, header: HeaderNode):
        self.expand(Axis.ROWS, header)

    def contract_row(self, header: HeaderNode):
        self.contract(Axis.ROWS, header)

    def reset_expansion(self, axis: Optional[Axis] = None):
        """Collapse every node on one axis, or on both when axis is None."""
        axes = [axis] if axis is not None else list(self._expansion)
        for a in axes:
            self.expansion_state(a).clear()

    # ------------------------------------------------------------------
    # Table assembly
    # ------------------------------------------------------------------

    def compute_column_headers(self) -> List[HeaderNode]:
        headers = build_axis_headers(
            self.store, self.chosen_columns,
            self._expansion[Axis.COLUMNS].expanded_paths, HeaderRole.COLUMN
        )
        logger.debug(f"Computed {len(headers)} column headers")
        return headers

    def compute_row_headers(self) -> List[HeaderNode]:
        headers = build_axis_headers(
            self.store, self.chosen_rows,
            self._expansion[Axis.ROWS].expanded_paths, HeaderRole.ROW
        )
        logger.debug(f"Computed {len(headers)} row headers")
        return headers

    def build_table(self) -> TableData:
        """
        Build the full cross-tab from the current selection and expansion.

        Totals are one more header on each axis, so rows-only, columns-only
        and both-axes tables share the same grid construction.
        """
        column_headers = self.compute_column_headers()
        row_headers = self.compute_row_headers()

        if not column_headers and not row_headers:
            logger.info("No headers on either axis, returning empty table")
            return TableData(column_headers=[], rows=[], can_sort_columns=True)

        can_sort_columns = not any(h.is_expanded for h in row_headers)

        total_label = self.config.total_label
        column_headers = (
            [create_row_labels_header()]
            + column_headers
            + [create_row_sum_header(total_label)]
        )
        row_headers = row_headers + [create_column_sum_header(total_label)]

        rows = [self.create_row(rh, column_headers) for rh in row_headers]

        logger.info(
            f"Built table: {len(column_headers)} columns x {len(rows)} rows, "
            f"can_sort_columns={can_sort_columns}"
        )
        return TableData(
            column_headers=column_headers,
            rows=rows,
            can_sort_columns=can_sort_columns,
            row_headers=row_headers,
        )

    @property
    def table_data(self) -> TableData:
        return self.build_table()

    def create_row(self, row_header: HeaderNode,
                   column_headers: List[HeaderNode]) -> Row:
        return {
            column_header.path_id: self.generate_cell(row_header, column_header)
            for column_header in column_headers
        }

    def generate_cell(self, row_header: HeaderNode, column_header: HeaderNode) -> Cell:
        """
        Produce the cell at (row_header, column_header).

        Cells in the row-label column (and the corner) display headers.
        Every other cell sums the measure over the records matching all
        ancestors of both headers; total pseudo headers add no constraint.
        """
        if (column_header.role == HeaderRole.ROW_LABELS
                and row_header.role == HeaderRole.ROW_LABELS):
            return Cell.for_header(column_header)

        if column_header.role == HeaderRole.ROW_LABELS:
            return Cell.for_header(row_header)

        if row_header.role == HeaderRole.ROW_LABELS:
            return Cell.for_header(column_header)

        predicates = [
            (node.dimension_name, node.value)
            for node in column_header.ancestors()
            if node.dimension_name != ROW_SUM
        ]
        predicates.extend(
            (node.dimension_name, node.value)
            for node in row_header.ancestors()
            if node.dimension_name != COLUMN_SUM
        )

        return Cell.for_value(self.store.total(predicates))
