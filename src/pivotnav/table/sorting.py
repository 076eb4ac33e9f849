"""
Sorting helpers for displays that reorder table rows by a column.
"""

from typing import List, Union

from pivotnav.table.engine import Row, TableData
from pivotnav.table.errors import InvalidSortTargetError


def sorting_value(row: Row, column_id: str) -> Union[int, float]:
    """Numeric sort key of one row for the given column path_id."""
    if column_id not in row:
        raise InvalidSortTargetError(f"Unknown column '{column_id}'")

    cell = row[column_id]
    if cell.is_header:
        raise InvalidSortTargetError(
            f"Header cells can not be sorted (column '{column_id}'); "
            "this points to a bug in grid assembly or in the calling view"
        )
    return cell.value


def sort_rows(table: TableData, column_id: str,
              descending: bool = False) -> List[Row]:
    """
    Rows of a table ordered by one column, grand-total row kept last.

    Refused while rows are expanded, since reordering would separate
    children from their parents.
    """
    if not table.can_sort_columns:
        raise InvalidSortTargetError(
            "Rows are expanded; sorting would break parent/child adjacency"
        )
    if not table.rows:
        return []

    body, totals = table.rows[:-1], table.rows[-1:]
    ordered = sorted(body, key=lambda row: sorting_value(row, column_id),
                     reverse=descending)
    return ordered + totals
