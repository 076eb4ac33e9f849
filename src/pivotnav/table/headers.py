"""
Header nodes and the recursive header tree builder.

Each axis of a pivot table is a tree of HeaderNodes: one tier per chosen
dimension, one node per distinct value. The tree is returned flattened in
pre-order so it lines up directly with grid rows or columns.

Node identity is the textual path_id, never the object: headers are rebuilt
from scratch on every table build, and the expansion state must recognise
them across rebuilds.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Iterator, Sequence, AbstractSet
from enum import Enum

import numpy as np

from pivotnav.table.schema import Axis, Dimension
from pivotnav.table.store import RecordStore


# Sentinel names of the pseudo headers. They double as their path ids.
ROW_LABELS = "rowHeaders"
ROW_SUM = "rowSum"
COLUMN_SUM = "columnSum"


class HeaderRole(Enum):
    """Role a header plays in grid construction."""
    ROW = "row"
    COLUMN = "column"
    ROW_LABELS = "row_labels"  # column showing the row headers
    ROW_SUM = "row_sum"        # grand-total column
    COLUMN_SUM = "column_sum"  # grand-total row


PSEUDO_ROLES = (HeaderRole.ROW_LABELS, HeaderRole.ROW_SUM, HeaderRole.COLUMN_SUM)


def format_value(value: Any) -> str:
    """Display label for a dimension value or a cell sum."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, np.bool_)):
        return str(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return str(value)


def make_token(dimension_name: str, value: Any, can_expand: bool) -> str:
    """Path token of one node: 'dim.value', wrapped in <...> when expandable."""
    token = f"{dimension_name}.{format_value(value)}"
    if can_expand:
        return f"<{token}>"
    return token


@dataclass(eq=False)
class HeaderNode:
    """
    One value of one dimension within an axis hierarchy, or a pseudo header.

    Attributes:
        role: Which axis (or pseudo role) this header belongs to
        dimension_name: Dimension pinned by this node (sentinel name for pseudo headers)
        value: Scalar value pinned by this node
        label: Display label
        can_expand: True iff another dimension follows on this axis
        parent: Enclosing node on the same axis (None at the root tier)
        is_expanded: True iff the node is expanded and has children in the build
        path_id: Canonical identity derived from the ancestor chain
        depth: Number of ancestors
    """
    role: HeaderRole
    dimension_name: str
    value: Any
    label: str
    can_expand: bool = False
    parent: Optional["HeaderNode"] = field(default=None, repr=False)
    is_expanded: bool = False
    path_id: str = field(init=False)
    depth: int = field(init=False)

    def __post_init__(self):
        if self.is_pseudo:
            self.path_id = self.dimension_name
            self.depth = 0
            return

        token = make_token(self.dimension_name, self.value, self.can_expand)
        if self.parent is None:
            self.path_id = token
            self.depth = 0
        else:
            self.path_id = self.parent.path_id + token
            self.depth = self.parent.depth + 1

    @property
    def is_pseudo(self) -> bool:
        return self.role in PSEUDO_ROLES

    @property
    def is_row_header(self) -> bool:
        return self.role in (HeaderRole.ROW, HeaderRole.COLUMN_SUM)

    @property
    def is_column_header(self) -> bool:
        return self.role in (HeaderRole.COLUMN, HeaderRole.ROW_SUM, HeaderRole.ROW_LABELS)

    @property
    def axis(self) -> Optional[Axis]:
        """Axis of a dimension header; None for pseudo headers."""
        if self.role == HeaderRole.ROW:
            return Axis.ROWS
        if self.role == HeaderRole.COLUMN:
            return Axis.COLUMNS
        return None

    def ancestors(self) -> Iterator["HeaderNode"]:
        """Walk the chain: self, parent, grandparent, ..."""
        node = self
        while node is not None:
            yield node
            node = node.parent

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.value,
            "dimension_name": self.dimension_name,
            "value": self.value,
            "label": self.label,
            "path_id": self.path_id,
            "parent_path_id": self.parent.path_id if self.parent else None,
            "can_expand": self.can_expand,
            "is_expanded": self.is_expanded,
            "depth": self.depth,
        }


def create_row_labels_header() -> HeaderNode:
    """Pseudo column header marking the column that displays row headers."""
    return HeaderNode(role=HeaderRole.ROW_LABELS, dimension_name=ROW_LABELS,
                      value="", label="")


def create_row_sum_header(label: str = "Totals") -> HeaderNode:
    """Pseudo column header of the grand-total column."""
    return HeaderNode(role=HeaderRole.ROW_SUM, dimension_name=ROW_SUM,
                      value="", label=label)


def create_column_sum_header(label: str = "Totals") -> HeaderNode:
    """Pseudo row header of the grand-total row."""
    return HeaderNode(role=HeaderRole.COLUMN_SUM, dimension_name=COLUMN_SUM,
                      value="", label=label)


def build_axis_headers(store: RecordStore,
                       dimensions: Sequence[Dimension],
                       expanded_paths: AbstractSet[str],
                       role: HeaderRole,
                       parent: Optional[HeaderNode] = None) -> List[HeaderNode]:
    """
    Build the flattened header hierarchy of one axis.

    Args:
        store: Records supplying the distinct dimension values
        dimensions: Remaining dimension order for this axis
        expanded_paths: path_ids of the expanded nodes on this axis (read only)
        role: HeaderRole.ROW or HeaderRole.COLUMN
        parent: Node the returned tier is nested under

    Returns:
        Nodes in pre-order: each expanded node is immediately followed by
        its descendants.
    """
    if not dimensions:
        return []

    current, rest = dimensions[0], dimensions[1:]
    primary = [
        HeaderNode(
            role=role,
            dimension_name=current.name,
            value=value,
            label=format_value(value),
            can_expand=len(rest) > 0,
            parent=parent,
        )
        for value in store.distinct_values(current.name)
    ]

    if not expanded_paths:
        return primary

    headers = []
    for node in primary:
        headers.append(node)
        if node.path_id not in expanded_paths:
            continue

        children = build_axis_headers(store, rest, expanded_paths, role, parent=node)
        # A dead-end expansion renders as a collapsed node
        if children:
            node.is_expanded = True
            headers.extend(children)

    return headers
