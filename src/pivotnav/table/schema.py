"""
Table schema definitions: dimensions, axes and engine configuration.

A pivot table T = <R, D_rows, D_cols, m> groups the records R by the chosen
row dimensions D_rows and column dimensions D_cols and sums the measure m.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Sequence, Mapping
from enum import Enum

from pivotnav.table.errors import ConfigurationError


class Axis(Enum):
    """The two grouping axes of a cross-tabulation."""
    ROWS = "rows"
    COLUMNS = "columns"


@dataclass(frozen=True)
class Dimension:
    """
    A categorical record attribute usable for grouping.

    Attributes:
        name: Record field name (e.g., 'brand', 'category')
        label: User-facing label (e.g., 'Brand')
    """
    name: str
    label: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.name

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "label": self.label}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Dimension":
        return cls(name=data["name"], label=data.get("label", ""))


@dataclass
class PivotConfig:
    """
    Construction parameters for a PivotEngine.

    Attributes:
        records: Flat records, each mapping dimension name -> scalar plus the measure
        measure: Name of the numeric field summed into cells
        available: Dimensions not currently placed on either axis
        chosen_rows: Ordered dimensions grouping the row axis
        chosen_columns: Ordered dimensions grouping the column axis
        total_label: Label of the grand-total row and column headers
    """
    records: Sequence[Mapping[str, Any]] = field(default_factory=list)
    measure: str = "revenue"
    available: List[Dimension] = field(default_factory=list)
    chosen_rows: List[Dimension] = field(default_factory=list)
    chosen_columns: List[Dimension] = field(default_factory=list)
    total_label: str = "Totals"

    def validate(self):
        """Check the configuration can drive a table build."""
        if not self.measure:
            raise ConfigurationError("A measure field name is required")

        chosen = [d.name for d in self.chosen_rows + self.chosen_columns]
        if self.measure in chosen:
            raise ConfigurationError(
                f"Measure '{self.measure}' cannot also be a grouping dimension"
            )

    @property
    def dimensions(self) -> List[Dimension]:
        """All dimensions known to this configuration, in list order."""
        return list(self.available) + list(self.chosen_rows) + list(self.chosen_columns)

    def get_dimension(self, name: str) -> Optional[Dimension]:
        """Get dimension by name."""
        for dim in self.dimensions:
            if dim.name == name:
                return dim
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the dimension selection (records are not included)."""
        return {
            "measure": self.measure,
            "total_label": self.total_label,
            "available": [d.to_dict() for d in self.available],
            "chosen_rows": [d.to_dict() for d in self.chosen_rows],
            "chosen_columns": [d.to_dict() for d in self.chosen_columns],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  records: Sequence[Mapping[str, Any]] = None) -> "PivotConfig":
        """Deserialize a dimension selection and attach records."""
        return cls(
            records=records if records is not None else [],
            measure=data.get("measure", "revenue"),
            available=[Dimension.from_dict(d) for d in data.get("available", [])],
            chosen_rows=[Dimension.from_dict(d) for d in data.get("chosen_rows", [])],
            chosen_columns=[Dimension.from_dict(d) for d in data.get("chosen_columns", [])],
            total_label=data.get("total_label", "Totals"),
        )
