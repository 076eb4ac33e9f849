"""
Record Store: the read-only collection of records a table is computed from.

Records are held in a pandas DataFrame of Python objects so dimension values
keep the exact scalar type they were supplied with. The measure is kept as a
separate numeric Series.
"""

import logging
from typing import List, Any, Iterable, Mapping, Sequence, Tuple, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

Predicate = Tuple[str, Any]  # (dimension name, required value)


class RecordStore:
    """
    In-memory record collection with equality filtering and sum reduction.

    Records lacking a dimension field hold NaN there and never match an
    equality predicate on it.
    """

    def __init__(self, records: Union[Sequence[Mapping[str, Any]], pd.DataFrame],
                 measure: str):
        """
        Initialize with data.

        Args:
            records: Sequence of flat records or an existing DataFrame
            measure: Name of the numeric field summed into cells
        """
        self.measure = measure
        if isinstance(records, pd.DataFrame):
            self.data = records.astype(object)
        else:
            self.data = pd.DataFrame(list(records), dtype=object)

        if measure in self.data.columns:
            self.values = pd.to_numeric(self.data[measure], errors="coerce")
        else:
            self.values = pd.Series(np.nan, index=self.data.index, dtype=float)

        logger.debug(
            f"Record store built: {len(self.data)} records, "
            f"fields={list(self.data.columns)}"
        )

    def __len__(self) -> int:
        return len(self.data)

    @property
    def fields(self) -> List[str]:
        return [str(c) for c in self.data.columns]

    def distinct_values(self, dimension: str) -> List[Any]:
        """
        Distinct values of a dimension in first-occurrence order.

        Missing values are dropped. The order follows the record sequence,
        it is never sorted.
        """
        if dimension not in self.data.columns:
            if len(self.data) > 0:
                logger.warning(f"Dimension '{dimension}' is not a record field")
            return []
        return self.data[dimension].dropna().unique().tolist()

    def match(self, predicates: Iterable[Predicate]) -> np.ndarray:
        """Boolean mask of the records satisfying every predicate."""
        mask = np.ones(len(self.data), dtype=bool)
        for dimension, value in predicates:
            if dimension not in self.data.columns:
                return np.zeros(len(self.data), dtype=bool)
            mask &= (self.data[dimension] == value).to_numpy(dtype=bool)
        return mask

    def total(self, predicates: Iterable[Predicate] = ()) -> Union[int, float]:
        """Sum of the measure over the records satisfying every predicate."""
        result = self.values[self.match(predicates)].sum()
        if hasattr(result, "item"):
            return result.item()
        return result
