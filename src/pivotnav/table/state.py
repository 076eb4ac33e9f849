"""
Expansion state: which header nodes are drilled into on one axis.
"""

from dataclasses import dataclass, field
from typing import Set, List


@dataclass
class ExpansionState:
    """
    Set of expanded node path_ids for one axis.

    Keyed by path text rather than header objects, so membership survives
    the wholesale rebuild of headers on every table build.
    """
    expanded_paths: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.expanded_paths)

    def __contains__(self, path_id: str) -> bool:
        return path_id in self.expanded_paths

    def is_expanded(self, path_id: str) -> bool:
        return path_id in self.expanded_paths

    def expand(self, path_id: str):
        """Mark a path as expanded. Idempotent."""
        self.expanded_paths.add(path_id)

    def contract(self, path_id: str) -> List[str]:
        """
        Collapse a path and every path nested under it.

        Returns the removed ids; empty if the path was never expanded.
        """
        removed = [p for p in self.expanded_paths if p.startswith(path_id)]
        self.expanded_paths.difference_update(removed)
        return sorted(removed)

    def clear(self):
        self.expanded_paths.clear()

    def to_list(self) -> List[str]:
        return sorted(self.expanded_paths)
