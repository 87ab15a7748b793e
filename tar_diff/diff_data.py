"""
Data classes representing a tar diff.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Dict


class DiffState(Enum):
    """
    Enumeration that describes the possible mismatch kinds for a positionally paired entry.
    """

    HEADER_MISMATCH = auto()
    CONTENT_MISMATCH = auto()
    ONLY_LEFT = auto()
    ONLY_RIGHT = auto()


@dataclass
class DiffRecord:
    """
    This record represents an archive entry for which a difference between the two inputs was
    detected. Matching entries never produce a record.
    """
    name: str
    result: DiffState

    @property
    def size_diff(self) -> bool:
        """
        :return: True if the entry names or the declared sizes differ.
        """
        return self.result == DiffState.HEADER_MISMATCH

    @property
    def content_diff(self) -> bool:
        """
        :return: True if the headers matched but the byte content differs.
        """
        return self.result == DiffState.CONTENT_MISMATCH


@dataclass
class TarDiff:
    """
    This class contains the full results of a tar diff.
    """
    records: List[DiffRecord] = field(default_factory=list)
    pairs_compared: int = 0

    @property
    def is_equal(self) -> bool:
        return not self.records

    def stats(self) -> Dict[DiffState, int]:
        """
        Computes the total number of occurrences per `DiffState`.
        :return: Dict mapping `DiffState` to the corresponding entry counts.
        """
        counts = {state: 0 for state in DiffState}
        for record in self.records:
            counts[record.result] += 1

        return counts
