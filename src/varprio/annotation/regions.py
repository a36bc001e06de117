"""Chromosomal region lookups used to flag regulatory-region variants."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from intervaltree import IntervalTree

logger = logging.getLogger(__name__)


class RegulatoryRegionIndex(Protocol):
    def contains(self, chromosome: int, position: int) -> bool:
        """True if any region on ``chromosome`` overlaps ``position``."""
        ...


@dataclass(frozen=True)
class ChromosomalRegion:
    """A 1-based, fully closed region."""
    chromosome: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Region end {self.end} is before start {self.start}")


class ChromosomalRegionIndex:
    """In-memory region index, one interval tree per chromosome.

    Interval trees are half-open, so a closed region is stored as
    ``[start, end + 1)``.
    """

    def __init__(self, regions: Iterable[ChromosomalRegion] = ()) -> None:
        self._trees: dict[int, IntervalTree] = defaultdict(IntervalTree)
        self._size = 0
        for region in regions:
            self._trees[region.chromosome].addi(region.start, region.end + 1, region)
            self._size += 1
        logger.debug("Indexed %d regions on %d chromosomes", self._size, len(self._trees))

    @classmethod
    def empty(cls) -> ChromosomalRegionIndex:
        return cls()

    def __len__(self) -> int:
        return self._size

    def contains(self, chromosome: int, position: int) -> bool:
        tree = self._trees.get(chromosome)
        if tree is None:
            return False
        return bool(tree.at(position))
