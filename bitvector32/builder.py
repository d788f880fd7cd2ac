import logging
import time
from typing import Any, Dict, Iterable

from .engine import BitVector


logger = logging.getLogger(__name__)


class BitVectorBuilder:
    """Collects bit positions and turns them into a BitVector in one step."""

    def __init__(self, length: int):
        """
        Initialize builder for a vector of ``length`` bits.

        The length is validated right away; positions are validated by build().
        """
        BitVector(length)
        self.length = length
        self.positions = []

        self.stats = {
            "build_time": 0,
            "length": length,
            "requested": 0,
            "distinct": 0
        }

    def add(self, index: int) -> "BitVectorBuilder":
        self.positions.append(index)
        return self

    def add_all(self, indices: Iterable[int]) -> "BitVectorBuilder":
        self.positions.extend(indices)
        return self

    def build(self) -> BitVector:
        """Create the vector. Nothing is returned if any position is out of range."""
        start_time = time.time()

        vector = BitVector(self.length)
        for index in self.positions:
            vector.set(index, True)

        self.stats["build_time"] = time.time() - start_time
        self._calculate_stats(vector)
        logger.debug(f"Built bit vector: {self.stats}")
        return vector

    def _calculate_stats(self, vector: BitVector):
        self.stats["requested"] = len(self.positions)
        self.stats["distinct"] = vector.weight()

    def get_stats(self) -> Dict[str, Any]:
        return dict(self.stats)
