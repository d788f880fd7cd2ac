from typing import Optional, Sequence

from .base import (
    DEFAULT_RADIX,
    WORD_SIZE,
    BitVectorError,
    ErrorKind,
    IndexOutOfRangeError,
    InvalidEncodingError,
    InvalidLengthError,
    InvalidRadixError,
    LengthMismatchError,
    ShiftOverflowError,
)
from .builder import BitVectorBuilder
from .codec import RadixCodec
from .engine import BitVector


__all__ = [
    "BitVector",
    "BitVectorBuilder",
    "RadixCodec",
    "ErrorKind",
    "BitVectorError",
    "InvalidLengthError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "ShiftOverflowError",
    "InvalidRadixError",
    "InvalidEncodingError",
    "DEFAULT_RADIX",
    "WORD_SIZE",
    "from_words"
]

__version__ = "1.0.0"


def from_words(words: Sequence[int], length: Optional[int] = None) -> BitVector:
    """
    Factory function to create a bit vector from storage words.

    Args:
        words: Words, least-significant first.
        length: Bit length. Defaults to ``len(words) * 32``; must need exactly
                ``len(words)`` words.
    """
    words = list(words)
    if length is None:
        length = len(words) * WORD_SIZE

    vector = BitVector(length)
    vector.set_value(words)
    return vector
