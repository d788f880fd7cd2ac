import array
import operator
from typing import Iterable

from .base import WORD_MASK, WORD_SIZE


def _word_typecode() -> str:
    # "I" is 4 bytes on every mainstream platform, "L" is the fallback
    for typecode in ("I", "L"):
        if array.array(typecode).itemsize == 4:
            return typecode
    raise RuntimeError("No 32-bit unsigned array typecode on this platform")


WORD_TYPECODE = _word_typecode()


def word_count_for(length: int) -> int:
    """Number of 32-bit words needed to hold ``length`` bits."""
    return (length + WORD_SIZE - 1) // WORD_SIZE


def allocate_words(count: int) -> array.array:
    words = array.array(WORD_TYPECODE)
    words.extend([0] * count)
    return words


def to_word(value) -> int:
    """Reduce an integer to an unsigned 32-bit word, e.g. -1 -> 0xFFFFFFFF."""
    if isinstance(value, bool):
        raise TypeError(f"Word values must be integers, {value!r} given")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"Word values must be integers, {value!r} given") from None
    return value & WORD_MASK


def to_words(values: Iterable) -> list:
    return [to_word(value) for value in values]


def popcount32(word: int) -> int:
    """
    Count set bits of a 32-bit word without looping over bits.

    Adds neighbouring bits into 2-bit sums, then 4-bit sums, then byte sums;
    the multiply adds all bytes into the top byte.
    """
    word = word - ((word >> 1) & 0x55555555)
    word = (word & 0x33333333) + ((word >> 2) & 0x33333333)
    word = (word + (word >> 4)) & 0x0F0F0F0F
    return ((word * 0x01010101) & WORD_MASK) >> 24
