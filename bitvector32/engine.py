import operator
from typing import Iterator, Sequence, Tuple

from .base import (
    DEFAULT_RADIX,
    WORD_MASK,
    WORD_SIZE,
    IndexOutOfRangeError,
    InvalidLengthError,
    LengthMismatchError,
    ShiftOverflowError,
)
from .codec import RadixCodec
from .utils import allocate_words, popcount32, to_words, word_count_for


class BitVector:
    """
    Fixed-length sequence of bits packed into unsigned 32-bit words.

    Word 0 holds bits 0..31, word 1 holds bits 32..63 and so on. Bits of the
    last word beyond ``length`` (padding) are never masked: NOT, the binary
    operations, shifts and ``parse`` leave them as arithmetic produces them,
    and ``weight()`` counts them.

    All transforms mutate the vector in place and return it, so calls chain::

        >>> v = BitVector(64)
        >>> v.set(0, True)
        >>> v.left_shift(33).weight()
        1
    """

    def __init__(self, length: int):
        if isinstance(length, bool):
            raise InvalidLengthError(length)
        try:
            length = operator.index(length)
        except TypeError:
            raise InvalidLengthError(length) from None
        if length < 0:
            raise InvalidLengthError(length)

        self._length = length
        self._words = allocate_words(word_count_for(length))

    # --- Storage & indexed access ---

    @property
    def length(self) -> int:
        return self._length

    @property
    def word_count(self) -> int:
        return len(self._words)

    @property
    def capacity(self) -> int:
        """Bits of storage, padding included."""
        return len(self._words) * WORD_SIZE

    @property
    def words(self) -> Tuple[int, ...]:
        """Snapshot of the storage words, least-significant first."""
        return tuple(self._words)

    def _locate(self, index) -> Tuple[int, int]:
        if isinstance(index, bool):
            raise TypeError(f"Bit index must be an integer, {index!r} given")
        index = operator.index(index)
        if index < 0 or index > self._length - 1:
            raise IndexOutOfRangeError(index, self._length)
        return index // WORD_SIZE, 1 << (index % WORD_SIZE)

    def get(self, index: int) -> bool:
        word_index, mask = self._locate(index)
        return bool(self._words[word_index] & mask)

    def set(self, index: int, value: bool) -> None:
        word_index, mask = self._locate(index)
        if value:
            self._words[word_index] |= mask
        else:
            self._words[word_index] &= ~mask & WORD_MASK

    def set_value(self, words: Sequence[int]) -> None:
        """Replace every storage word. Integers are reduced modulo 2**32."""
        words = list(words)
        if len(words) != len(self._words):
            raise LengthMismatchError(len(self._words), len(words))
        words = to_words(words)
        for index, word in enumerate(words):
            self._words[index] = word

    def weight(self) -> int:
        """Number of set bits, padding bits included."""
        return sum(popcount32(word) for word in self._words)

    # --- Bitwise algebra ---

    def _check_operand(self, other: "BitVector", operation: str) -> None:
        if not isinstance(other, BitVector):
            raise TypeError(f"BitVector {operation} needs a BitVector operand, {type(other).__name__} given")
        if len(other._words) != len(self._words):
            raise LengthMismatchError(len(self._words), len(other._words), operation)

    def not_op(self) -> "BitVector":
        for index, word in enumerate(self._words):
            self._words[index] = ~word & WORD_MASK
        return self

    def and_op(self, other: "BitVector") -> "BitVector":
        self._check_operand(other, "AND")
        for index, word in enumerate(other._words):
            self._words[index] &= word
        return self

    def or_op(self, other: "BitVector") -> "BitVector":
        self._check_operand(other, "OR")
        for index, word in enumerate(other._words):
            self._words[index] |= word
        return self

    def xor_op(self, other: "BitVector") -> "BitVector":
        self._check_operand(other, "XOR")
        for index, word in enumerate(other._words):
            self._words[index] ^= word
        return self

    # --- Shift ---

    def left_shift(self, value: int) -> "BitVector":
        """
        Shift all bits ``value`` positions towards higher indices.

        The whole storage is shifted as one unsigned integer of ``capacity``
        bits; bits pushed past the top are dropped and the bottom fills with
        zeros. A vector without words accepts no shift at all.
        """
        if isinstance(value, bool):
            raise TypeError(f"Shift amount must be an integer, {value!r} given")
        value = operator.index(value)
        limit = self.capacity - 1
        if value < 0 or value > limit:
            raise ShiftOverflowError(value, limit)

        words_offset, bits_offset = divmod(value, WORD_SIZE)
        words = self._words
        for index in range(len(words) - 1, -1, -1):
            source = index - words_offset
            word = (words[source] << bits_offset) & WORD_MASK if source >= 0 else 0
            if bits_offset and source - 1 >= 0:
                word |= words[source - 1] >> (WORD_SIZE - bits_offset)
            words[index] = word
        return self

    # --- Serialization ---

    def to_string(self, radix: int = DEFAULT_RADIX) -> str:
        return RadixCodec.encode(self._words, radix)

    @classmethod
    def parse(cls, text: str, radix: int = DEFAULT_RADIX) -> "BitVector":
        """Build a vector from ``to_string`` output. Its length is always a multiple of 32."""
        words = RadixCodec.decode(text, radix)
        vector = cls(len(words) * WORD_SIZE)
        vector.set_value(words)
        return vector

    # --- Python protocol ---

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __setitem__(self, index: int, value: bool) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[bool]:
        for index in range(self._length):
            yield bool(self._words[index // WORD_SIZE] & (1 << (index % WORD_SIZE)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._length == other._length and self._words == other._words

    __hash__ = None

    def __iand__(self, other: "BitVector") -> "BitVector":
        return self.and_op(other)

    def __ior__(self, other: "BitVector") -> "BitVector":
        return self.or_op(other)

    def __ixor__(self, other: "BitVector") -> "BitVector":
        return self.xor_op(other)

    def __ilshift__(self, value: int) -> "BitVector":
        return self.left_shift(value)

    def __repr__(self) -> str:
        return f"BitVector(length={self._length}, words={list(self._words)})"

    def __str__(self) -> str:
        return self.to_string()
