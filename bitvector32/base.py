from enum import Enum
from typing import Any, Dict, Optional


WORD_SIZE = 32
WORD_MASK = 0xFFFFFFFF

DEFAULT_RADIX = 36
MIN_RADIX = 2
MAX_RADIX = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ErrorKind(Enum):
    """Failure categories raised by bit vector operations."""
    INVALID_LENGTH = "invalid_length"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    LENGTH_MISMATCH = "length_mismatch"
    SHIFT_OVERFLOW = "shift_overflow"
    INVALID_RADIX = "invalid_radix"
    INVALID_ENCODING = "invalid_encoding"


class BitVectorError(Exception):
    """Base error. ``kind`` tells the failure category, ``context`` the offending values."""
    kind: ErrorKind = None

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.context: Dict[str, Any] = context

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": str(self),
            "context": dict(self.context)
        }


class InvalidLengthError(BitVectorError, ValueError):
    kind = ErrorKind.INVALID_LENGTH

    def __init__(self, length: Any):
        super().__init__(
            f"BitVector should be initialized with a non-negative integer length, {length!r} given.",
            length=length
        )
        self.length = length


class IndexOutOfRangeError(BitVectorError, IndexError):
    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, length: int):
        super().__init__(
            f"Index {index} is out of range [0, {length - 1}].",
            index=index,
            length=length
        )
        self.index = index
        self.length = length


class LengthMismatchError(BitVectorError, ValueError):
    kind = ErrorKind.LENGTH_MISMATCH

    def __init__(self, expected: int, actual: int, operation: Optional[str] = None):
        if operation:
            message = (f"BitVector {operation} can not be applied to vectors with different "
                       f"word counts, given {expected} and {actual}.")
        else:
            message = f"Expected {expected} words, got {actual}."
        super().__init__(message, expected=expected, actual=actual, operation=operation)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class ShiftOverflowError(BitVectorError, ValueError):
    kind = ErrorKind.SHIFT_OVERFLOW

    def __init__(self, shift: int, limit: int):
        super().__init__(
            f"BitVector can not be shifted by {shift}, allowed range is [0, {limit}].",
            shift=shift,
            limit=limit
        )
        self.shift = shift
        self.limit = limit


class InvalidRadixError(BitVectorError, ValueError):
    kind = ErrorKind.INVALID_RADIX

    def __init__(self, radix: Any):
        super().__init__(
            f"Radix must be an integer in [{MIN_RADIX}, {MAX_RADIX}], {radix!r} given.",
            radix=radix
        )
        self.radix = radix


class InvalidEncodingError(BitVectorError, ValueError):
    kind = ErrorKind.INVALID_ENCODING

    def __init__(self, token: str, position: int, radix: int):
        super().__init__(
            f"Token {token!r} at position {position} is not an unsigned 32-bit word in radix {radix}.",
            token=token,
            position=position,
            radix=radix
        )
        self.token = token
        self.position = position
        self.radix = radix
