import logging
import operator
from functools import lru_cache
from typing import List, Sequence

from .base import (
    DIGITS,
    MAX_RADIX,
    MIN_RADIX,
    WORD_MASK,
    InvalidEncodingError,
    InvalidRadixError,
)


logger = logging.getLogger(__name__)


class RadixCodec:
    """
    Fixed-width text encoding of 32-bit word arrays.

    Words are written most-significant first, each one zero-padded to the
    width of the largest word in the radix, separated by single spaces::

        >>> RadixCodec.encode([0xFFFFFFFF, 1], 16)
        '00000001 ffffffff'
    """
    SEPARATOR = " "

    @staticmethod
    def check_radix(radix) -> int:
        if isinstance(radix, bool):
            raise InvalidRadixError(radix)
        try:
            radix = operator.index(radix)
        except TypeError:
            raise InvalidRadixError(radix) from None
        if not MIN_RADIX <= radix <= MAX_RADIX:
            raise InvalidRadixError(radix)
        return radix

    @staticmethod
    @lru_cache(maxsize=None)
    def pad_width(radix: int) -> int:
        """Digits of 0xFFFFFFFF in ``radix``, equal to ceil(32 * log(2) / log(radix))."""
        width = 0
        value = WORD_MASK
        while value:
            value //= radix
            width += 1
        return width

    @staticmethod
    def format_word(word: int, radix: int) -> str:
        if word == 0:
            return "0"
        digits = []
        while word:
            word, remainder = divmod(word, radix)
            digits.append(DIGITS[remainder])
        return "".join(reversed(digits))

    @classmethod
    def encode(cls, words: Sequence[int], radix: int) -> str:
        """Render ``words`` (least-significant first) as padded tokens, most-significant first."""
        radix = cls.check_radix(radix)
        width = cls.pad_width(radix)
        tokens = [cls.format_word(word, radix).rjust(width, "0") for word in words]
        return cls.SEPARATOR.join(reversed(tokens))

    @classmethod
    def parse_token(cls, token: str, position: int, radix: int) -> int:
        valid = DIGITS[:radix]
        if not token or any(char not in valid for char in token.lower()):
            raise InvalidEncodingError(token, position, radix)
        value = int(token, radix)
        if value > WORD_MASK:
            raise InvalidEncodingError(token, position, radix)
        return value

    @classmethod
    def decode(cls, text: str, radix: int) -> List[int]:
        """Recover the word array (least-significant first) from encoded text."""
        radix = cls.check_radix(radix)
        if not isinstance(text, str):
            raise TypeError(f"Encoded text must be a str, {type(text).__name__} given")
        if text == "":
            return []

        try:
            tokens = text.split(cls.SEPARATOR)
            words = [cls.parse_token(token, position, radix) for position, token in enumerate(tokens)]
        except InvalidEncodingError as e:
            logger.error(f"Failed to decode bit vector text: {e}")
            raise

        words.reverse()
        logger.debug(f"Decoded {len(words)} words in radix {radix}")
        return words
