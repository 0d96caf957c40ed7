"""Base64 alphabets and the decode lookup table.

Both alphabets share the symbols for values 0-61 (A-Z, a-z, 0-9) and differ only
in the last two: ``+`` and ``/`` for the standard alphabet, ``-`` and ``_`` for the
URL-safe one (RFC 4648 sections 4 and 5).
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Tuple

PAD = "="
WHITESPACE = "\n\r \t"

# Markers stored in DECODE_TABLE for characters that are not symbols.
SKIP = -1
INVALID = -2

_COMMON = string.ascii_uppercase + string.ascii_lowercase + string.digits


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of 64 symbols mapping 6-bit values to characters.

    Attributes:
        name: Identifier of the alphabet.
        symbols: The 64 symbols, indexed by 6-bit value.
    """

    name: str
    symbols: str

    def __post_init__(self) -> None:
        if len(self.symbols) != 64:
            raise ValueError(f"alphabet needs 64 symbols, got {len(self.symbols)}")
        if len(set(self.symbols)) != 64:
            raise ValueError("alphabet symbols must be distinct")
        for symbol in self.symbols:
            if not symbol.isascii() or not symbol.isprintable():
                raise ValueError(f"alphabet symbol {symbol!r} is not printable ASCII")
            if symbol == PAD or symbol in WHITESPACE:
                raise ValueError(f"alphabet symbol {symbol!r} is reserved")

    def symbol(self, value: int) -> str:
        """Map a 6-bit value to its symbol.

        Args:
            value: Integer in the range 0-63.

        Returns:
            The symbol for the value.

        Raises:
            ValueError: If value is outside 0-63.
        """
        if not 0 <= value < 64:
            raise ValueError(f"6-bit value out of range: {value}")
        return self.symbols[value]

    @staticmethod
    def by_name(name: str) -> Alphabet:
        """Resolve an alphabet by name.

        Args:
            name: "standard" or "url_safe" (also "urlsafe" and "url"),
                case-insensitive.

        Returns:
            The matching alphabet.

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return _BY_NAME[name.strip().lower().replace("-", "_")]
        except KeyError:
            raise ValueError(f"unknown alphabet: {name!r}") from None


STANDARD = Alphabet("standard", _COMMON + "+/")
URL_SAFE = Alphabet("url_safe", _COMMON + "-_")

_BY_NAME: Dict[str, Alphabet] = {
    "standard": STANDARD,
    "url_safe": URL_SAFE,
    "urlsafe": URL_SAFE,
    "url": URL_SAFE,
}


def _build_decode_table() -> Tuple[int, ...]:
    table = [INVALID] * 256
    for alphabet in (STANDARD, URL_SAFE):
        for value, symbol in enumerate(alphabet.symbols):
            table[ord(symbol)] = value
    for char in WHITESPACE:
        table[ord(char)] = SKIP
    return tuple(table)


# Indexed by character code; both alphabets decode through the same table.
DECODE_TABLE: Tuple[int, ...] = _build_decode_table()
