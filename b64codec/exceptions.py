"""Exception classes for b64codec.

This module defines the exception types raised by the codec. The decoder itself
never raises for malformed text; it returns a failure result carrying an
InvalidInputError, which callers may raise via ``unwrap()``.
"""

from __future__ import annotations

from typing import Optional


class Base64Error(Exception):
    """Base exception class for all b64codec errors."""

    pass


class InvalidInputError(Base64Error):
    """Exception describing encoded text that cannot be decoded.

    Attributes:
        reason: Short machine-friendly reason ("invalid character" or
            "truncated group").
        position: Index of the offending character, if any.
        character: The offending character, if any.
    """

    INVALID_CHARACTER = "invalid character"
    TRUNCATED_GROUP = "truncated group"

    def __init__(
        self,
        reason: str,
        message: str,
        position: Optional[int] = None,
        character: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.position = position
        self.character = character

    @classmethod
    def invalid_character(cls, position: int, character: str) -> InvalidInputError:
        """Build the error for a character outside the accepted set.

        Args:
            position: Index of the character in the input.
            character: The rejected character.

        Returns:
            The error instance.
        """
        return cls(
            cls.INVALID_CHARACTER,
            f"invalid character {character!r} at position {position}",
            position=position,
            character=character,
        )

    @classmethod
    def truncated_group(cls, symbols: int) -> InvalidInputError:
        """Build the error for a final group holding a single symbol.

        Args:
            symbols: Total number of accepted symbols.

        Returns:
            The error instance.
        """
        return cls(
            cls.TRUNCATED_GROUP,
            f"truncated final group: {symbols} symbols leaves 6 bits, not a whole byte",
        )
