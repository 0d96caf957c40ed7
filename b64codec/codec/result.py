"""Decode result types.

A decode either succeeds with bytes or fails with an InvalidInputError. The two
outcomes are distinct types so an empty-but-valid decode is never mistaken for a
failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from b64codec.exceptions import InvalidInputError


@dataclass(frozen=True)
class Decoded:
    """Successful decode.

    Attributes:
        data: The decoded bytes.
    """

    data: bytes

    @property
    def ok(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True

    def unwrap(self) -> bytes:
        """Return the decoded bytes."""
        return self.data


@dataclass(frozen=True)
class DecodeFailure:
    """Failed decode.

    Attributes:
        error: Why the input was rejected.
    """

    error: InvalidInputError

    @property
    def ok(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False

    def unwrap(self) -> bytes:
        """Raise a fresh copy of the carried error.

        The stored error is never raised itself, so its traceback stays empty
        however often the failure is unwrapped.

        Raises:
            InvalidInputError: Always.
        """
        error = self.error
        raise InvalidInputError(
            error.reason,
            str(error),
            position=error.position,
            character=error.character,
        )


DecodeResult = Union[Decoded, DecodeFailure]
