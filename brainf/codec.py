from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InputInvalid, InputLimitExceeded, InputRequired
from .tape import INT32_MAX, INT32_MIN

DEFAULT_MAX_INPUT_OPS = 32
NUMERIC_SEPARATOR = ", "
UNICODE_CODE_POINTS = 0x110000

_WHITESPACE = re.compile(r"\s")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class IOMode(Enum):
    CHARACTER = "character"
    NUMERIC = "numeric"

    @classmethod
    def parse(cls, value: str) -> "IOMode":
        normalized = value.strip().lower()
        if normalized in {"character", "char", "ascii"}:
            return cls.CHARACTER
        if normalized in {"numeric", "number", "int"}:
            return cls.NUMERIC
        raise ValueError(f"Unknown I/O mode: {value!r}")


class CharacterCodec:
    """Cells are character codes; each ``,`` reads the next input character."""

    def encode(self, value: int) -> str:
        # Out-of-range values wrap into the code point space; no validity check.
        return chr(value % UNICODE_CODE_POINTS)

    def decode(self, text: str, index: int) -> int:
        if not text:
            raise InputRequired("Input is required for ','")
        if index >= len(text):
            raise InputInvalid(f"Input has no character at index {index}")
        return ord(text[index])


@dataclass
class NumericCodec:
    """Cells are signed integers written in decimal.

    Input is either a single integer, read again by every ``,``, or a comma
    separated list consumed one entry per ``,``. Whitespace anywhere in the
    input is ignored.
    """

    cell_min: int = INT32_MIN
    cell_max: int = INT32_MAX

    def encode(self, value: int) -> str:
        return f"{value}{NUMERIC_SEPARATOR}"

    def decode(self, text: str, index: int) -> int:
        if not text:
            raise InputRequired("Input is required for ','")
        stripped = _WHITESPACE.sub("", text)
        # Only the list form applies once a comma is present; the whole text
        # is never parsed as one integer in that case.
        if "," in stripped:
            parts = stripped.split(",")
            if index >= len(parts):
                raise InputInvalid(f"Input has no number at index {index}")
            return self._parse(parts[index])
        return self._parse(stripped)

    def _parse(self, token: str) -> int:
        if not _INTEGER.fullmatch(token):
            raise InputInvalid(f"Input {token!r} is not an integer")
        value = int(token)
        if not self.cell_min <= value <= self.cell_max:
            raise InputInvalid(
                f"Input {value} is outside the range {self.cell_min}..{self.cell_max}"
            )
        return value


Codec = Union[CharacterCodec, NumericCodec]


def codec_for(mode: IOMode, cell_min: int = INT32_MIN, cell_max: int = INT32_MAX) -> Codec:
    if mode is IOMode.CHARACTER:
        return CharacterCodec()
    return NumericCodec(cell_min=cell_min, cell_max=cell_max)


@dataclass
class InputCursor:
    """Counts ``,`` operations and stops the run once ``limit`` is reached."""

    limit: int = DEFAULT_MAX_INPUT_OPS
    consumed: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("Input limit must be at least 1")

    @property
    def index(self) -> int:
        return self.consumed

    def consume(self) -> None:
        self.consumed += 1
        if self.consumed >= self.limit:
            raise InputLimitExceeded(f"Input was read {self.limit} times, the maximum allowed")


__all__ = [
    "CharacterCodec",
    "Codec",
    "DEFAULT_MAX_INPUT_OPS",
    "IOMode",
    "InputCursor",
    "NUMERIC_SEPARATOR",
    "NumericCodec",
    "codec_for",
]
