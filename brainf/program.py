from __future__ import annotations

from typing import Dict

from .errors import UnbalancedBrackets


class InstructionStream:
    """Immutable program text with on-demand bracket matching.

    Matches are located by scanning the text when a bracket executes, not by a
    pre-pass, so a malformed program only fails once the unbalanced bracket is
    actually taken. Successful scans are remembered for the rest of the run.
    """

    def __init__(self, code: str) -> None:
        self._code = code
        self._matches: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._code)

    @property
    def code(self) -> str:
        return self._code

    def char_at(self, index: int) -> str:
        return self._code[index]

    def match_forward(self, index: int) -> int:
        """Return the position of the ``]`` closing the ``[`` at ``index``."""
        if index in self._matches:
            return self._matches[index]
        depth = 0
        cursor = index + 1
        while cursor < len(self._code):
            char = self._code[cursor]
            if char == "[":
                depth += 1
            elif char == "]":
                if depth == 0:
                    self._remember(index, cursor)
                    return cursor
                depth -= 1
            cursor += 1
        raise UnbalancedBrackets(
            "No matching ']' for '['", position=index, instruction="["
        )

    def match_backward(self, index: int) -> int:
        """Return the position of the ``[`` opening the ``]`` at ``index``."""
        if index in self._matches:
            return self._matches[index]
        depth = 0
        cursor = index - 1
        while cursor >= 0:
            char = self._code[cursor]
            if char == "]":
                depth += 1
            elif char == "[":
                if depth == 0:
                    self._remember(cursor, index)
                    return cursor
                depth -= 1
            cursor -= 1
        raise UnbalancedBrackets(
            "No matching '[' for ']'", position=index, instruction="]"
        )

    def _remember(self, start: int, end: int) -> None:
        self._matches[start] = end
        self._matches[end] = start


__all__ = ["InstructionStream"]
