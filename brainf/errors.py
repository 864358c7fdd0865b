from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    POINTER_UNDERFLOW = "PointerUnderflow"
    POINTER_OVERFLOW = "PointerOverflow"
    VALUE_UNDERFLOW = "ValueUnderflow"
    VALUE_OVERFLOW = "ValueOverflow"
    INPUT_REQUIRED = "InputRequired"
    INPUT_INVALID = "InputInvalid"
    INPUT_LIMIT_EXCEEDED = "InputLimitExceeded"
    UNBALANCED_BRACKETS = "UnbalancedBrackets"
    STEP_LIMIT_EXCEEDED = "StepLimitExceeded"


class ExecutionError(RuntimeError):
    """Base class for every condition that halts a Brainf run.

    ``position`` and ``instruction`` locate the failing instruction in the
    program text, ``pointer`` is the data pointer at the time of the fault.
    Components below the engine raise without a position; the engine fills it
    in through :meth:`locate` before the error reaches the caller.
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        *,
        position: Optional[int] = None,
        instruction: Optional[str] = None,
        pointer: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.instruction = instruction
        self.pointer = pointer

    def locate(self, position: int, instruction: str, pointer: int) -> "ExecutionError":
        if self.position is None:
            self.position = position
        if self.instruction is None:
            self.instruction = instruction
        if self.pointer is None:
            self.pointer = pointer
        return self

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "position": self.position,
            "instruction": self.instruction,
            "pointer": self.pointer,
        }

    def __str__(self) -> str:
        details = []
        if self.position is not None:
            details.append(f"position {self.position}")
        if self.instruction is not None:
            details.append(f"instruction {self.instruction!r}")
        if self.pointer is not None:
            details.append(f"cell {self.pointer}")
        if not details:
            return self.message
        return "{} ({})".format(self.message, ", ".join(details))


class PointerUnderflow(ExecutionError):
    kind = ErrorKind.POINTER_UNDERFLOW


class PointerOverflow(ExecutionError):
    kind = ErrorKind.POINTER_OVERFLOW


class ValueUnderflow(ExecutionError):
    kind = ErrorKind.VALUE_UNDERFLOW


class ValueOverflow(ExecutionError):
    kind = ErrorKind.VALUE_OVERFLOW


class InputRequired(ExecutionError):
    kind = ErrorKind.INPUT_REQUIRED


class InputInvalid(ExecutionError):
    kind = ErrorKind.INPUT_INVALID


class InputLimitExceeded(ExecutionError):
    kind = ErrorKind.INPUT_LIMIT_EXCEEDED


class UnbalancedBrackets(ExecutionError):
    kind = ErrorKind.UNBALANCED_BRACKETS


class StepLimitExceeded(ExecutionError):
    """Raised when Brainf execution exceeds the configured step budget."""

    kind = ErrorKind.STEP_LIMIT_EXCEEDED


__all__ = [
    "ErrorKind",
    "ExecutionError",
    "InputInvalid",
    "InputLimitExceeded",
    "InputRequired",
    "PointerOverflow",
    "PointerUnderflow",
    "StepLimitExceeded",
    "UnbalancedBrackets",
    "ValueOverflow",
    "ValueUnderflow",
]
