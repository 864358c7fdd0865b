from .bf_interpreter import (
    COMPLETION_MARKER,
    BrainfInterpreter,
    ExecutionState,
    RunResult,
    execute,
)
from .codec import IOMode
from .errors import (
    ErrorKind,
    ExecutionError,
    InputInvalid,
    InputLimitExceeded,
    InputRequired,
    PointerOverflow,
    PointerUnderflow,
    StepLimitExceeded,
    UnbalancedBrackets,
    ValueOverflow,
    ValueUnderflow,
)
from .tape import Tape

__all__ = [
    "BrainfInterpreter",
    "COMPLETION_MARKER",
    "ErrorKind",
    "ExecutionError",
    "ExecutionState",
    "IOMode",
    "InputInvalid",
    "InputLimitExceeded",
    "InputRequired",
    "PointerOverflow",
    "PointerUnderflow",
    "RunResult",
    "StepLimitExceeded",
    "Tape",
    "UnbalancedBrackets",
    "ValueOverflow",
    "ValueUnderflow",
    "execute",
]
