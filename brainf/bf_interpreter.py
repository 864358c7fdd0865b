from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .codec import DEFAULT_MAX_INPUT_OPS, Codec, InputCursor, IOMode, codec_for
from .errors import ExecutionError, StepLimitExceeded
from .program import InstructionStream
from .tape import DEFAULT_TAPE_CAPACITY, INT32_MAX, INT32_MIN, Tape

logger = logging.getLogger(__name__)

COMPLETION_MARKER = "\nExecution complete"


@dataclass
class ExecutionState:
    step: int
    pc: int
    command: Optional[str]
    pointer: int
    tape_start: int
    tape: List[int]
    output: str
    code_length: int


@dataclass
class RunResult:
    """Outcome of :func:`execute`.

    On failure ``output`` still holds everything printed before the fault,
    without the completion marker.
    """

    output: str
    error: Optional[ExecutionError] = None
    steps: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BrainfInterpreter:
    tape_capacity: int = DEFAULT_TAPE_CAPACITY
    max_input_ops: int = DEFAULT_MAX_INPUT_OPS
    cell_min: int = INT32_MIN
    cell_max: int = INT32_MAX

    tape: Tape = field(init=False, repr=False)
    output_buffer: List[str] = field(init=False, repr=False)
    steps: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_input_ops < 1:
            raise ValueError("max_input_ops must be at least 1")
        self.reset()

    def reset(self) -> None:
        self.tape = Tape(self.tape_capacity, self.cell_min, self.cell_max)
        self.output_buffer = []
        self.steps = 0

    @property
    def pointer(self) -> int:
        return self.tape.pointer

    @property
    def output(self) -> str:
        return "".join(self.output_buffer)

    def run(
        self,
        code: str,
        mode: IOMode = IOMode.CHARACTER,
        input_text: str = "",
        max_steps: Optional[int] = None,
    ) -> str:
        for _ in self._execute(code, mode, input_text, max_steps):
            pass
        return self.output

    def step(
        self,
        code: str,
        mode: IOMode = IOMode.CHARACTER,
        input_text: str = "",
        max_steps: Optional[int] = None,
        tape_window: int = 10,
    ) -> Iterator[ExecutionState]:
        code_length = len(code)
        for pc, command in self._execute(code, mode, input_text, max_steps):
            yield self._snapshot(pc, command, code_length, tape_window)

        # Final snapshot indicating completion
        yield self._snapshot(code_length, None, code_length, tape_window)

    def _execute(
        self,
        code: str,
        mode: IOMode,
        input_text: str,
        max_steps: Optional[int],
    ) -> Iterator[Tuple[int, str]]:
        self.reset()
        stream = InstructionStream(code)
        codec = codec_for(mode, self.cell_min, self.cell_max)
        cursor = InputCursor(self.max_input_ops)
        code_length = len(stream)
        pc = 0
        logger.debug(
            "Starting run: %d chars, mode=%s, tape=%d, max input=%d",
            code_length,
            mode.value,
            self.tape_capacity,
            self.max_input_ops,
        )

        while pc < code_length:
            command = stream.char_at(pc)
            try:
                if max_steps is not None and self.steps >= max_steps:
                    raise StepLimitExceeded(
                        f"Brainf program exceeded the step limit of {max_steps}"
                    )
                pc = self._execute_instruction(command, pc, stream, codec, cursor, input_text)
            except ExecutionError as exc:
                exc.locate(pc, command, self.tape.pointer)
                logger.info("Run halted with %s: %s", exc.kind.value, exc)
                raise
            self.steps += 1
            yield pc, command

        self.output_buffer.append(COMPLETION_MARKER)
        logger.debug("Run completed after %d steps", self.steps)

    def _execute_instruction(
        self,
        command: str,
        pc: int,
        stream: InstructionStream,
        codec: Codec,
        cursor: InputCursor,
        input_text: str,
    ) -> int:
        new_pc = pc + 1
        if command == ">":
            self.tape.move_right()
        elif command == "<":
            self.tape.move_left()
        elif command == "+":
            self.tape.increment()
        elif command == "-":
            self.tape.decrement()
        elif command == ".":
            self.output_buffer.append(codec.encode(self.tape.read()))
        elif command == ",":
            self.tape.write(codec.decode(input_text, cursor.index))
            cursor.consume()
        elif command == "[":
            if self.tape.read() == 0:
                new_pc = stream.match_forward(pc) + 1
        elif command == "]":
            if self.tape.read() != 0:
                new_pc = stream.match_backward(pc) + 1
        return new_pc

    def _snapshot(
        self,
        pc: int,
        command: Optional[str],
        code_length: int,
        tape_window: int,
    ) -> ExecutionState:
        start, tape_view = self.tape.window(tape_window)
        return ExecutionState(
            step=self.steps,
            pc=pc,
            command=command,
            pointer=self.tape.pointer,
            tape_start=start,
            tape=tape_view,
            output=self.output,
            code_length=code_length,
        )


def execute(
    program: str,
    mode: IOMode = IOMode.CHARACTER,
    input_text: str = "",
    tape_capacity: int = DEFAULT_TAPE_CAPACITY,
    max_input_ops: int = DEFAULT_MAX_INPUT_OPS,
    max_steps: Optional[int] = None,
) -> RunResult:
    """Run ``program`` once and report the outcome as a value instead of raising."""
    interpreter = BrainfInterpreter(tape_capacity=tape_capacity, max_input_ops=max_input_ops)
    try:
        output = interpreter.run(program, mode, input_text, max_steps=max_steps)
    except ExecutionError as exc:
        return RunResult(output=interpreter.output, error=exc, steps=interpreter.steps)
    return RunResult(output=output, steps=interpreter.steps)


__all__ = [
    "BrainfInterpreter",
    "COMPLETION_MARKER",
    "ExecutionState",
    "RunResult",
    "execute",
]
