from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .bf_interpreter import BrainfInterpreter, ExecutionState
from .codec import IOMode


def format_state(state: ExecutionState, code: str) -> str:
    lines: List[str] = []
    cmd_display = state.command if state.command is not None else "(end)"
    lines.append(
        f"step={state.step} pc={state.pc}/{state.code_length} command={cmd_display!r} pointer={state.pointer}"
    )
    if state.output:
        lines.append(f"output={state.output!r}")
    tape_parts: List[str] = []
    for idx, value in enumerate(state.tape):
        absolute = state.tape_start + idx
        cell_repr = f"{absolute}:{value:03}"
        if absolute == state.pointer:
            tape_parts.append(f"[{cell_repr}]")
        else:
            tape_parts.append(f" {cell_repr} ")
    lines.append("tape=" + " ".join(tape_parts))
    code_window = _format_code_window(code, state.pc)
    lines.append(f"code={code_window}")
    return "\n".join(lines)


def _format_code_window(code: str, pc: int, window: int = 16) -> str:
    if not code:
        return "(empty)"
    start = max(0, pc - window)
    end = min(len(code), pc + window + 1)
    pieces: List[str] = []
    for index in range(start, end):
        ch = code[index]
        if index == pc:
            pieces.append(f"[{ch}]")
        else:
            pieces.append(ch)
    if pc >= len(code):
        pieces.append("[END]")
    return "".join(pieces)


def trace(
    code: str,
    mode: IOMode = IOMode.CHARACTER,
    input_text: str = "",
    *,
    interpreter: Optional[BrainfInterpreter] = None,
    max_steps: Optional[int] = None,
    tape_window: int = 10,
    emit: Callable[[str], None] = print,
) -> Iterator[ExecutionState]:
    """Step through ``code``, passing a rendering of every state to ``emit``.

    Yields the states as well so callers can inspect them; errors from the
    run propagate after the last successful state has been emitted.
    """
    engine = interpreter or BrainfInterpreter()
    for state in engine.step(
        code,
        mode,
        input_text,
        max_steps=max_steps,
        tape_window=tape_window,
    ):
        emit("-" * 40)
        emit(format_state(state, code))
        yield state


__all__ = ["format_state", "trace"]
