from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .bf_interpreter import BrainfInterpreter
from .codec import DEFAULT_MAX_INPUT_OPS, IOMode
from .errors import ExecutionError
from .tape import DEFAULT_TAPE_CAPACITY
from .visualizer import trace

DEFAULT_MAX_PROGRAM_SIZE = 16384
DEFAULT_MAX_STEPS = 5_000_000

logger = logging.getLogger(__name__)


def _read_source(path: str, limit: int) -> str:
    source_path = Path(path)
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    text = source_path.read_text(encoding="utf-8")
    if len(text) > limit:
        logger.warning("Program truncated from %d to %d characters", len(text), limit)
        text = text[:limit]
    return text


def printable(text: str) -> str:
    """Escape lone surrogates, which character mode may produce."""
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _write_output(data: str) -> None:
    sys.stdout.write(printable(data))
    if not data.endswith("\n"):
        sys.stdout.write("\n")


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Brainf interpreter CLI")
    parser.add_argument("source", help="Path to Brainf program file")
    parser.add_argument(
        "-m",
        "--mode",
        type=IOMode.parse,
        default=IOMode.CHARACTER,
        help="I/O mode: 'char' for character codes, 'numeric' for integers (default: char)",
    )
    parser.add_argument(
        "--input",
        default="",
        help="Input text consumed by ',' (numeric mode: one integer or a comma separated list)",
    )
    parser.add_argument(
        "--tape-capacity",
        type=positive_int,
        default=DEFAULT_TAPE_CAPACITY,
        help=f"Number of tape cells (default: {DEFAULT_TAPE_CAPACITY})",
    )
    parser.add_argument(
        "--max-input",
        type=positive_int,
        default=DEFAULT_MAX_INPUT_OPS,
        help=f"Maximum number of ',' operations (default: {DEFAULT_MAX_INPUT_OPS})",
    )
    parser.add_argument(
        "--max-steps",
        type=positive_int,
        default=DEFAULT_MAX_STEPS,
        help="Step limit (default: 5,000,000)",
    )
    parser.add_argument(
        "--max-program-size",
        type=positive_int,
        default=DEFAULT_MAX_PROGRAM_SIZE,
        help=f"Program text beyond this many characters is ignored (default: {DEFAULT_MAX_PROGRAM_SIZE})",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Print the interpreter state after every instruction",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        program = _read_source(args.source, args.max_program_size)
    except (OSError, UnicodeDecodeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1

    interpreter = BrainfInterpreter(
        tape_capacity=args.tape_capacity,
        max_input_ops=args.max_input,
    )
    try:
        if args.trace:
            for _ in trace(
                program,
                args.mode,
                args.input,
                interpreter=interpreter,
                max_steps=args.max_steps,
            ):
                pass
            output = interpreter.output
        else:
            output = interpreter.run(program, args.mode, args.input, max_steps=args.max_steps)
    except ExecutionError as exc:
        if interpreter.output:
            _write_output(interpreter.output)
        print(f"Execution error: {exc}", file=sys.stderr)
        return 1

    _write_output(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
