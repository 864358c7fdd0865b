from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from brainf.cli import DEFAULT_MAX_PROGRAM_SIZE, positive_int

from .app import create_app


try:
    import uvicorn
except ModuleNotFoundError as exc:  # pragma: no cover - import failure path
    uvicorn = None
    _IMPORT_ERROR = exc
else:
    _IMPORT_ERROR = None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the Brainf HTTP API server")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    parser.add_argument(
        "--max-program-size",
        type=positive_int,
        default=DEFAULT_MAX_PROGRAM_SIZE,
        help=f"Program text beyond this many characters is ignored (default: {DEFAULT_MAX_PROGRAM_SIZE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if uvicorn is None:
        message = "uvicorn is required to run the Brainf HTTP API server"
        if _IMPORT_ERROR is not None:
            message = f"{message}: {_IMPORT_ERROR}"
        print(message, file=sys.stderr)
        return 1

    app = create_app(max_program_size=args.max_program_size)
    uvicorn.run(app, host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
