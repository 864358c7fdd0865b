from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field, field_validator

from brainf.bf_interpreter import execute
from brainf.cli import DEFAULT_MAX_PROGRAM_SIZE, DEFAULT_MAX_STEPS, printable
from brainf.codec import DEFAULT_MAX_INPUT_OPS, IOMode
from brainf.tape import DEFAULT_TAPE_CAPACITY

logger = logging.getLogger(__name__)

MAX_TAPE_CAPACITY = 1_048_576
MAX_INPUT_OPS = 1024


class ExecuteRequest(BaseModel):
    program: str
    mode: str = IOMode.CHARACTER.value
    input: str = ""
    tape_capacity: int = Field(default=DEFAULT_TAPE_CAPACITY, ge=1, le=MAX_TAPE_CAPACITY)
    max_input_ops: int = Field(default=DEFAULT_MAX_INPUT_OPS, ge=1, le=MAX_INPUT_OPS)
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1, le=DEFAULT_MAX_STEPS)

    @field_validator("mode")
    @classmethod
    def validate_mode(cls, value: str) -> str:
        return IOMode.parse(value).value


class ErrorPayload(BaseModel):
    kind: str
    message: str
    position: Optional[int]
    instruction: Optional[str]
    pointer: Optional[int]


class ExecuteResponse(BaseModel):
    ok: bool
    output: str
    steps: int
    truncated: bool
    error: Optional[ErrorPayload] = None


def create_app(*, max_program_size: int = DEFAULT_MAX_PROGRAM_SIZE) -> FastAPI:
    app = FastAPI(title="Brainf API", version="0.1.0")

    @app.get("/api/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/api/execute", response_model=ExecuteResponse)
    def execute_program(payload: ExecuteRequest) -> ExecuteResponse:
        program = payload.program
        truncated = len(program) > max_program_size
        if truncated:
            logger.warning("Program truncated from %d to %d characters", len(program), max_program_size)
            program = program[:max_program_size]

        result = execute(
            program,
            IOMode(payload.mode),
            payload.input,
            tape_capacity=payload.tape_capacity,
            max_input_ops=payload.max_input_ops,
            max_steps=payload.max_steps,
        )
        error = ErrorPayload(**result.error.to_dict()) if result.error is not None else None
        return ExecuteResponse(
            ok=result.ok,
            output=printable(result.output),
            steps=result.steps,
            truncated=truncated,
            error=error,
        )

    return app


__all__ = ["ErrorPayload", "ExecuteRequest", "ExecuteResponse", "create_app"]
