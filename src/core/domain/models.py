"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Failures are values, not console side effects: the dispatcher returns them
  and the CLI decides how to render them.
- Validation and serialization come for free (`model_dump`) for callers that
  want to inspect a run programmatically.

Note:
- These models describe *what* happened to each operand, not *how* bytes
  moved.
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


STDIN_OPERAND = "-"


class FailureKind(str, Enum):
    """Stage at which an operand failed."""

    OPEN = "open"
    READ = "read"
    WRITE = "write"
    CLOSE = "close"


class OperandFailure(BaseModel):
    """Tagged error for a single operand.

    Carries everything the top-level caller needs to print a diagnostic:
    the failing stage, the display name and the system error description.
    """

    model_config = ConfigDict(frozen=True)

    kind: FailureKind = Field(
        ...,
        description="Stage that failed (open/read/write/close).",
    )
    operand: str = Field(
        ...,
        description="Display name of the operand ('stdin' or the path).",
    )
    error_code: int | None = Field(
        default=None,
        description="errno of the underlying OSError, when the OS provided one.",
    )
    reason: str = Field(
        ...,
        min_length=1,
        description="Human readable system error description.",
    )

    @classmethod
    def from_os_error(cls, kind: FailureKind, operand: str, exc: OSError) -> "OperandFailure":
        if exc.errno:
            reason = os.strerror(exc.errno)
        else:
            reason = exc.strerror or str(exc) or exc.__class__.__name__
        return cls(kind=kind, operand=operand, error_code=exc.errno or None, reason=reason)

    def describe(self, program: str) -> str:
        """Render the `<program>: <operand>: <reason>` diagnostic line."""

        return f"{program}: {self.operand}: {self.reason}"


class ConcatResult(BaseModel):
    """Aggregate status of one invocation.

    Failure is monotonic: `record` only ever appends, so once a run has
    failed it stays failed.
    """

    operands: list[str] = Field(
        default_factory=list,
        description="Operands actually processed, in order (implicit '-' included).",
    )
    failures: list[OperandFailure] = Field(
        default_factory=list,
        description="Failures in the order they occurred.",
    )
    bytes_written: int = Field(
        default=0,
        ge=0,
        description="Total bytes delivered to the output stream.",
    )

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def record(self, failure: OperandFailure) -> None:
        self.failures.append(failure)
