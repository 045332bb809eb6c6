"""CLI UI components (Rich).

Why separate components:
- bobcat's standard output carries raw operand bytes, so everything Rich
  prints goes to a dedicated stderr console built here.
- Diagnostic wording lives in one place for operand failures and bad
  configuration alike.
"""

from __future__ import annotations

from pydantic import ValidationError
from rich.console import Console
from rich.text import Text

from core.domain.models import OperandFailure


def build_error_console() -> Console:
    """Console for diagnostics: stderr, no highlighting, one line per message."""

    return Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def print_failure(console: Console, failure: OperandFailure, program: str) -> None:
    # Text is never parsed for markup, so operand names print verbatim.
    console.print(Text(failure.describe(program)))


def print_config_error(console: Console, exc: ValidationError, program: str) -> None:
    """One `<program>: <setting>: <problem>` line per invalid setting."""

    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "settings"
        console.print(Text(f"{program}: {field}: {error.get('msg', 'invalid value')}"))
