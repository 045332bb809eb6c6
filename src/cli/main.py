"""bobcat command line.

Why Typer here:
- One decorated function is the whole surface; the option parser is told to
  leave option-looking arguments alone so every argument is an operand.
- A bad `BOBCAT_*` setting is reported as a diagnostic line, not a traceback.
"""

from __future__ import annotations

from typing import List, Optional

import typer
from pydantic import ValidationError

from adapters.stream_sources import standard_input, standard_output
from cli.ui_components import build_error_console, print_config_error, print_failure
from core.config import AppSettings
from core.services.concat_pipeline import PipelineHooks, concatenate

DEFAULT_PROGRAM_NAME = "bobcat"

app = typer.Typer(add_completion=False)

_console = build_error_console()


def resolve_program_name(settings: AppSettings | None, ctx: typer.Context | None = None) -> str:
    """Diagnostic prefix: configured name, else the name we were invoked as."""

    if settings is not None and settings.program_name:
        return settings.program_name
    if ctx is not None:
        info_name = ctx.find_root().info_name
        if info_name:
            return info_name
    return DEFAULT_PROGRAM_NAME


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def cat(
    ctx: typer.Context,
    operands: Optional[List[str]] = typer.Argument(
        None,
        show_default=False,
        help="Files to concatenate; '-' reads standard input.",
    ),
) -> None:
    """Concatenate operands to standard output."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_config_error(_console, exc, resolve_program_name(None, ctx))
        raise typer.Exit(code=1) from exc
    program = resolve_program_name(settings, ctx)

    hooks = PipelineHooks(warning=lambda failure: print_failure(_console, failure, program))
    result = concatenate(
        operands or [],
        stdin=standard_input(),
        stdout=standard_output(),
        settings=settings,
        hooks=hooks,
    )
    raise typer.Exit(code=result.exit_code)


def run() -> None:
    app()
