"""Result rendering: the user-facing notifier.

Three modes, picked from the root CLI flags: human lines (default), the
bare message (``--quiet``), or the serialized result (``--json``).
Failures show the short outcome message only; diagnostics stay in the log.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape

from vaultpush.output.console import render

if TYPE_CHECKING:
    from vaultpush.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Render *result* as text for stdout or stderr."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    error = result.error
    message = result.message if result.ok or error is None else error.message
    if settings.quiet:
        return message or ("" if result.ok else "Unknown error")

    if result.ok:
        head = f"[outcome.ok]OK[/]: [outcome.op]{escape(result.op)}[/]"
        if message:
            head += f" - {escape(message)}"
        lines = [head]
        lines += [
            f"  [outcome.key]{escape(key)}[/]: {escape(str(value))}"
            for key, value in result.data.items()
        ]
    else:
        lines = [
            f"[outcome.error]ERROR[/]: [outcome.op]{escape(result.op)}[/]"
            f" - {escape(message or 'Unknown error')}"
        ]
        if settings.verbose and error is not None:
            lines.append(f"  [outcome.key]code[/]: {escape(error.code)}")
    return render(lines)
