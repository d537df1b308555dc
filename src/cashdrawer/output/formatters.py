"""Rich/JSON output dispatch.

The CLI renders ServiceResult for people (Rich, colors) or for machines
(--json). :func:`format_result` picks the mode from OutputSettings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from cashdrawer.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from cashdrawer.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags taken from the CLI."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    settings: OutputSettings | None = None,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Shorthand for ``OutputSettings(json_output=True)``;
            ignored when *settings* is given.
        settings: Full output settings.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
