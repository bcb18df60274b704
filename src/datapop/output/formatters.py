"""Output mode selection for ServiceResult.

JSON mode serializes the result as-is; quiet mode prints ids; the default
mode renders with Rich.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from datapop.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from datapop.services.result import ServiceResult


def format_result(result: ServiceResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: Return indented JSON.
        quiet: Return ids only (ignored in JSON mode).
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if quiet:
        return render_quiet(result)
    return render_result(result)
