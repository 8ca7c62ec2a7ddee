"""Human/JSON output helpers for the CLI.

Resolutions render as indented key-value pairs for humans or as the
serialized :class:`Resolution` model for machines (--json).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envscope.domain.models import Resolution


def format_resolution(resolution: Resolution, *, json_output: bool = False) -> str:
    """Format a Resolution for display.

    Args:
        resolution: The lookup outcome to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return resolution.model_dump_json(indent=2)
    lines = [f"{resolution.origin.value.upper()}: {resolution.key}"]
    if resolution.raw is not None:
        lines.append(f"  raw: {resolution.raw}")
    if resolution.value is not None:
        lines.append(f"  value: {_json.dumps(resolution.value)}")
    lines.append(f"  candidates: {', '.join(resolution.candidates) or '-'}")
    return "\n".join(lines)


def format_candidates(keys: tuple[str, ...], *, json_output: bool = False) -> str:
    """One key per line, or a JSON list."""
    if json_output:
        return _json.dumps(list(keys), indent=2)
    return "\n".join(keys)
