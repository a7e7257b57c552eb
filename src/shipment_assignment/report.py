from __future__ import annotations

from typing import List

from .components import MatchResult


def format_score(value: float) -> str:
    """Whole numbers print without a fractional part (``6``, not ``6.0``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def render_report(result: MatchResult) -> str:
    lines: List[str] = [
        f"{entry.agent} to {entry.destination} for {format_score(entry.score)}"
        for entry in result.matches
    ]
    lines.append(f"Total: {format_score(result.total)}")
    return "\n".join(lines) + "\n"
