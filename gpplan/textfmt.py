"""Small text formatting helpers."""

from __future__ import annotations

from typing import Any, TextIO

__all__ = ["dot_log", "format_fixed"]


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def dot_log(stream: TextIO, *args: Any) -> None:
    """Write each value followed by a comma, then end the line."""
    stream.write("".join(f"{_to_text(arg)}," for arg in args) + "\n")


def format_fixed(value: float, precision: int = 6) -> str:
    """Format a number in fixed-point notation with ``precision`` decimals."""
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")
    return f"{value:.{precision}f}"