"""Conversion of sigproc-style packed angles to sexagesimal strings."""

from __future__ import annotations


def parse_angle_sigproc(sigproc: float) -> tuple[int, int, int, float]:
    """Split a packed angle such as 123456.78 into (sign, 12, 34, 56.78)."""
    sign = -1 if sigproc < 0 else 1
    magnitude = abs(sigproc)
    first = int(magnitude / 1e4)
    second = int((magnitude - first * 1e4) / 1e2)
    third = magnitude - first * 1e4 - second * 1e2
    return sign, first, second, third


def _format_parts(first: int, second: int, third: float) -> str:
    return f"{first:02d}:{second:02d}:{third:02.2f}"


def sigproc_to_hhmmss(sigproc: float) -> str:
    """Format a packed HHMMSS.ss value as 'HH:MM:SS.ss'."""
    _, hours, minutes, seconds = parse_angle_sigproc(sigproc)
    return _format_parts(hours, minutes, seconds)


def sigproc_to_ddmmss(sigproc: float) -> str:
    """Format a packed DDMMSS.ss value as '[-]DD:MM:SS.ss'."""
    sign, degrees, minutes, seconds = parse_angle_sigproc(sigproc)
    prefix = "-" if sign < 0 else ""
    return prefix + _format_parts(degrees, minutes, seconds)