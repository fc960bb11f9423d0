"""Shared utility functions."""

from __future__ import annotations


def format_size(size_bytes: int) -> str:
    """Format byte count to human-readable string."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_playtime(seconds: int) -> str:
    """Format a playtime in seconds, e.g. ``"2 hours 5 minutes"``."""
    if seconds < 60:
        return _plural(seconds, "second")
    if seconds < 3600:
        return _plural(seconds // 60, "minute")
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"
