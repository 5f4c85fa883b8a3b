"""Circular rotation of sequences in place."""

from __future__ import annotations

from typing import Any, MutableSequence


def _effective_positions(items: MutableSequence[Any], positions: int) -> int:
    if positions < 0:
        raise ValueError("positions must be non-negative")
    return positions % len(items)


def left_rotate(items: MutableSequence[Any], positions: int) -> None:
    """Rotate ``items`` left by ``positions``, wrapping the front to the back."""
    if not items or positions == 0:
        if positions < 0:
            raise ValueError("positions must be non-negative")
        return
    shift = _effective_positions(items, positions)
    items[:] = list(items[shift:]) + list(items[:shift])


def right_rotate(items: MutableSequence[Any], positions: int) -> None:
    """Rotate ``items`` right by ``positions``, wrapping the back to the front."""
    if not items or positions == 0:
        if positions < 0:
            raise ValueError("positions must be non-negative")
        return
    shift = _effective_positions(items, positions)
    split = len(items) - shift
    items[:] = list(items[split:]) + list(items[:split])