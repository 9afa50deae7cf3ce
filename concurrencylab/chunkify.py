"""Splitting a sequence into consecutive chunks."""

from __future__ import annotations

from typing import Sequence, TypeVar

S = TypeVar("S", bound=Sequence)


def chunkify(items: S, chunk_size: int) -> list[S]:
    """Split ``items`` into slices of ``chunk_size``; the last may be shorter."""
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    return [items[start : start + chunk_size] for start in range(0, len(items), chunk_size)]