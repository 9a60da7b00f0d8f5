"""Small general-purpose helpers."""

from __future__ import annotations

from typing import Hashable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V", bound=Hashable)


def reverse_map(mapping: Mapping[K, V]) -> dict[V, K]:
    """Swap keys and values; where values repeat, the last key seen wins."""
    return {value: key for key, value in mapping.items()}