"""Windowing helpers that keep rendering cost independent of list size."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def visible_range(
    item_count: int,
    viewport_size: float,
    scroll_offset: float,
    overscan: int = 0,
    item_size: float = 1.0,
) -> tuple[int, int]:
    """Compute the index range to render for a scrolled list.

    Runs in constant time regardless of item_count.

    Args:
        item_count: Number of items in the list
        viewport_size: Visible extent, in the same unit as item_size
        scroll_offset: Distance scrolled from the top of the list
        overscan: Extra items rendered on each side of the visible ones
        item_size: Estimated size of one item

    Returns:
        (range_start, range_end) with range_end exclusive
    """
    if item_count <= 0:
        return 0, 0
    if item_size <= 0:
        raise ValueError("item_size must be positive")

    offset = max(0.0, scroll_offset)
    first = min(item_count, math.floor(offset / item_size))
    last = min(item_count, math.ceil((offset + max(0.0, viewport_size)) / item_size))

    start = max(0, first - overscan)
    end = min(item_count, max(last, first) + overscan)
    return start, end


def slide_window(word_index: int, word_count: int, radius: int = 1) -> range:
    """Word slides that get live media, i.e. within `radius` of the cursor."""
    if word_count <= 0:
        return range(0)
    center = min(max(word_index, 0), word_count - 1)
    return range(max(0, center - radius), min(word_count, center + radius + 1))


@dataclass(frozen=True)
class ListWindow(Generic[T]):
    """Rendered slice of a longer list.

    Attributes:
        start: Index of the first rendered item
        end: Index one past the last rendered item
        total: Length of the full list
        items: The rendered items, list[start:end]
    """

    start: int
    end: int
    total: int
    items: tuple[T, ...]


def window(
    items: Sequence[T],
    viewport_size: float,
    scroll_offset: float,
    overscan: int = 0,
    item_size: float = 1.0,
) -> ListWindow[T]:
    """Slice the part of `items` that has to be rendered."""
    start, end = visible_range(len(items), viewport_size, scroll_offset, overscan, item_size)
    return ListWindow(start=start, end=end, total=len(items), items=tuple(items[start:end]))
