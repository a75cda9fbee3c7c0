"""Winning-line enumeration for a (size, run_length) board geometry."""

from functools import lru_cache
from typing import Optional, Tuple


# A step is the (x, y) increase from one cell of a line to the next.
WINNING_STEPS = (
    (1, 0),   # horizontal
    (0, 1),   # vertical
    (1, 1),   # diagonal, row increasing
    (1, -1),  # diagonal, row decreasing
)


def step_indices(start: int, step_x: int, step_y: int, size: int, run_length: int) -> Optional[Tuple[int, ...]]:
    """
    Return the run_length flat indices reached from start by (step_x, step_y),
    or None when the run leaves the grid. Flat arithmetic would silently wrap
    from the end of one row onto the next, so the column displacement is
    checked separately from the index bounds.
    """
    if start % size + step_x * (run_length - 1) > size - 1:
        return None

    total = size * size
    indices = []
    for i in range(run_length):
        index = start + step_x * i + step_y * i * size
        if not 0 <= index < total:
            return None
        indices.append(index)
    return tuple(indices)


# Process-wide memo; safe to share because the cached value is a tuple of tuples.
@lru_cache(maxsize=None)
def winning_lines(size: int, run_length: int) -> Tuple[Tuple[int, ...], ...]:
    """
    Every winning line for the geometry, ordered by start cell then step.

    Overlapping lines are kept: a row of 4 with run_length 3 yields two lines.
    The result is immutable and shared by every board of the same geometry.
    """
    lines = []
    for start in range(size * size):
        for step_x, step_y in WINNING_STEPS:
            line = step_indices(start, step_x, step_y, size, run_length)
            if line is not None:
                lines.append(line)
    return tuple(lines)
