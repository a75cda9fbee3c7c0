"""Board state container for N-in-a-row on a square grid (flat cell indices)."""

from contextlib import contextmanager

try:
    from engine.lines import winning_lines
except ImportError:
    from Tictac_AI.engine.lines import winning_lines


# Unoccupied cell; also what out-of-range reads return.
EMPTY = None


class InvalidConfiguration(ValueError):
    """Raised when size/run_length cannot describe a playable board."""


class Board:
    def __init__(self, size=4, run_length=4):
        if not isinstance(size, int) or not isinstance(run_length, int):
            raise InvalidConfiguration("size and run_length must be integers")
        if size <= 0 or run_length <= 0:
            raise InvalidConfiguration(f"size and run_length must be positive (got {size}, {run_length})")
        if run_length > size:
            raise InvalidConfiguration(f"run_length {run_length} exceeds board size {size}")

        self.size = size
        self.run_length = run_length
        # Store cells as EMPTY or a non-negative player id, indexed y * size + x
        self.cells = [EMPTY] * (size * size)
        self.lines = winning_lines(size, run_length)

    def reset(self):
        """Clear every cell; the line set depends only on the geometry and is kept."""
        for i in range(len(self.cells)):
            self.cells[i] = EMPTY

    def contains(self, index):
        return isinstance(index, int) and 0 <= index < len(self.cells)

    def index_of(self, x, y):
        """Flat index of column x, row y, or None when off the board."""
        if 0 <= x < self.size and 0 <= y < self.size:
            return y * self.size + x
        return None

    def coords(self, index):
        return index % self.size, index // self.size

    def get(self, index):
        if not self.contains(index):
            return EMPTY
        return self.cells[index]

    def is_empty(self, index):
        return self.contains(index) and self.cells[index] is EMPTY

    def set(self, index, player):
        """Place a piece; return False without mutation if out of range or occupied."""
        if not isinstance(player, int) or isinstance(player, bool) or player < 0:
            raise ValueError("player must be a non-negative integer id")
        if not self.is_empty(index):
            return False
        self.cells[index] = player
        return True

    def empty_cells(self):
        return [i for i, v in enumerate(self.cells) if v is EMPTY]

    def is_all_empty(self):
        return all(v is EMPTY for v in self.cells)

    def is_all_occupied(self):
        return all(v is not EMPTY for v in self.cells)

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.run_length = self.run_length
        new_board.cells = self.cells[:]
        new_board.lines = self.lines
        return new_board

    # Search-only mutators: no occupancy check, caller restores the cell.
    def _push_stone(self, index, player):
        self.cells[index] = player

    def _pop_stone(self, index):
        self.cells[index] = EMPTY

    @contextmanager
    def simulate(self, index, player):
        """Temporarily occupy an empty cell, restoring it on every exit path."""
        self._push_stone(index, player)
        try:
            yield
        finally:
            self._pop_stone(index)

    def state_string(self, symbols=None):
        """Text grid, row 0 on top; symbols maps player id -> display string."""
        symbols = symbols or {}
        width = max([1] + [len(str(s)) for s in symbols.values()])
        rows = []
        for y in range(self.size):
            row = []
            for x in range(self.size):
                v = self.cells[y * self.size + x]
                mark = "." if v is EMPTY else str(symbols.get(v, v))
                row.append(mark.center(width))
            rows.append(" ".join(row))
        return "\n".join(rows)
