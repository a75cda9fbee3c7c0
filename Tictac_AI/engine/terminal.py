"""Terminal-state detection: completed winning line or full board."""

try:
    from Board import EMPTY
except ImportError:
    from Tictac_AI.Board import EMPTY


def is_line_terminal(cells, line):
    """Return the owner of a fully occupied single-owner line, else None."""
    # A single cell is never a line.
    if len(line) <= 1:
        return None

    for index, nxt in zip(line, line[1:]):
        a = cells[index]
        b = cells[nxt]
        if a is EMPTY or b is EMPTY or a != b:
            return None
    return cells[line[0]]


def is_terminal(board):
    """
    Return (terminal, winner) for the board.

    The first winning line in enumeration order decides the winner. Without
    one, the game is over only when every cell is occupied (winner None).
    """
    cells = board.cells
    for line in board.lines:
        winner = is_line_terminal(cells, line)
        if winner is not None:
            return True, winner
    return board.is_all_occupied(), None
