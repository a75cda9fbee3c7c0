"""Move validation for players feeding moves into the game loop."""


class MoveRejected(ValueError):
    """A proposed move cannot be applied to the current board."""


def check_move(move, board):
    """
    Validate a proposed cell index against bounds and occupancy.
    Raises MoveRejected on invalid moves.
    """
    if move is None:
        raise MoveRejected("No move proposed")
    if not isinstance(move, int) or isinstance(move, bool):
        raise MoveRejected(f"Move must be a cell index, got {move!r}")
    if not board.contains(move):
        raise MoveRejected("Move out of bounds")
    if not board.is_empty(move):
        raise MoveRejected("Cell already occupied")
    return True
