from typing import Optional, Sequence

# Rows, columns, then diagonals. The first full line found decides the winner.
WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def check_winner(board: Sequence[Optional[str]]) -> Optional[str]:
    """Return the mark holding a full line, or None."""
    for a, b, c in WINNING_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a]
    return None


def is_board_full(board: Sequence[Optional[str]]) -> bool:
    return all(cell is not None for cell in board)


def is_draw(board: Sequence[Optional[str]]) -> bool:
    return is_board_full(board) and check_winner(board) is None
