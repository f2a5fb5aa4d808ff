from dataclasses import dataclass
from typing import List, Optional

from tictactoe.models import BOARD_SIZE, O, X, Room
from .board import check_winner, is_board_full

IGNORED = 'ignored'
CONTINUE = 'continue'
WIN = 'win'
DRAW = 'draw'


@dataclass
class MoveOutcome:
    kind: str
    board: Optional[List[Optional[str]]] = None
    winner: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.kind != IGNORED

    @property
    def is_terminal(self) -> bool:
        return self.kind in (WIN, DRAW)

    def game_over_payload(self):
        """Payload of the ``gameOver`` broadcast for a terminal outcome."""
        if self.kind == WIN:
            return {'winner': self.winner, 'board': list(self.board)}
        return {'winner': None, 'board': list(self.board), 'draw': True}


def is_valid_index(index) -> bool:
    # bool is an int subclass; True/False are not cell indices
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < BOARD_SIZE


def apply_move(room: Room, index) -> MoveOutcome:
    """Place the current mark at ``index`` and resolve the result.

    Finished games, malformed indices and occupied cells are ignored and
    leave the room untouched. The turn only flips when the game goes on.
    """
    if room.game_over or not is_valid_index(index) or room.board[index] is not None:
        return MoveOutcome(IGNORED)

    room.board[index] = room.turn

    winner = check_winner(room.board)
    if winner:
        room.game_over = True
        return MoveOutcome(WIN, board=list(room.board), winner=winner)
    if is_board_full(room.board):
        room.game_over = True
        return MoveOutcome(DRAW, board=list(room.board))

    room.turn = O if room.turn == X else X
    return MoveOutcome(CONTINUE, board=list(room.board))
