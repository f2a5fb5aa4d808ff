from typing import List, Optional

X = 'X'
O = 'O'
MARKS = (X, O)
BOARD_SIZE = 9
MAX_PLAYERS = 2

STATUS_WAITING = 'waiting'
STATUS_IN_PROGRESS = 'in_progress'
STATUS_FINISHED = 'finished'


def empty_board() -> List[Optional[str]]:
    return [None] * BOARD_SIZE


class Room:
    """In-memory state of one tic-tac-toe room.

    ``players`` holds connection ids in join order; the first seat plays X,
    the second plays O.
    """

    def __init__(self, room_id: str, players: Optional[List[str]] = None):
        self.room_id = room_id
        self.players: List[str] = list(players or [])
        self.board: List[Optional[str]] = empty_board()
        self.turn = X
        self.game_over = False

    @property
    def is_full(self) -> bool:
        return len(self.players) >= MAX_PLAYERS

    @property
    def status(self) -> str:
        if self.game_over:
            return STATUS_FINISHED
        if len(self.players) < MAX_PLAYERS:
            return STATUS_WAITING
        return STATUS_IN_PROGRESS

    def mark_for(self, connection_id: str) -> Optional[str]:
        """Return the mark seated for ``connection_id``, or None if not seated."""
        try:
            return MARKS[self.players.index(connection_id)]
        except (ValueError, IndexError):
            return None

    def to_dict(self):
        return {
            'roomId': self.room_id,
            'players': list(self.players),
            'board': list(self.board),
            'turn': self.turn,
            'gameOver': self.game_over,
            'status': self.status,
        }

    def __repr__(self):
        return f"<Room {self.room_id} players={len(self.players)} status={self.status}>"
