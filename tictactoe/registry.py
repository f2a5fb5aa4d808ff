"""Room registry: the single owner of every live room.

One registry exists per Flask app (``app.extensions['room_registry']``).
Membership operations raise :mod:`tictactoe.exceptions` errors that the
transport layer reports to the requester; moves on the other hand are
dropped silently when illegal.
"""
import logging
import threading
from typing import Dict, List, Optional

from tictactoe.exceptions import InvalidRoomId, RoomAlreadyExists, RoomFull, RoomNotFound
from tictactoe.models import MAX_PLAYERS, Room
from tictactoe.services.games import MoveOutcome, apply_move
from tictactoe.services.games.session import DRAW, IGNORED

OPPONENT_JOINED_MESSAGE = 'Your opponent has joined!'
OPPONENT_LEFT_MESSAGE = 'Your opponent has left!'


def _validate_room_id(room_id) -> str:
    if room_id is None or room_id == '':
        raise InvalidRoomId()
    if not isinstance(room_id, str):
        raise InvalidRoomId('Room ID must be a string')
    return room_id


class RoomRegistry:
    def __init__(self, transport, logger: Optional[logging.Logger] = None, enforce_turn_order: bool = False):
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)
        self.enforce_turn_order = enforce_turn_order
        self._rooms: Dict[str, Room] = {}
        # Flask-SocketIO may dispatch events on several threads
        self._lock = threading.RLock()

    def __len__(self):
        return len(self._rooms)

    def __contains__(self, room_id):
        return room_id in self._rooms

    def room_ids(self) -> List[str]:
        with self._lock:
            return list(self._rooms)

    def snapshots(self) -> List[dict]:
        with self._lock:
            return [room.to_dict() for room in self._rooms.values()]

    # ---- membership ----

    def create_room(self, room_id, requester_id: str) -> dict:
        room_id = _validate_room_id(room_id)
        with self._lock:
            if room_id in self._rooms:
                raise RoomAlreadyExists(room_id)
            room = Room(room_id, players=[requester_id])
            self._rooms[room_id] = room
            self.transport.join_group(requester_id, room_id)
            self.logger.info(f"[room-create] room={room_id} sid={requester_id}")
            self._broadcast_room(room)
            self._broadcast_player_count(room)
            return room.to_dict()

    def join_room(self, room_id, requester_id: str) -> dict:
        room_id = _validate_room_id(room_id)
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                raise RoomNotFound(room_id, 'Room does not exist')
            if room.is_full:
                raise RoomFull(room_id)
            room.players.append(requester_id)
            self.transport.join_group(requester_id, room_id)
            self.logger.info(f"[room-join] room={room_id} sid={requester_id} players={len(room.players)}")
            self._broadcast_room(room)
            self._broadcast_player_count(room)
            if len(room.players) == MAX_PLAYERS:
                self.transport.broadcast(room_id, 'opponentJoined', {'message': OPPONENT_JOINED_MESSAGE})
            return room.to_dict()

    def get_room_state(self, room_id) -> dict:
        with self._lock:
            room = self._rooms.get(room_id) if isinstance(room_id, str) else None
            if room is None:
                raise RoomNotFound(room_id)
            return room.to_dict()

    def remove_player(self, room_id, connection_id: str) -> bool:
        """Unseat ``connection_id``. Returns True if the room was deleted.

        Unknown rooms and connections that are not seated are ignored.
        """
        with self._lock:
            room = self._rooms.get(room_id) if isinstance(room_id, str) else None
            if room is None or connection_id not in room.players:
                return False
            room.players = [p for p in room.players if p != connection_id]
            self.transport.leave_group(connection_id, room_id)
            if not room.players:
                del self._rooms[room_id]
                self.logger.info(f"[room-delete] room={room_id} last player {connection_id} gone")
                return True
            self.logger.info(f"[room-leave] room={room_id} sid={connection_id} players={len(room.players)}")
            self._broadcast_player_count(room)
            self.transport.broadcast(room_id, 'opponentLeft', {'message': OPPONENT_LEFT_MESSAGE})
            return False

    def disconnect_all(self, connection_id: str) -> List[str]:
        """Unseat a dropped connection from every room it sits in."""
        with self._lock:
            affected = [rid for rid, room in self._rooms.items() if connection_id in room.players]
            for room_id in affected:
                self.remove_player(room_id, connection_id)
            return affected

    # ---- moves ----

    def apply_move(self, room_id, index, requester_id: str) -> MoveOutcome:
        with self._lock:
            room = self._rooms.get(room_id) if isinstance(room_id, str) else None
            if room is None:
                return MoveOutcome(IGNORED)
            if self.enforce_turn_order and room.mark_for(requester_id) != room.turn:
                self.logger.info(f"[move-reject] room={room_id} sid={requester_id} not seated on turn {room.turn}")
                return MoveOutcome(IGNORED)

            outcome = apply_move(room, index)
            if not outcome.applied:
                self.logger.info(f"[move-reject] room={room_id} sid={requester_id} index={index!r}")
            elif outcome.is_terminal:
                self.transport.broadcast(room_id, 'gameOver', outcome.game_over_payload())
                self.logger.info(f"[game-over] room={room_id} winner={outcome.winner} draw={outcome.kind == DRAW}")
            else:
                self._broadcast_room(room)
                self.logger.info(f"[move] room={room_id} index={index} next_turn={room.turn}")
            return outcome

    # ---- broadcasts ----

    def _broadcast_room(self, room: Room) -> None:
        self.transport.broadcast(room.room_id, 'roomUpdate', room.to_dict())

    def _broadcast_player_count(self, room: Room) -> None:
        self.transport.broadcast(room.room_id, 'playerCount', len(room.players))
