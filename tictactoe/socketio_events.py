from flask import current_app, request
from flask_socketio import emit
from tictactoe import socketio
from tictactoe.exceptions import RoomError
from tictactoe.registry import RoomRegistry
from typing import Any, Dict


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _registry() -> RoomRegistry:
    return current_app.extensions['room_registry']


def _ack_error(exc: RoomError) -> Dict[str, Any]:
    return {'success': False, 'error': str(exc)}


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    emit('connected', {'message': 'Connected', 'sid': _get_sid()})


def handle_disconnect(reason=None):
    sid = _get_sid()
    affected = _registry().disconnect_all(sid)
    current_app.logger.info(f"[disconnect] sid={sid} rooms={affected}")


def handle_create_room(room_id=None):
    try:
        room = _registry().create_room(room_id, _get_sid())
    except RoomError as exc:
        current_app.logger.info(f"[room-create-fail] room={room_id!r} error={exc}")
        return _ack_error(exc)
    return {'success': True, 'room': room}


def handle_join_room(room_id=None):
    try:
        room = _registry().join_room(room_id, _get_sid())
    except RoomError as exc:
        current_app.logger.info(f"[room-join-fail] room={room_id!r} error={exc}")
        return _ack_error(exc)
    return {'success': True, 'room': room}


def handle_make_move(data=None):
    # Fire-and-forget: malformed payloads and illegal moves are dropped
    if not isinstance(data, dict):
        current_app.logger.info(f"[move-reject] sid={_get_sid()} malformed payload")
        return
    _registry().apply_move(data.get('roomId'), data.get('index'), _get_sid())


def handle_leave_room(room_id=None):
    _registry().remove_player(room_id, _get_sid())


def handle_get_room_state(room_id=None):
    try:
        room = _registry().get_room_state(room_id)
    except RoomError as exc:
        return _ack_error(exc)
    return {'success': True, 'room': room}


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createRoom', handle_create_room, namespace=namespace)
    socketio.on_event('joinRoom', handle_join_room, namespace=namespace)
    socketio.on_event('makeMove', handle_make_move, namespace=namespace)
    socketio.on_event('leaveRoom', handle_leave_room, namespace=namespace)
    socketio.on_event('getRoomState', handle_get_room_state, namespace=namespace)
