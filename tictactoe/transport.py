"""Messaging capability used by the room registry.

The registry never talks to Socket.IO directly; it is handed an object with
``join_group``, ``leave_group`` and ``broadcast``. Room ids are used as
group names.
"""
from typing import Any

from flask_socketio import SocketIO, join_room, leave_room


class SocketIOTransport:
    """Flask-SocketIO backed transport.

    ``join_group``/``leave_group`` need an active Socket.IO request context
    (they are only called from event handlers); ``broadcast`` goes
    through the server object and works from anywhere.
    """

    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def join_group(self, connection_id: str, group: str) -> None:
        join_room(group, sid=connection_id, namespace=self.namespace)

    def leave_group(self, connection_id: str, group: str) -> None:
        leave_room(group, sid=connection_id, namespace=self.namespace)

    def broadcast(self, group: str, event: str, payload: Any) -> None:
        self.socketio.emit(event, payload, to=group, namespace=self.namespace)
