"""Room errors reported back to the requesting connection.

Every error here is recoverable: the Socket.IO layer turns it into an ack of
the form ``{'success': False, 'error': str(exc)}`` and the HTTP layer into a
JSON error body.
"""


class RoomError(Exception):
    """Base class for all room membership errors."""
    pass


class InvalidRoomId(RoomError):
    """Room identifier is empty or not a string."""
    def __init__(self, message='Room ID cannot be empty'):
        super().__init__(message)


class RoomAlreadyExists(RoomError):
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__('Room already exists')


class RoomNotFound(RoomError):
    def __init__(self, room_id, message='Room not found'):
        self.room_id = room_id
        super().__init__(message)


class RoomFull(RoomError):
    """Room already seats two players."""
    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__('Room is full')
