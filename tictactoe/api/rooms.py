from flask import Blueprint, current_app, jsonify
from tictactoe.exceptions import RoomNotFound

rooms = Blueprint('rooms', __name__)


@rooms.route('', methods=['GET'])
@rooms.route('/', methods=['GET'])
def list_rooms():
    """
    Returns a snapshot of every live room.
    """
    registry = current_app.extensions['room_registry']
    return jsonify(registry.snapshots()), 200


@rooms.route('/<string:room_id>', methods=['GET'])
def get_room(room_id):
    """
    Returns the state of a single room, as sent in roomUpdate broadcasts.
    """
    registry = current_app.extensions['room_registry']
    try:
        room = registry.get_room_state(room_id)
    except RoomNotFound as exc:
        return jsonify({'error': str(exc)}), 404
    return jsonify(room), 200
