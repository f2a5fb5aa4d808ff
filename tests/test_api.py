import pytest

from tictactoe.registry import RoomRegistry


@pytest.fixture()
def registry(flask_app, transport):
    # HTTP tests seat players without Socket.IO connections
    rooms = RoomRegistry(transport, logger=flask_app.logger)
    flask_app.extensions['room_registry'] = rooms
    return rooms


def test_index_and_health(client):
    assert client.get('/').status_code == 200
    res = client.get('/health')
    assert res.get_json() == {'status': 'healthy'}


def test_rooms_listing(client, registry):
    assert client.get('/api/rooms').get_json() == []
    registry.create_room('abc', 'p1')
    rooms = client.get('/api/rooms').get_json()
    assert [r['roomId'] for r in rooms] == ['abc']


def test_room_state(client, registry):
    res = client.get('/api/rooms/abc')
    assert res.status_code == 404
    assert res.get_json() == {'error': 'Room not found'}

    registry.create_room('abc', 'p1')
    registry.join_room('abc', 'p2')
    res = client.get('/api/rooms/abc')
    assert res.status_code == 200
    data = res.get_json()
    assert data['players'] == ['p1', 'p2']
    assert data['status'] == 'in_progress'
