import os
import sys
import pytest

# Ensure the project root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tictactoe import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ORIGINS = '*'
    LOG_LEVEL = 'DEBUG'
    ENFORCE_TURN_ORDER = False


class StrictTurnConfig(TestConfig):
    ENFORCE_TURN_ORDER = True


class RecordingTransport:
    """Transport double that records group membership and sent events."""

    def __init__(self):
        self.groups = {}
        self.sent = []

    def join_group(self, connection_id, group):
        self.groups.setdefault(group, set()).add(connection_id)

    def leave_group(self, connection_id, group):
        self.groups.get(group, set()).discard(connection_id)

    def broadcast(self, group, event, payload):
        self.sent.append((group, event, payload))

    def events(self, name=None):
        return [(g, e, p) for g, e, p in self.sent if name is None or e == name]

    def clear(self):
        self.sent = []


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Create connected Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass


@pytest.fixture()
def sio_client(sio_factory):
    return sio_factory()


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def strict_app():
    application = create_app(StrictTurnConfig)
    with application.app_context():
        yield application
