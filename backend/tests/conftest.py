import os
import sys
import pytest

# Ensure the backend root (containing the `lobbyhub` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from lobbyhub import create_app, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    CORS_ALLOWED_ORIGINS = '*'
    SOCKETIO_NAMESPACE = '/'
    GAME_TYPE = 'tictactoe'
    REQUIRE_ALL_READY = False


class RecordingTransport:
    """In-memory transport that records every emit and room change."""

    def __init__(self):
        self.sent = []
        self.rooms = {}

    def emit_to_room(self, event, payload, room):
        self.sent.append(('room', room, event, payload))

    def emit_to(self, event, payload, sid):
        self.sent.append(('sid', sid, event, payload))

    def join_room(self, sid, room):
        self.rooms.setdefault(room, set()).add(sid)

    def leave_room(self, sid, room):
        self.rooms.get(room, set()).discard(sid)

    def events(self, name):
        return [entry for entry in self.sent if entry[2] == name]

    def last(self, name):
        matching = self.events(name)
        return matching[-1][3] if matching else None

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def transport():
    return RecordingTransport()


@pytest.fixture()
def registry(transport):
    from lobbyhub.services.lobby_registry import LobbyRegistry
    return LobbyRegistry(transport)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def make_sio_client(flask_app):
    """Factory for Socket.IO test clients; all are disconnected on teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, namespace='/')
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected('/'):
                test_client.disconnect(namespace='/')
        except Exception:
            pass
