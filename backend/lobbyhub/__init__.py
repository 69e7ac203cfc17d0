from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from lobbyhub.config import Config

# One event at a time per connection; the registry lock covers the rest
socketio = SocketIO(async_mode=None, async_handlers=False)


def _allowed_origins(value):
    if not value or value == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    allowed_origins = _allowed_origins(flask_app.config.get('CORS_ALLOWED_ORIGINS', '*'))
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # Import here so the blueprint and handlers bind to the initialized socketio
    from lobbyhub.routes import main
    flask_app.register_blueprint(main)

    from lobbyhub.services.games import GAME_TYPES
    from lobbyhub.services.lobby_registry import LobbyRegistry
    from lobbyhub.transport import SocketIOTransport

    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    game_type = flask_app.config.get('GAME_TYPE', 'tictactoe')
    if game_type not in GAME_TYPES:
        raise ValueError(f"Unknown GAME_TYPE {game_type!r}; expected one of {sorted(GAME_TYPES)}")

    # One registry per application; nothing outside the app holds lobby state
    flask_app.extensions['lobby_registry'] = LobbyRegistry(
        SocketIOTransport(socketio, namespace=namespace),
        session_factory=GAME_TYPES[game_type],
        require_all_ready=bool(flask_app.config.get('REQUIRE_ALL_READY', False)),
    )

    from lobbyhub.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
