from collections.abc import Mapping

from flask import current_app, request
from flask_socketio import emit

from lobbyhub import socketio
from lobbyhub.errors import LobbyError


def _registry():
    return current_app.extensions['lobby_registry']


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def handle_connect(auth=None):
    current_app.logger.debug(f"[connect] sid={_get_sid()}")


def handle_disconnect(reason=None):
    _registry().disconnect(_get_sid())


def handle_join_lobby(data=None):
    if not isinstance(data, Mapping):
        return
    lobby_id = data.get('lobbyId')
    if lobby_id is None:
        return
    _registry().join(_get_sid(), str(lobby_id), data.get('playerName'))


def handle_set_ready(data=None):
    # Accept both {ready: bool} and a bare boolean; anything else is dropped
    ready = data.get('ready') if isinstance(data, Mapping) else data
    if not isinstance(ready, bool):
        return
    _registry().set_ready(_get_sid(), ready)


def handle_start_game(data=None):
    try:
        _registry().start_game(_get_sid())
    except LobbyError as exc:
        current_app.logger.info(f"[start-rejected] sid={_get_sid()} code={exc.code}")
        emit('error-message', str(exc))


def handle_make_move(data=None):
    if not isinstance(data, Mapping):
        return
    _registry().move(_get_sid(), data.get('index'))


def handle_leave_lobby(data=None):
    _registry().leave(_get_sid())


def handle_error(exc):
    event = getattr(request, 'event', None) or {}
    current_app.logger.exception(f"[socket-error] sid={_get_sid()} event={event.get('message')}: {exc}")


def register_socketio_handlers(namespace: str = '/') -> None:
    """Register Socket.IO event handlers on ``namespace``."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join-lobby', handle_join_lobby, namespace=namespace)
    socketio.on_event('set-ready', handle_set_ready, namespace=namespace)
    socketio.on_event('start-game', handle_start_game, namespace=namespace)
    socketio.on_event('make-move', handle_make_move, namespace=namespace)
    socketio.on_event('leave-lobby', handle_leave_lobby, namespace=namespace)
    socketio.on_error_default(handle_error)
