"""Outbound side of the event channel.

The registry and game sessions only talk to a ``Transport``. The Socket.IO
implementation relies on one delivery property of the server: emits to the
same room reach each recipient in the order they were sent.
"""
from typing import Any, Protocol


class Transport(Protocol):
    def emit_to_room(self, event: str, payload: Any, room: str) -> None: ...

    def emit_to(self, event: str, payload: Any, sid: str) -> None: ...

    def join_room(self, sid: str, room: str) -> None: ...

    def leave_room(self, sid: str, room: str) -> None: ...


class SocketIOTransport:
    """Fire-and-forget emits through a Flask-SocketIO server."""

    def __init__(self, socketio, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def emit_to_room(self, event: str, payload: Any, room: str) -> None:
        self.socketio.emit(event, payload, to=room, namespace=self.namespace)

    def emit_to(self, event: str, payload: Any, sid: str) -> None:
        # Every connection is implicitly in a room named after its sid
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def join_room(self, sid: str, room: str) -> None:
        self.socketio.server.enter_room(sid, room, namespace=self.namespace)

    def leave_room(self, sid: str, room: str) -> None:
        self.socketio.server.leave_room(sid, room, namespace=self.namespace)
