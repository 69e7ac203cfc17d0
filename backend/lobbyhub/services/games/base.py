from typing import Any, Dict, Mapping, Optional, Protocol

from lobbyhub.transport import Transport


class GameSession(Protocol):
    """Capabilities a lobby needs from whatever game it hosts."""

    lobby_id: str
    is_active: bool
    winner: Optional[str]

    def start(self) -> None: ...

    def move(self, sid: str, index: Any) -> bool: ...

    def cleanup(self) -> None: ...

    def snapshot(self, sid: Optional[str] = None) -> Dict[str, Any]: ...


class SessionFactory(Protocol):
    def __call__(self, transport: Transport, lobby_id: str,
                 members: Mapping[str, Any]) -> GameSession: ...
