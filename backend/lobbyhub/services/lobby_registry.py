import logging
import threading
from contextlib import contextmanager
from typing import Any, Dict, Generator, List, Optional

from lobbyhub.errors import GameAlreadyStartedError, NotCreatorError, PlayersNotReadyError
from lobbyhub.models import Lobby, Member
from lobbyhub.services.games import SessionFactory, TicTacToeSession
from lobbyhub.transport import Transport

logger = logging.getLogger(__name__)


class LobbyRegistry:
    """Owns every lobby and the connection -> lobby index.

    Every public method holds ``_lock`` for its whole run, emits included, so
    each event is applied atomically with respect to the lobby map even when
    the server dispatches handlers on separate threads. A connection belongs
    to at most one lobby; ``_lobby_by_sid`` is the only record of that
    association.
    """

    def __init__(self, transport: Transport, session_factory: SessionFactory = TicTacToeSession,
                 require_all_ready: bool = False):
        self.transport = transport
        self.session_factory = session_factory
        self.require_all_ready = require_all_ready
        self._lobbies: Dict[str, Lobby] = {}
        self._lobby_by_sid: Dict[str, str] = {}
        self._lock = threading.RLock()

    @contextmanager
    def state_lock(self) -> Generator[None, None, None]:
        """Hold the registry lock across several calls (reentrant)."""
        with self._lock:
            yield

    # ---- Lookups ----

    def get_lobby(self, lobby_id: str) -> Optional[Lobby]:
        with self._lock:
            return self._lobbies.get(lobby_id)

    def lobby_of(self, sid: str) -> Optional[Lobby]:
        with self._lock:
            lobby_id = self._lobby_by_sid.get(sid)
            if lobby_id is None:
                return None
            return self._lobbies.get(lobby_id)

    def lobbies(self) -> List[Lobby]:
        with self._lock:
            return list(self._lobbies.values())

    # ---- Inbound events ----

    def join(self, sid: str, lobby_id: str, player_name: Any) -> Lobby:
        with self._lock:
            current = self._lobby_by_sid.get(sid)
            if current is not None and current != lobby_id:
                self.leave(sid)

            lobby = self._lobbies.get(lobby_id)
            if lobby is None:
                lobby = Lobby(lobby_id=lobby_id, creator_id=sid)
                self._lobbies[lobby_id] = lobby
                logger.info(f"[lobby-create] lobby={lobby_id} creator={sid}")

            lobby.members[sid] = Member(name=player_name)
            self._lobby_by_sid[sid] = lobby_id
            self.transport.join_room(sid, lobby_id)
            self._emit_roster(lobby)

            if lobby.session is not None:
                self.transport.emit_to('game-started', lobby.session.snapshot(sid), sid)
            return lobby

    def set_ready(self, sid: str, ready: bool) -> None:
        with self._lock:
            lobby = self.lobby_of(sid)
            if lobby is None:
                return
            member = lobby.members.get(sid)
            if member is None:
                return
            member.ready = ready
            self._emit_roster(lobby)

    def start_game(self, sid: str) -> None:
        """Start the lobby's game on behalf of ``sid``.

        Raises a ``LobbyError`` subclass when the requester is not the creator,
        a session is already bound, readiness is enforced and someone is not
        ready, or there are fewer than two members. Nothing changes on error.
        """
        with self._lock:
            lobby = self.lobby_of(sid)
            if lobby is None:
                return
            if sid != lobby.creator_id:
                raise NotCreatorError()
            if lobby.session is not None:
                raise GameAlreadyStartedError()
            if self.require_all_ready and not lobby.all_ready:
                raise PlayersNotReadyError()

            session = self.session_factory(self.transport, lobby.lobby_id, lobby.members)
            lobby.session = session
            session.start()

    def move(self, sid: str, index: Any) -> bool:
        with self._lock:
            lobby = self.lobby_of(sid)
            if lobby is None or lobby.session is None:
                return False
            return lobby.session.move(sid, index)

    def leave(self, sid: str) -> None:
        with self._lock:
            lobby_id = self._lobby_by_sid.pop(sid, None)
            if lobby_id is None:
                return
            lobby = self._lobbies.get(lobby_id)
            if lobby is None:
                return

            lobby.members.pop(sid, None)
            self.transport.leave_room(sid, lobby_id)
            if sid == lobby.creator_id:
                new_creator = lobby.promote_creator()
                if new_creator is not None:
                    logger.info(f"[creator-change] lobby={lobby_id} creator={new_creator}")

            self._emit_roster(lobby)

            if lobby.is_empty:
                if lobby.session is not None:
                    lobby.session.cleanup()
                    lobby.session = None
                del self._lobbies[lobby_id]
                logger.info(f"[lobby-delete] lobby={lobby_id}")

    def disconnect(self, sid: str) -> None:
        self.leave(sid)

    def _emit_roster(self, lobby: Lobby) -> None:
        self.transport.emit_to_room('players-update', lobby.roster_payload(), lobby.lobby_id)
