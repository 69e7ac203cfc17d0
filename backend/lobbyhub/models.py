from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lobbyhub.services.games.base import GameSession


@dataclass
class Member:
    """A connection's membership in a lobby."""
    name: str
    ready: bool = False

    def to_dict(self, sid: str) -> Dict[str, Any]:
        return {'id': sid, 'name': self.name, 'ready': self.ready}


@dataclass
class Lobby:
    """A named group of connections sharing at most one game session.

    ``members`` keeps join order; the first two entries become the players
    when a game is started.
    """
    lobby_id: str
    creator_id: str
    members: Dict[str, Member] = field(default_factory=dict)
    session: Optional[GameSession] = None

    @property
    def is_empty(self) -> bool:
        return not self.members

    @property
    def all_ready(self) -> bool:
        return all(m.ready for m in self.members.values())

    def promote_creator(self) -> Optional[str]:
        """Hand the creator role to the earliest remaining member."""
        new_creator = next(iter(self.members), None)
        if new_creator is not None:
            self.creator_id = new_creator
        return new_creator

    def roster_payload(self) -> Dict[str, Any]:
        return {
            'creatorId': self.creator_id,
            'players': self.roster(),
        }

    def roster(self) -> List[Dict[str, Any]]:
        return [member.to_dict(sid) for sid, member in self.members.items()]

    def summary(self) -> Dict[str, Any]:
        session = self.session
        return {
            'lobbyId': self.lobby_id,
            'creatorId': self.creator_id,
            'playerCount': len(self.members),
            'gameActive': bool(session and session.is_active),
            'winner': session.winner if session else None,
        }
