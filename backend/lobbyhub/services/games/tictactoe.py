import logging
from typing import Any, Dict, List, Mapping, Optional

from lobbyhub.errors import InsufficientPlayersError
from lobbyhub.transport import Transport

logger = logging.getLogger(__name__)

FIRST_MARK = 'X'
SECOND_MARK = 'O'
DRAW = 'Draw'
BOARD_SIZE = 9

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def find_winner(board: List[Optional[str]]) -> Optional[str]:
    """Return the mark filling the first complete line, if any."""
    for a, b, c in WIN_LINES:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a]
    return None


class TicTacToeSession:
    """One tic-tac-toe match bound to a lobby.

    The first two entries of ``members`` play X and O; anyone else in the
    lobby only receives the room broadcasts.
    """

    def __init__(self, transport: Transport, lobby_id: str, members: Mapping[str, Any]):
        sids = list(members)
        if len(sids) < 2:
            raise InsufficientPlayersError()
        self.transport = transport
        self.lobby_id = lobby_id
        self.players: Dict[str, str] = {sids[0]: FIRST_MARK, sids[1]: SECOND_MARK}
        self.board: List[Optional[str]] = [None] * BOARD_SIZE
        self.current_turn = FIRST_MARK
        self.winner: Optional[str] = None
        self.is_active = False

    def start(self) -> None:
        self.board = [None] * BOARD_SIZE
        self.current_turn = FIRST_MARK
        self.winner = None
        self.is_active = True
        logger.info(f"[game-start] lobby={self.lobby_id} players={self.players}")
        for sid, mark in self.players.items():
            self.transport.emit_to('game-started', {
                'board': list(self.board),
                'currentTurn': self.current_turn,
                'yourSymbol': mark,
            }, sid)

    def move(self, sid: str, index: Any) -> bool:
        """Apply ``sid``'s move at ``index``; returns False if it was dropped."""
        mark = self.players.get(sid)
        if not self.is_active or mark is None or self.winner is not None:
            logger.debug(f"[move-ignored] lobby={self.lobby_id} sid={sid} reason=not-playing")
            return False
        if self.current_turn != mark:
            logger.debug(f"[move-ignored] lobby={self.lobby_id} sid={sid} reason=out-of-turn")
            return False
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < BOARD_SIZE:
            logger.debug(f"[move-ignored] lobby={self.lobby_id} sid={sid} reason=bad-index index={index!r}")
            return False
        if self.board[index] is not None:
            logger.debug(f"[move-ignored] lobby={self.lobby_id} sid={sid} reason=occupied index={index}")
            return False

        self.board[index] = mark
        winner = find_winner(self.board)
        if winner:
            self.winner = winner
            self.is_active = False
        elif all(cell is not None for cell in self.board):
            self.winner = DRAW
            self.is_active = False
        else:
            self.current_turn = SECOND_MARK if self.current_turn == FIRST_MARK else FIRST_MARK

        if self.winner:
            logger.info(f"[game-end] lobby={self.lobby_id} winner={self.winner}")

        self.transport.emit_to_room('game-update', {
            'board': list(self.board),
            'currentTurn': self.current_turn,
            'winner': self.winner,
        }, self.lobby_id)
        return True

    def snapshot(self, sid: Optional[str] = None) -> Dict[str, Any]:
        """Current board, turn and result; ``yourSymbol`` is None for non-players."""
        return {
            'board': list(self.board),
            'currentTurn': self.current_turn,
            'winner': self.winner,
            'yourSymbol': self.players.get(sid) if sid else None,
        }

    def cleanup(self) -> None:
        self.is_active = False
