"""Errors reported back to the connection that issued a request.

Handlers catch ``LobbyError`` and send ``str(exc)`` as an ``error-message``
to the requester only; lobby state is left exactly as it was.
"""


class LobbyError(Exception):
    code = 'lobby_error'
    message = 'Request rejected'

    def __init__(self, message=None):
        super().__init__(message or self.message)


class NotCreatorError(LobbyError):
    code = 'not_creator'
    message = 'Only the lobby creator can start the game'


class GameAlreadyStartedError(LobbyError):
    code = 'already_started'
    message = 'The game has already been started'


class InsufficientPlayersError(LobbyError):
    code = 'insufficient_players'
    message = 'Not enough players to start the game'


class PlayersNotReadyError(LobbyError):
    code = 'not_ready'
    message = 'All players must be ready to start the game'
