from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def _registry():
    return current_app.extensions['lobby_registry']


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the lobbyhub game server!'})


@main.route('/health')
def health():
    return jsonify({'status': 'ok'})


@main.route('/api/lobbies', methods=['GET'])
def list_lobbies():
    registry = _registry()
    with registry.state_lock():
        listing = [lobby.summary() for lobby in registry.lobbies()]
    return jsonify(listing), 200


@main.route('/api/lobbies/<string:lobby_id>', methods=['GET'])
def get_lobby(lobby_id):
    """
    Returns the roster of a lobby plus a snapshot of its game, if any.
    """
    registry = _registry()
    with registry.state_lock():
        lobby = registry.get_lobby(lobby_id)
        if lobby is None:
            return jsonify({'error': 'Lobby not found'}), 404

        response = lobby.roster_payload()
        response['lobbyId'] = lobby.lobby_id
        response['game'] = lobby.session.snapshot() if lobby.session else None
    return jsonify(response), 200
