import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Network port for the Socket.IO server
    PORT = int(os.environ.get('PORT', '4000'))
    HOST = os.environ.get('HOST', '0.0.0.0')
    # Permissive by default; comma separated list to restrict
    CORS_ALLOWED_ORIGINS = os.environ.get('CORS_ALLOWED_ORIGINS', '*')
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Game played in every lobby (see lobbyhub.services.games.GAME_TYPES)
    GAME_TYPE = os.environ.get('GAME_TYPE', 'tictactoe')
    # Off: readiness is shown to clients but never blocks start-game
    REQUIRE_ALL_READY = os.environ.get('REQUIRE_ALL_READY', '0').lower() in ('1', 'true', 'yes')
