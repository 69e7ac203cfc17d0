from lobbyhub import create_app, socketio
from lobbyhub.config import Config

app = create_app()

if __name__ == '__main__':
    # Use SocketIO server to enable websockets
    socketio.run(app, host=Config.HOST, port=Config.PORT, allow_unsafe_werkzeug=True)
