from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from config import Config

socketio = SocketIO(async_mode=None)


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', '*')
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app; handlers reach it through current_app
    from tictactoe.registry import RoomRegistry
    from tictactoe.transport import SocketIOTransport
    flask_app.extensions['room_registry'] = RoomRegistry(
        SocketIOTransport(socketio),
        logger=flask_app.logger,
        enforce_turn_order=bool(flask_app.config.get('ENFORCE_TURN_ORDER', False)),
    )

    from tictactoe.main import main
    flask_app.register_blueprint(main)

    from tictactoe.api.rooms import rooms
    flask_app.register_blueprint(rooms, url_prefix='/api/rooms')

    # Importing here ensures the handlers bind to the initialized socketio instance
    from tictactoe.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    return flask_app
