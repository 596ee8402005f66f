"""
Palabra Game Server Application Package

A Spanish Wordle game server: guess scoring, accent-aware keyboard state,
win/loss stats, and the HTTP and Socket.IO surface the client screens use.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = False
    
    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)
    
    # Register blueprints
    from .controllers.home_controller import home_bp
    from .controllers.game_controller import game_bp
    from .controllers.keyboard_controller import keyboard_bp
    
    app.register_blueprint(home_bp, url_prefix='/api')
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(keyboard_bp, url_prefix='/api')
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
