"""
Palabra Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import os
from palabra import create_app
from palabra.config import config, validate_word_list_integrity, get_word_statistics
from palabra.services.stats_service import create_stats_store, initialize_stats_service
from palabra.services.game_service import initialize_game_service
from palabra.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        word_stats = get_word_statistics()
        print(f"✓ Word list loaded: {word_stats['total_words']} words "
              f"({word_stats['accented_words']} with accents or Ñ)")

        # Initialize stats service with the configured storage backend
        store = create_stats_store(config_class)
        stats_service = initialize_stats_service(store)
        print(f"✓ Stats service initialized ({type(store).__name__})")

        # Initialize game service
        initialize_game_service(stats_service, max_attempts=config_class.MAX_ATTEMPTS)
        print("✓ Game service initialized successfully")

        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Palabra Server Starting")

        print(f"\nStarting Palabra Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT,
                     debug=config_class.DEBUG, allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Palabra Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
