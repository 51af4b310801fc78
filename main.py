"""
Word Riddle Game Server - Main Entry Point

This is the main entry point for the game server.
It initializes the game service, starts loading the word lists in the
background and runs the Flask-SocketIO application.
"""

from wordriddle import create_app
from wordriddle.config import Config
from wordriddle.services.game_service import initialize_game_service
from wordriddle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        game_service = initialize_game_service(Config)
        print("✓ Game service initialized successfully")

        # Sessions reject guesses until this finishes
        game_service.start_background_load()
        print("✓ Word list loading started")

        print("Creating Flask application...")
        app, socketio = create_app(Config, game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Riddle Server Starting")

        print(f"\nStarting Word Riddle Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG, allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Riddle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
