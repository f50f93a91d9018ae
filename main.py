"""
Word Game Server - Main Entry Point

Creates the Flask application and serves it until interrupted.
"""

import os

from wordgame import create_app
from wordgame.config import config
from wordgame.utils.game_logger import game_logger


def main():
    """Main function to create the application and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]
    app = create_app(config_class)
    game_service = app.extensions['game_service']

    try:
        game_logger.logger.info(
            f"Word game server starting on {config_class.HOST}:{config_class.PORT} "
            f"({len(game_service.word_bank)} words, {game_service.max_guesses} guesses)"
        )
        print(f"\nStarting word game server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT,
                debug=config_class.DEBUG, threaded=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word game server shutting down (KeyboardInterrupt)")
    finally:
        game_service.shutdown()


if __name__ == '__main__':
    main()
