"""
Word Game Server Application Package

A Wordle-style guessing game served over HTTP. Sessions live in a store owned
by the application instance created here.
"""

import os

from flask import Flask
from flask_cors import CORS
from .config import Config, load_word_list


def create_app(config_class=Config, store=None, rng=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        store: Session store; a fresh in-memory store when omitted
        rng: random.Random used to draw secret words

    Returns:
        Flask application instance with the game service attached
    """
    from .services.game_service import GameService
    from .services.word_bank import WordBank
    from .utils.game_logger import game_logger

    static_dir = os.path.abspath(getattr(config_class, 'STATIC_DIR', 'public'))
    app = Flask(__name__, static_folder=static_dir, static_url_path='')
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])
    game_logger.configure(
        app.config['LOG_DIR'] if app.config['LOG_TO_FILE'] else None,
        app.config['LOG_LEVEL']
    )

    word_bank = WordBank(load_word_list(app.config['WORD_LIST_PATH']), rng)
    app.extensions['game_service'] = GameService(
        word_bank,
        store=store,
        max_guesses=app.config['MAX_GUESSES'],
        require_dictionary_word=app.config['REQUIRE_DICTIONARY_WORD'],
        dedupe_wrong_letters=app.config['DEDUPE_WRONG_LETTERS']
    )

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    return app
