"""
Game Controller

Handles all game-related HTTP endpoints.
"""

import uuid

from flask import Blueprint, request, jsonify
from ..errors import GameError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_request_value

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_error_response(error, action, session_id=None, **kwargs):
    error_response = error.to_dict()
    game_logger.log_server_response(
        request, action, False, error_response, session_id, **kwargs
    )
    return jsonify(error_response), error.status_code


def _internal_error_response(error, action, session_id=None):
    game_logger.log_error(request, error, action, session_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, session_id)
    return jsonify(error_response), 500


@game_bp.route('/newgame', methods=['GET', 'POST'])
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        answer = get_request_value('answer')
        session_id = str(uuid.uuid4())

        # Log user action
        game_logger.log_user_action(
            request, 'new_game', session_id, answer_supplied=answer is not None
        )

        game_service.new_game(session_id, answer)

        response_data = {
            'success': True,
            'sessionID': session_id
        }
        game_logger.log_server_response(
            request, 'new_game', True, response_data, session_id,
            max_guesses=game_service.max_guesses
        )
        return jsonify(response_data), 201

    except GameError as e:
        return _game_error_response(e, 'new_game')
    except Exception as e:
        return _internal_error_response(e, 'new_game')


@game_bp.route('/gamestate', methods=['GET'])
def get_state():
    """Get the current (redacted) game state."""
    session_id = get_request_value('sessionID')
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', session_id)

        view = game_service.get_state(session_id)
        response_data = {
            'success': True,
            'gameState': view.to_dict()
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data, session_id,
            remaining_guesses=view.remaining_guesses, game_over=view.game_over
        )
        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'get_state', session_id)
    except Exception as e:
        return _internal_error_response(e, 'get_state', session_id)


@game_bp.route('/guess', methods=['POST'])
def make_guess():
    """Submit a guess for validation and evaluation."""
    session_id = get_request_value('sessionID')
    guess = get_request_value('guess')
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(
            request, 'submit_guess', session_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        view = game_service.guess(session_id, guess)
        response_data = {
            'success': True,
            'gameState': view.to_dict()
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, session_id,
            guess=guess, remaining_guesses=view.remaining_guesses, game_over=view.game_over
        )

        if view.game_over:
            rounds_used = len(view.guesses)
            if guess.lower() == view.secret_word:
                game_logger.log_game_event(
                    session_id, 'game_won', request.remote_addr,
                    rounds_used=rounds_used, winning_guess=guess
                )
            else:
                game_logger.log_game_event(
                    session_id, 'game_lost', request.remote_addr,
                    rounds_used=rounds_used, final_guess=guess
                )

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'submit_guess', session_id, attempted_guess=guess)
    except Exception as e:
        return _internal_error_response(e, 'submit_guess', session_id)


@game_bp.route('/reset', methods=['DELETE', 'POST'])
def reset_game():
    """Start the session over on a fresh word."""
    session_id = get_request_value('sessionID')
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'reset_game', session_id)

        view = game_service.reset(session_id)
        response_data = {
            'success': True,
            'gameState': view.to_dict()
        }
        game_logger.log_server_response(request, 'reset_game', True, response_data, session_id)
        game_logger.log_game_event(session_id, 'game_reset', request.remote_addr)
        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'reset_game', session_id)
    except Exception as e:
        return _internal_error_response(e, 'reset_game', session_id)


@game_bp.route('/delete', methods=['DELETE'])
def delete_game():
    """Delete a game session."""
    session_id = get_request_value('sessionID')
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', session_id)

        game_service.delete(session_id)

        game_logger.log_server_response(request, 'delete_game', True, {}, session_id)
        game_logger.log_game_event(session_id, 'game_deleted', request.remote_addr)
        return '', 204

    except GameError as e:
        return _game_error_response(e, 'delete_game', session_id)
    except Exception as e:
        return _internal_error_response(e, 'delete_game', session_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        response_data = {
            'status': 'healthy',
            'active_sessions': game_service.active_sessions if game_service else 0,
            'word_count': len(game_service.word_bank) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }
        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({
            'status': 'error',
            'error': str(e)
        }), 500
