"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..services.game_service import get_game_service
from ..services.stats_service import get_stats_service
from ..utils.decorators import service_required
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def log_game_end(game_id, state, last_guess, user_ip):
    """Log a win or loss once a guess finishes the game."""
    if not state.game_over:
        return
    event = 'game_won' if state.won else 'game_lost'
    game_logger.log_game_event(
        game_id, event, user_ip,
        attempts_used=state.attempts, target_word=state.answer,
        final_guess=last_guess
    )


@game_bp.route('/new_game', methods=['POST'])
@service_required(get_game_service, 'Game')
def new_game():
    """Create a new game session."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@service_required(get_game_service, 'Game')
def get_state(game_id):
    """Get current game state."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts=state.attempts, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/key', methods=['POST'])
@service_required(get_game_service, 'Game')
def press_key(game_id):
    """Apply one keyboard event (letter, DELETE or ENTER)."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True)
        if not data or 'key' not in data:
            error_response = {
                'success': False,
                'error': 'Key is required'
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 400

        key = data['key']
        game_logger.log_user_action(request, 'key_press', game_id, key=key)

        state, error = game_service.press_key(game_id, key)
        if state is None:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
            return jsonify(error_response), 404

        if error:
            error_response = {
                'success': False,
                'error': error,
                'state': asdict(state)
            }
            game_logger.log_server_response(
                request, 'key_press', False, error_response, game_id,
                validation_error=error, key=key
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'key_press', True, response_data, game_id,
            key=key, attempts=state.attempts, game_over=state.game_over
        )

        if state.game_over and state.guesses:
            log_game_end(game_id, state, state.guesses[-1], request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'key_press', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'key_press', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@service_required(get_game_service, 'Game')
def make_guess(game_id):
    """Submit a whole word for validation and evaluation."""
    try:
        game_service = get_game_service()

        data = request.get_json(silent=True)
        if not data or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess) if isinstance(guess, str) else None
        )

        if game_service.get_game_state(game_id) is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 404

        state, error = game_service.make_guess(game_id, guess)
        if error:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(
                request, 'submit_guess', False, error_response, game_id,
                validation_error=error, attempted_guess=guess
            )
            return jsonify(error_response), 400

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, attempts=state.attempts, game_over=state.game_over
        )

        log_game_end(game_id, state, guess, request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@service_required(get_game_service, 'Game')
def reset_game(game_id):
    """Start a new round in the same session (play again)."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reset_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@service_required(get_game_service, 'Game')
def delete_game(game_id):
    """Delete a game session."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        return jsonify(response_data), 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        stats_service = get_stats_service()

        game_logger.log_user_action(request, 'health_check')

        log_stats = game_logger.get_log_stats()

        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': log_stats,
            'stats_available': stats_service is not None,
            'stats_backend': type(stats_service.store).__name__ if stats_service else None
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
