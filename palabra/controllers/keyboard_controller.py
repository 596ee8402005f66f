"""
Keyboard Controller

Serves the keyboard layout, long-press accent popups and colour themes.
"""

from flask import Blueprint, request, jsonify
from ..config.theme import get_theme
from ..services.game_service import get_game_service
from ..services.keyboard_service import get_layout, get_variants
from ..utils.game_logger import game_logger

keyboard_bp = Blueprint('keyboard', __name__)


def _disabled_keys_for_request():
    """
    Disabled keys of the game named by ?game_id=, or an empty set.

    Returns:
        Tuple of (disabled key set or None if the game is unknown, game_id)
    """
    game_id = request.args.get('game_id')
    if not game_id:
        return set(), None

    game_service = get_game_service()
    state = game_service.get_game_state(game_id) if game_service else None
    if state is None:
        return None, game_id
    return set(state.disabled_keys), game_id


@keyboard_bp.route('/keyboard', methods=['GET'])
def keyboard_layout():
    """Keyboard rows with disabled flags."""
    try:
        disabled, game_id = _disabled_keys_for_request()
        if disabled is None:
            return jsonify({'success': False, 'error': 'Game not found'}), 404

        return jsonify({'success': True, 'game_id': game_id, 'keyboard': get_layout(disabled)})

    except Exception as e:
        game_logger.log_error(request, e, 'keyboard_layout')
        return jsonify({'success': False, 'error': str(e)}), 500


@keyboard_bp.route('/keyboard/variants/<key>', methods=['GET'])
def key_variants(key):
    """Long-press popup for a key."""
    try:
        disabled, game_id = _disabled_keys_for_request()
        if disabled is None:
            return jsonify({'success': False, 'error': 'Game not found'}), 404

        game_logger.log_user_action(request, 'long_press', game_id, key=key)
        return jsonify({'success': True, 'key': key.upper(), **get_variants(key, disabled)})

    except Exception as e:
        game_logger.log_error(request, e, 'key_variants')
        return jsonify({'success': False, 'error': str(e)}), 500


@keyboard_bp.route('/theme', methods=['GET'])
def theme():
    """Colour palette for ?scheme=light|dark."""
    try:
        scheme = request.args.get('scheme', 'light')
        game_logger.log_user_action(request, 'theme', scheme=scheme)

        response_data = {'success': True, 'scheme': scheme, **get_theme(scheme)}
        game_logger.log_server_response(request, 'theme', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'theme')
        return jsonify({'success': False, 'error': str(e)}), 500
