"""
Home Controller

Serves the home screen: welcome title and the win/loss record.
"""

from flask import Blueprint, request, jsonify
from ..services.stats_service import get_stats_service
from ..utils.decorators import service_required
from ..utils.game_logger import game_logger

home_bp = Blueprint('home', __name__)

HOME_TITLE = '¡Bienvenido al Wordle!'


@home_bp.route('/home', methods=['GET'])
@service_required(get_stats_service, 'Stats')
def home():
    """Home screen payload, read each time the screen gains focus."""
    try:
        game_logger.log_user_action(request, 'home')

        stats = get_stats_service().get_stats()
        response_data = {
            'success': True,
            'title': HOME_TITLE,
            'stats': {
                **stats.to_dict(),
                'total': stats.total,
                'win_percentage': stats.win_percentage
            },
            'show_chart': stats.total > 0
        }

        game_logger.log_server_response(request, 'home', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'home')
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'home', False, error_response)
        return jsonify(error_response), 500


@home_bp.route('/stats', methods=['GET'])
@service_required(get_stats_service, 'Stats')
def get_stats():
    """Raw stats record."""
    try:
        game_logger.log_user_action(request, 'get_stats')

        stats = get_stats_service().get_stats()
        response_data = {'success': True, 'stats': stats.to_dict()}

        game_logger.log_server_response(request, 'get_stats', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        error_response = {'success': False, 'error': str(e)}
        game_logger.log_server_response(request, 'get_stats', False, error_response)
        return jsonify(error_response), 500
