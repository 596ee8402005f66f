"""
WebSocket Event Handlers

Handles Socket.IO events so a client can stream key presses and receive
game state updates as they happen.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} connected")

    @socketio.on('disconnect')
    def handle_disconnect(*args):
        """Handle WebSocket disconnection."""
        game_logger.logger.info(f"WebSocket: client {request.sid} disconnected")

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room and receive its current state."""
        game_id = None
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            if not isinstance(data, dict):
                emit('error', {'error': 'Invalid payload'})
                return

            game_id = data.get('game_id')
            if not game_id:
                emit('error', {'error': 'Game ID is required'})
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                emit('error', {'error': 'Game not found'})
                return

            join_room(game_room(game_id))
            game_logger.log_user_action(request, 'join_game', game_id)

            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'join_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = None
        try:
            if not isinstance(data, dict):
                emit('error', {'error': 'Invalid payload'})
                return

            game_id = data.get('game_id')
            if game_id:
                leave_room(game_room(game_id))
                game_logger.log_user_action(request, 'leave_game', game_id)

        except Exception as e:
            game_logger.log_error(request, e, 'leave_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('key_press')
    def handle_key_press(data):
        """Apply a key event and broadcast the new state to the game room."""
        game_id = None
        try:
            game_service = get_game_service()
            if not game_service:
                emit('error', {'error': 'Game service unavailable'})
                return

            if not isinstance(data, dict):
                emit('error', {'error': 'Invalid payload'})
                return

            game_id = data.get('game_id')
            key = data.get('key')
            if not game_id or not key:
                emit('error', {'error': 'Game ID and key are required'})
                return

            game_logger.log_user_action(request, 'key_press', game_id, key=key)

            state, error = game_service.press_key(game_id, key)
            if state is None:
                emit('error', {'error': error})
                return

            if error:
                emit('error', {'error': error, 'game_id': game_id})
                return

            state_data = asdict(state)
            socketio.emit('game_state_update', {
                'success': True,
                'state': state_data
            }, room=game_room(game_id))

            if state.game_over and state.guesses:
                socketio.emit('game_ended', {
                    'game_id': game_id,
                    'won': state.won,
                    'target_word': state.answer,
                    'attempts': state.attempts
                }, room=game_room(game_id))
                game_logger.log_game_event(
                    game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                    attempts_used=state.attempts, target_word=state.answer,
                    final_guess=state.guesses[-1]
                )

        except Exception as e:
            game_logger.log_error(request, e, 'key_press', game_id)
            emit('error', {'error': str(e)})
