"""
WebSocket Event Handlers

Real-time counterpart of the game HTTP endpoints: the browser submits guesses
and resets over the socket and receives the updated state back.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def _emit_not_found(game_id):
    # The game can be deleted between the decorator's lookup and the handler body
    emit('error', {'error': 'Game not found', 'game_id': game_id})


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None, game_id=None):
        """Join a game room and receive its current state."""
        try:
            state = game_service.get_game_state(game_id)
            if state is None:
                _emit_not_found(game_id)
                return

            join_room(_room(game_id))
            game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")
            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })

        except Exception as e:
            game_logger.log_error(request, e, 'ws_join_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game_service=None, game_id=None):
        """Leave a game room."""
        try:
            leave_room(_room(game_id))
            game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")

        except Exception as e:
            game_logger.log_error(request, e, 'ws_leave_game', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('submit_guess')
    @websocket_game_required
    def handle_submit_guess(data, game_service=None, game_id=None):
        """Submit a guess; emits the new state or the rejection."""
        try:
            guess = data.get('guess')
            game_logger.log_user_action(request, 'ws_submit_guess', game_id, guess=guess)

            result = game_service.submit_guess(game_id, guess)
            if result is None:
                _emit_not_found(game_id)
                return

            if not result.accepted:
                emit('guess_rejected', {
                    'success': False,
                    'game_id': game_id,
                    'error': result.message,
                    'reason': result.rejection.value,
                    'silent': result.silent
                })
                return

            state = game_service.get_game_state(game_id)
            if state is None:
                _emit_not_found(game_id)
                return

            payload = {
                'success': True,
                'state': asdict(state)
            }
            emit('game_state_update', payload)
            # Other tabs watching the same game
            emit('game_state_update', payload, room=_room(game_id), include_self=False)

            if state.game_over:
                game_logger.log_game_event(
                    game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                    rounds_used=state.current_round, final_guess=result.attempt.guess
                )

        except Exception as e:
            game_logger.log_error(request, e, 'ws_submit_guess', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, game_service=None, game_id=None):
        """Start over with a new target word."""
        try:
            game_logger.log_user_action(request, 'ws_reset_game', game_id)
            state = game_service.reset_game(game_id)
            if state is None:
                _emit_not_found(game_id)
                return

            emit('game_state_update', {
                'success': True,
                'state': asdict(state)
            })
            game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        except Exception as e:
            game_logger.log_error(request, e, 'ws_reset_game', game_id)
            emit('error', {'error': str(e)})
