"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..models.game import GuessRejection
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import get_json_body

game_bp = Blueprint('game', __name__)

_REJECTION_STATUS = {
    GuessRejection.NOT_READY: 503,
    GuessRejection.GAME_OVER: 409,
    GuessRejection.INVALID_FORMAT: 400,
    GuessRejection.NOT_IN_DICTIONARY: 400,
    GuessRejection.DUPLICATE_GUESS: 400,
}


def _error(action, message, status, game_id=None, **extra):
    error_response = {
        'success': False,
        'error': message,
        **extra
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), status


def _not_found(action, game_id):
    return _error(action, 'Game not found', 404, game_id)


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session."""
    try:
        data = get_json_body(request)
        player_id = data.get('player_id') or game_service.default_player_id

        game_logger.log_user_action(request, 'new_game', player_id=player_id)

        game_id = game_service.create_new_game(player_id)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            ready=state.ready, max_rounds=state.max_rounds
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('get_state', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_round=state.current_round, game_over=state.game_over
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game_service
def make_guess(game_id, game_service):
    """Submit a guess for validation and evaluation."""
    try:
        data = get_json_body(request)
        if 'guess' not in data:
            return _error('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        result = game_service.submit_guess(game_id, guess)
        if result is None:
            return _not_found('submit_guess', game_id)

        if not result.accepted:
            return _error(
                'submit_guess', result.message, _REJECTION_STATUS[result.rejection], game_id,
                reason=result.rejection.value, silent=result.silent
            )

        state = game_service.get_game_state(game_id)
        if state is None:
            return _not_found('submit_guess', game_id)

        response_data = {
            'success': True,
            'attempt': {
                'index': result.attempt.index,
                'guess': result.attempt.guess,
                'result': result.attempt.as_pairs()
            },
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            round=state.current_round, game_over=state.game_over
        )

        if state.game_over:
            game_logger.log_game_event(
                game_id, 'game_won' if state.won else 'game_lost', request.remote_addr,
                rounds_used=state.current_round, final_guess=result.attempt.guess
            )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game_service
def reset_game(game_id, game_service):
    """Start the session over with a new target word."""
    try:
        game_logger.log_user_action(request, 'reset_game', game_id)

        state = game_service.reset_game(game_id)
        if state is None:
            return _not_found('reset_game', game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(request, 'reset_game', True, response_data, game_id)
        game_logger.log_game_event(game_id, 'game_reset', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reset_game', game_id)
        return _error('reset_game', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/share', methods=['GET'])
@require_game_service
def share_game(game_id, game_service):
    """Export data for a finished game."""
    try:
        game_logger.log_user_action(request, 'share_game', game_id)

        if game_service.get_session(game_id) is None:
            return _not_found('share_game', game_id)

        card = game_service.get_share_card(game_id)
        if card is None:
            return _error('share_game', 'Game is not over yet', 409, game_id)

        response_data = {
            'success': True,
            'share': card.to_dict()
        }
        game_logger.log_server_response(request, 'share_game', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'share_game', game_id)
        return _error('share_game', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), (200 if success else 404)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error('delete_game', str(e), 500, game_id)


@game_bp.route('/stats/<player_id>', methods=['GET'])
@require_game_service
def get_stats(player_id, game_service):
    """Win/loss statistics for a player."""
    try:
        game_logger.log_user_action(request, 'get_stats', player_id=player_id)

        response_data = {
            'success': True,
            'player_id': player_id,
            'stats': game_service.get_statistics(player_id).to_dict()
        }
        game_logger.log_server_response(request, 'get_stats', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_stats')
        return _error('get_stats', str(e), 500)


@game_bp.route('/health', methods=['GET'])
@require_game_service
def health_check(game_service):
    """Health check endpoint."""
    try:
        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            **game_service.health(),
            'log_stats': game_logger.get_log_stats()
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
