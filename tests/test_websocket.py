import pytest

from conftest import TARGET


@pytest.fixture
def socket_client(app):
    return app.socketio.test_client(app)


def _events(socket_client, name):
    return [event['args'][0] for event in socket_client.get_received() if event['name'] == name]


def test_join_game_sends_state(socket_client, game_service):
    game_id = game_service.create_new_game()

    socket_client.emit('join_game', {'game_id': game_id})
    updates = _events(socket_client, 'game_state_update')

    assert len(updates) == 1
    assert updates[0]['state']['game_id'] == game_id


def test_submit_guess_over_socket(socket_client, game_service):
    game_id = game_service.create_new_game()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': TARGET})
    updates = _events(socket_client, 'game_state_update')

    assert updates[-1]['state']['won']
    assert updates[-1]['state']['answer'] == TARGET


def test_rejected_guess_over_socket(socket_client, game_service):
    game_id = game_service.create_new_game()

    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': 'QQ'})
    rejections = _events(socket_client, 'guess_rejected')

    assert rejections[0]['reason'] == 'INVALID_FORMAT'
    assert game_service.get_game_state(game_id).current_round == 0


def test_reset_over_socket(socket_client, game_service):
    game_id = game_service.create_new_game()
    game_service.submit_guess(game_id, TARGET)

    socket_client.emit('reset_game', {'game_id': game_id})
    updates = _events(socket_client, 'game_state_update')

    assert updates[-1]['state']['outcome'] == 'ONGOING'
    assert updates[-1]['state']['current_round'] == 0


def test_unknown_game_over_socket(socket_client):
    socket_client.emit('submit_guess', {'game_id': 'missing', 'guess': TARGET})

    errors = _events(socket_client, 'error')

    assert errors[0]['error'] == 'Game not found'


def test_missing_game_id_over_socket(socket_client):
    socket_client.emit('submit_guess', {'guess': TARGET})

    assert _events(socket_client, 'error')[0]['error'] == 'Game ID is required'


def _delete_after_lookup(monkeypatch, game_service):
    """Make the game vanish right after the event's existence check, as a concurrent DELETE would."""
    lookup = game_service.get_session

    def get_session_then_delete(game_id):
        session = lookup(game_id)
        game_service.delete_game(game_id)
        return session

    monkeypatch.setattr(game_service, 'get_session', get_session_then_delete)


@pytest.mark.parametrize("event, payload", [
    ('submit_guess', {'guess': TARGET}),
    ('reset_game', {}),
    ('join_game', {}),
])
def test_game_deleted_during_event(socket_client, game_service, monkeypatch, event, payload):
    game_id = game_service.create_new_game()
    _delete_after_lookup(monkeypatch, game_service)

    socket_client.emit(event, dict(payload, game_id=game_id))
    received = socket_client.get_received()

    errors = [e['args'][0] for e in received if e['name'] == 'error']
    assert errors == [{'error': 'Game not found', 'game_id': game_id}]
    assert not [e for e in received if e['name'] == 'game_state_update']


def test_handler_failure_emits_error(socket_client, game_service, monkeypatch):
    game_id = game_service.create_new_game()

    def broken_submit(game_id, guess):
        raise RuntimeError("statistics backend offline")

    monkeypatch.setattr(game_service, 'submit_guess', broken_submit)
    socket_client.emit('submit_guess', {'game_id': game_id, 'guess': TARGET})

    assert _events(socket_client, 'error') == [{'error': 'statistics backend offline'}]


def test_reset_failure_emits_error(socket_client, game_service, monkeypatch):
    game_id = game_service.create_new_game()

    def broken_reset(game_id):
        raise RuntimeError("reset failed")

    monkeypatch.setattr(game_service, 'reset_game', broken_reset)
    socket_client.emit('reset_game', {'game_id': game_id})

    assert _events(socket_client, 'error') == [{'error': 'reset failed'}]
