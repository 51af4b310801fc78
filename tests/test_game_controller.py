import random

from conftest import OTHER_WORDS, TARGET, StaticWordSource
from wordriddle import create_app
from wordriddle.config import TestingConfig
from wordriddle.services.game_service import GameService, build_game_service


def _new_game(client, **body):
    response = client.post('/api/new_game', json=body)
    assert response.status_code == 200
    return response.get_json()['game_id']


def test_new_game_returns_fresh_state(client):
    response = client.post('/api/new_game', json={})
    data = response.get_json()

    assert data['success']
    assert data['state']['ready']
    assert data['state']['current_round'] == 0
    assert data['state']['max_rounds'] == 6
    assert data['state']['outcome'] == 'ONGOING'
    assert data['state']['answer'] is None


def test_guess_flow_until_win(client):
    game_id = _new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'slate'})
    data = response.get_json()
    assert response.status_code == 200
    assert data['attempt']['index'] == 0
    assert data['attempt']['result'][2] == ['A', 'HIT']
    assert data['state']['current_round'] == 1

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})
    state = response.get_json()['state']
    assert state['won'] and state['game_over']
    assert state['answer'] == TARGET
    assert state['statistics']['wins'] == 1


def test_guess_rejections(client):
    game_id = _new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'abc'})
    assert response.status_code == 400
    assert response.get_json()['reason'] == 'INVALID_FORMAT'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ZZZZZ'})
    assert response.status_code == 400
    assert response.get_json()['reason'] == 'NOT_IN_DICTIONARY'
    assert response.get_json()['silent'] is False

    client.post(f'/api/game/{game_id}/guess', json={'guess': 'SLATE'})
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'SLATE'})
    assert response.status_code == 400
    assert response.get_json()['reason'] == 'DUPLICATE_GUESS'
    assert response.get_json()['silent'] is True

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['current_round'] == 1


def test_guess_requires_body(client):
    game_id = _new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_guess_after_game_over_conflicts(client):
    game_id = _new_game(client)
    for word in OTHER_WORDS[:6]:
        client.post(f'/api/game/{game_id}/guess', json={'guess': word})

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})

    assert response.status_code == 409
    assert response.get_json()['reason'] == 'GAME_OVER'


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/guess', json={'guess': TARGET}).status_code == 404
    assert client.post('/api/game/nope/reset').status_code == 404
    assert client.get('/api/game/nope/share').status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_reset_keeps_statistics(client):
    game_id = _new_game(client)
    client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})

    response = client.post(f'/api/game/{game_id}/reset')
    state = response.get_json()['state']

    assert state['current_round'] == 0
    assert state['outcome'] == 'ONGOING'
    assert state['statistics']['wins'] == 1


def test_share_only_after_game_over(client):
    game_id = _new_game(client)
    assert client.get(f'/api/game/{game_id}/share').status_code == 409

    client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})
    share = client.get(f'/api/game/{game_id}/share').get_json()['share']

    assert share['target_word'] == TARGET
    assert share['outcome'] == 'WON'
    assert share['feedback'] == [['HIT'] * 5]
    assert share['text_grid'].startswith('Word Riddle 1/6')


def test_stats_per_player(client):
    alice_game = _new_game(client, player_id='alice')
    bob_game = _new_game(client, player_id='bob')
    client.post(f'/api/game/{alice_game}/guess', json={'guess': TARGET})
    for word in OTHER_WORDS[:6]:
        client.post(f'/api/game/{bob_game}/guess', json={'guess': word})

    alice = client.get('/api/stats/alice').get_json()['stats']
    bob = client.get('/api/stats/bob').get_json()['stats']

    assert alice == {'wins': 1, 'losses': 0, 'games_played': 1, 'win_rate': 100.0}
    assert bob == {'wins': 0, 'losses': 1, 'games_played': 1, 'win_rate': 0.0}


def test_delete_game(client):
    game_id = _new_game(client)

    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_health_reports_word_lists(client):
    _new_game(client)
    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['word_lists'] == 'READY'
    assert data['active_games'] == 1
    assert data['dictionary_words'] == len(OTHER_WORDS) + 1
    assert data['max_attempts'] == 6
    assert data['word_statistics']['total_words'] == 1
    assert data['word_statistics']['letter_frequency']['C'] == 1


def test_guesses_rejected_while_word_lists_pending():
    service = GameService(StaticWordSource([TARGET], OTHER_WORDS), rng=random.Random(0))
    app, _ = create_app(TestingConfig, service)
    client = app.test_client()
    game_id = _new_game(client)

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})
    assert response.status_code == 503
    assert response.get_json()['reason'] == 'NOT_READY'
    health = client.get('/api/health').get_json()
    assert health['word_lists'] == 'PENDING'
    assert health['word_statistics'] is None

    service.load_word_lists()
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': TARGET})
    assert response.status_code == 200
    assert response.get_json()['state']['won']


class ShortGameConfig(TestingConfig):
    MAX_ATTEMPTS = 3
    STATS_FILE = None
    QUESTION_WORDS_URL = None
    ANSWER_WORDS_URL = None


def test_max_attempts_comes_from_config():
    service = build_game_service(ShortGameConfig)
    service.load_word_lists()
    game_id = service.create_new_game()

    assert service.max_attempts == 3
    assert service.get_session(game_id).max_attempts == 3
    assert service.get_game_state(game_id).max_rounds == 3


def test_game_lost_after_configured_attempts():
    service = GameService(
        StaticWordSource([TARGET], OTHER_WORDS), rng=random.Random(0), max_attempts=3
    )
    service.load_word_lists()
    app, _ = create_app(TestingConfig, service)
    client = app.test_client()
    game_id = _new_game(client)

    for guess in OTHER_WORDS[:2]:
        state = client.post(f'/api/game/{game_id}/guess', json={'guess': guess}).get_json()['state']
        assert not state['game_over']

    state = client.post(f'/api/game/{game_id}/guess', json={'guess': OTHER_WORDS[2]}).get_json()['state']
    assert state['game_over']
    assert not state['won']
    assert state['max_rounds'] == 3
    assert state['answer'] == TARGET
