"""
Testing the HTTP endpoints through the Flask test client.
"""

from helpers import start_game


def press(client, game_id, key):
    return client.post(f'/api/game/{game_id}/key', json={'key': key})


def test_home_starts_with_zero_stats(client):
    response = client.get('/api/home')
    assert response.status_code == 200
    data = response.get_json()
    assert data['success'] is True
    assert data['title'] == '¡Bienvenido al Wordle!'
    assert data['stats'] == {'wins': 0, 'losses': 0, 'total': 0, 'win_percentage': 0}
    assert data['show_chart'] is False


def test_new_game_and_state(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    data = response.get_json()
    game_id = data['game_id']
    assert data['state']['attempts'] == 0
    assert data['state']['answer'] is None

    response = client.get(f'/api/game/{game_id}/state')
    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_unknown_game_is_404(client):
    assert client.get('/api/game/missing/state').status_code == 404
    assert press(client, 'missing', 'A').status_code == 404
    assert client.post('/api/game/missing/guess', json={'guess': 'perro'}).status_code == 404
    assert client.post('/api/game/missing/reset').status_code == 404
    assert client.delete('/api/game/missing').status_code == 404


def test_key_presses_build_and_submit_a_guess(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'débil')

    for key in 'VERDE':
        response = press(client, game_id, key)
        assert response.status_code == 200
    assert response.get_json()['state']['current_guess'] == 'verde'

    response = press(client, game_id, 'ENTER')
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['attempts'] == 1
    assert state['guess_results'][0] == [
        ['v', 'absent'], ['e', 'absent'], ['r', 'absent'], ['d', 'present'], ['e', 'absent']
    ]
    assert state['disabled_keys'] == ['R', 'V']


def test_key_press_errors(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')

    response = client.post(f'/api/game/{game_id}/key', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Key is required'

    response = press(client, game_id, 'ENTER')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Not enough letters'

    response = press(client, game_id, '%')
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Invalid key'


def test_guess_endpoint_win_updates_home(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zorro'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Word not in word list'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'perro'})
    assert response.status_code == 200
    state = response.get_json()['state']
    assert state['won'] is True
    assert state['answer'] == 'perro'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'perro'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'

    data = client.get('/api/home').get_json()
    assert data['stats'] == {'wins': 1, 'losses': 0, 'total': 1, 'win_percentage': 100}
    assert data['show_chart'] is True
    assert client.get('/api/stats').get_json()['stats'] == {'wins': 1, 'losses': 0}


def test_guess_requires_body(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_reset_and_delete(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'gatos'})

    response = client.post(f'/api/game/{game_id}/reset')
    assert response.status_code == 200
    assert response.get_json()['state']['attempts'] == 0

    response = client.delete(f'/api/game/{game_id}')
    assert response.status_code == 200
    assert response.get_json()['success'] is True
    assert client.get(f'/api/game/{game_id}/state').status_code == 404


def test_keyboard_layout_reflects_game(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'gatos'})

    response = client.get(f'/api/keyboard?game_id={game_id}')
    assert response.status_code == 200
    keyboard = response.get_json()['keyboard']
    second_row = {entry['key']: entry['disabled'] for entry in keyboard['rows'][1]}
    assert second_row['G'] is True
    assert second_row['S'] is True
    assert second_row['Ñ'] is False

    response = client.get('/api/keyboard')
    assert response.get_json()['keyboard']['disabled_keys'] == []

    assert client.get('/api/keyboard?game_id=missing').status_code == 404


def test_key_variants(client, services):
    game_service, _ = services
    game_id = start_game(game_service, 'perro')
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'gatos'})

    data = client.get('/api/keyboard/variants/E').get_json()
    assert data['popup'] is True
    assert data['keys'] == ['É']

    # A was ruled out by the guess
    data = client.get(f'/api/keyboard/variants/A?game_id={game_id}').get_json()
    assert data == {'success': True, 'key': 'A', 'popup': False, 'keys': []}


def test_theme(client):
    dark = client.get('/api/theme?scheme=dark').get_json()
    assert dark['colors']['background'] == '#121213'
    assert dark['game_colors']['correct'] == '#6aaa64'

    light = client.get('/api/theme').get_json()
    assert light['colors']['background'] == '#ffffff'


def test_health(client):
    client.post('/api/new_game')
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['stats_backend'] == 'MemoryStatsStore'


def test_missing_service_returns_500(client, monkeypatch):
    from palabra.services import game_service as game_service_module

    monkeypatch.setattr(game_service_module, '_game_service', None)
    response = client.post('/api/new_game')
    assert response.status_code == 500
    assert response.get_json()['error'] == 'Game service unavailable'


def test_stats_and_theme_log_user_actions(client, monkeypatch):
    from palabra.utils.game_logger import game_logger

    actions = []
    monkeypatch.setattr(game_logger, 'log_user_action',
                        lambda request, action, game_id=None, **kwargs: actions.append((action, kwargs)))

    assert client.get('/api/stats').status_code == 200
    assert client.get('/api/theme?scheme=dark').status_code == 200
    assert actions == [('get_stats', {}), ('theme', {'scheme': 'dark'})]


def test_theme_failure_returns_500(client, monkeypatch):
    from palabra.controllers import keyboard_controller

    def broken_theme(scheme):
        raise RuntimeError("palette missing")

    monkeypatch.setattr(keyboard_controller, 'get_theme', broken_theme)
    response = client.get('/api/theme')
    assert response.status_code == 500
    assert response.get_json() == {'success': False, 'error': 'palette missing'}
