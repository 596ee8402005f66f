"""
Testing the game session state machine.
"""

from palabra.models import Stats
from palabra.services.game_service import GameService
from palabra.services.stats_service import MemoryStatsStore, StatsService

from helpers import start_game, type_word


def test_new_game_starts_empty(game_service):
    game_id = game_service.create_new_game()
    state = game_service.get_game_state(game_id)

    assert state.attempts == 0
    assert state.max_attempts == 6
    assert state.word_length == 5
    assert state.current_guess == ''
    assert state.disabled_keys == []
    assert state.answer is None
    assert game_service.games[game_id].secret in game_service.word_list


def test_unknown_game(game_service):
    assert game_service.get_game_state('missing') is None
    assert game_service.press_key('missing', 'A') == (None, "Game not found")
    assert game_service.make_guess('missing', 'perro') == (None, "Game not found")
    assert game_service.reset_game('missing') is None
    assert game_service.delete_game('missing') is False


def test_typing_and_delete(game_service):
    game_id = start_game(game_service, 'perro')

    for key in ['v', 'E', 'R']:
        state, error = game_service.press_key(game_id, key)
        assert error == ''
    assert state.current_guess == 'ver'

    state, _ = game_service.press_key(game_id, 'DELETE')
    assert state.current_guess == 've'

    state, _ = game_service.press_key(game_id, 'delete')
    state, _ = game_service.press_key(game_id, 'DELETE')
    state, _ = game_service.press_key(game_id, 'DELETE')
    assert state.current_guess == ''


def test_letters_beyond_word_length_are_ignored(game_service):
    game_id = start_game(game_service, 'perro')
    for key in 'GATOSX':
        state, error = game_service.press_key(game_id, key)
    assert error == ''
    assert state.current_guess == 'gatos'


def test_accented_keys_are_typed_lowercase(game_service):
    game_id = start_game(game_service, 'perro')
    for key in ['D', 'É', 'B', 'I', 'L']:
        state, _ = game_service.press_key(game_id, key)
    assert state.current_guess == 'débil'


def test_invalid_key_is_rejected(game_service):
    game_id = start_game(game_service, 'perro')
    state, error = game_service.press_key(game_id, '7')
    assert error == "Invalid key"
    assert state.current_guess == ''


def test_enter_with_short_guess_is_rejected(game_service):
    game_id = start_game(game_service, 'perro')
    game_service.press_key(game_id, 'P')
    state, error = game_service.press_key(game_id, 'ENTER')
    assert error == "Not enough letters"
    assert state.attempts == 0
    assert state.current_guess == 'p'


def test_enter_with_unknown_word_is_rejected(game_service):
    game_id = start_game(game_service, 'perro')
    state, error = type_word(game_service, game_id, 'zzzzz')
    assert error == "Word not in word list"
    assert state.attempts == 0
    assert state.current_guess == 'zzzzz'


def test_scored_guess_updates_grid_and_keyboard(game_service):
    game_id = start_game(game_service, 'débil')
    state, error = type_word(game_service, game_id, 'verde')

    assert error == ''
    assert state.attempts == 1
    assert state.guesses == ['verde']
    assert state.guess_results == [[
        ('v', 'absent'), ('e', 'absent'), ('r', 'absent'), ('d', 'present'), ('e', 'absent')
    ]]
    assert state.current_guess == ''
    # é is still in the secret, so E stays available
    assert state.disabled_keys == ['R', 'V']
    assert state.game_over is False


def test_disabled_keys_cannot_be_typed(game_service):
    game_id = start_game(game_service, 'perro')
    type_word(game_service, game_id, 'gatos')
    assert 'G' in game_service.get_game_state(game_id).disabled_keys

    state, error = game_service.press_key(game_id, 'G')
    assert error == ''
    assert state.current_guess == ''


def test_win_records_stats_and_reveals_answer(game_service, stats_service):
    game_id = start_game(game_service, 'señor')
    type_word(game_service, game_id, 'perro')
    state, error = type_word(game_service, game_id, 'señor')

    assert error == ''
    assert state.won is True
    assert state.game_over is True
    assert state.answer == 'señor'
    assert stats_service.get_stats() == Stats(wins=1, losses=0)

    state, error = game_service.press_key(game_id, 'A')
    assert error == "Game is already over"
    assert stats_service.get_stats() == Stats(wins=1, losses=0)


def test_loss_after_max_attempts_is_recorded_once(stats_service):
    service = GameService(stats_service=stats_service, word_list=['perro', 'gatos', 'mundo'], max_attempts=2)
    game_id = start_game(service, 'perro')

    state, _ = type_word(service, game_id, 'gatos')
    assert state.game_over is False
    state, _ = type_word(service, game_id, 'mundo')

    assert state.game_over is True
    assert state.won is False
    assert state.answer == 'perro'
    assert stats_service.get_stats() == Stats(wins=0, losses=1)

    _, error = service.make_guess(game_id, 'perro')
    assert error == "Game is already over"
    assert stats_service.get_stats() == Stats(wins=0, losses=1)


def test_make_guess_submits_whole_word(game_service):
    game_id = start_game(game_service, 'pasta')
    game_service.press_key(game_id, 'Z')

    state, error = game_service.make_guess(game_id, ' PAPEL ')
    assert error == ''
    assert state.guesses == ['papel']
    assert state.disabled_keys == ['E', 'L']


def test_make_guess_validation(game_service):
    game_id = start_game(game_service, 'pasta')
    assert game_service.is_valid_guess(game_id, '') == (False, "Guess must be a valid string")
    assert game_service.is_valid_guess(game_id, 'pan') == (False, "Guess must be exactly 5 letters")
    assert game_service.is_valid_guess(game_id, 'pa5ta') == (False, "Guess must contain only letters")
    assert game_service.is_valid_guess(game_id, 'zorro') == (False, "Word not in word list")
    assert game_service.is_valid_guess(game_id, 'DÉBIL') == (True, "")

    state, error = game_service.make_guess(game_id, 'zorro')
    assert error == "Word not in word list"
    assert state.attempts == 0


def test_reset_game_starts_fresh_round(game_service):
    game_id = start_game(game_service, 'perro')
    type_word(game_service, game_id, 'gatos')

    state = game_service.reset_game(game_id)
    assert state.game_id == game_id
    assert state.attempts == 0
    assert state.disabled_keys == []
    assert state.guesses == []


def test_delete_game(game_service):
    game_id = game_service.create_new_game()
    assert game_service.delete_game(game_id) is True
    assert game_service.get_game_state(game_id) is None


def test_game_without_stats_service_still_finishes():
    service = GameService(word_list=['perro'])
    game_id = start_game(service, 'perro')
    state, error = type_word(service, game_id, 'perro')
    assert error == ''
    assert state.won is True


class FailingStore(MemoryStatsStore):
    """Memory store whose writes fail until `broken` is cleared."""

    def __init__(self):
        super().__init__()
        self.broken = True

    def write(self, stats):
        if self.broken:
            raise OSError("disk full")
        super().write(stats)


def test_failed_stats_write_is_retried_on_next_event():
    store = FailingStore()
    stats_service = StatsService(store)
    service = GameService(stats_service=stats_service, word_list=['perro', 'gatos'])
    game_id = start_game(service, 'perro')

    state, error = type_word(service, game_id, 'perro')
    assert error == ''
    assert state.game_over is True
    assert stats_service.get_stats() == Stats()
    assert service.games[game_id].stats_recorded is False

    # still failing: nothing stored, still pending
    _, error = service.press_key(game_id, 'A')
    assert error == "Game is already over"
    assert stats_service.get_stats() == Stats()

    store.broken = False
    _, error = service.press_key(game_id, 'A')
    assert error == "Game is already over"
    assert stats_service.get_stats() == Stats(wins=1, losses=0)
    assert service.games[game_id].stats_recorded is True

    service.press_key(game_id, 'A')
    service.is_valid_guess(game_id, 'gatos')
    assert stats_service.get_stats() == Stats(wins=1, losses=0)


def test_reset_flushes_pending_result():
    store = FailingStore()
    stats_service = StatsService(store)
    service = GameService(stats_service=stats_service, word_list=['perro', 'gatos'], max_attempts=1)
    game_id = start_game(service, 'perro')
    type_word(service, game_id, 'gatos')
    assert stats_service.get_stats() == Stats()

    store.broken = False
    service.reset_game(game_id)
    assert stats_service.get_stats() == Stats(wins=0, losses=1)
