"""Shared helpers for driving games in tests."""


def start_game(service, secret):
    """Create a game and pin its secret word."""
    game_id = service.create_new_game()
    service.games[game_id].secret = secret
    return game_id


def type_word(service, game_id, word):
    """Press each letter of a word, then ENTER."""
    for letter in word:
        service.press_key(game_id, letter.upper())
    return service.press_key(game_id, 'ENTER')
