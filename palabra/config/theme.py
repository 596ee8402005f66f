"""
Theme Palettes

Tile colours and the light/dark palettes clients render with.
"""

from typing import Dict

GAME_COLORS: Dict[str, str] = {
    'correct': '#6aaa64',
    'present': '#c9b458',
    'absent': '#787c7e',
}

LIGHT_THEME: Dict[str, str] = {
    'background': '#ffffff',
    'text': '#000000',
    'popupBackground': '#f2f2f2',
    'emptyTile': '#d3d6da',
    'homePrimary': '#538d4e',
    'homeSecondary': '#ff3b30',
    'homeBorder': '#d8d8d8',
    'homeTextSecondary': '#666666',
    'homeButtonText': '#ffffff',
}

DARK_THEME: Dict[str, str] = {
    'background': '#121213',
    'text': '#ffffff',
    'popupBackground': '#2c2c2c',
    'emptyTile': '#3a3a3c',
    'homePrimary': '#6aaa64',
    'homeSecondary': '#ff3b30',
    'homeBorder': '#444444',
    'homeTextSecondary': '#aaaaaa',
    'homeButtonText': '#ffffff',
}

THEMES = {'light': LIGHT_THEME, 'dark': DARK_THEME}


def get_theme(scheme: str) -> Dict[str, Dict[str, str]]:
    """
    Returns the palette for a colour scheme.
    
    Unknown schemes fall back to the light palette.
    """
    colors = THEMES.get((scheme or '').lower(), LIGHT_THEME)
    return {'colors': dict(colors), 'game_colors': dict(GAME_COLORS)}
