"""
Controllers Package

Flask blueprints for the home screen, the game screen and the keyboard.
"""
