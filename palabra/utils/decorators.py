"""
Controller Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import jsonify


def service_required(getter, name: str):
    """
    Decorator that answers 500 when a required service was not initialized.

    Args:
        getter: Zero-argument function returning the service or None
        name: Human readable service name for the error message
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if getter() is None:
                return jsonify({
                    'success': False,
                    'error': f'{name} service unavailable'
                }), 500
            return f(*args, **kwargs)
        return decorated_function
    return decorator
