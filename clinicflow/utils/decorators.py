from functools import wraps
from flask import jsonify, request

CONFIRM_VALUES = ('1', 'true', 'yes')


def require_confirmation(prompt):
    """
    Decorator for destructive endpoints.
    Usage: @require_confirmation('Are you sure you want to delete this prescription?')

    The request must carry ?confirm=true; otherwise nothing happens and the
    prompt is returned so the client can ask the user.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if request.args.get('confirm', '').lower() not in CONFIRM_VALUES:
                return jsonify({
                    'success': False,
                    'error': prompt,
                    'confirmation_required': True
                }), 428
            return f(*args, **kwargs)
        return decorated_function
    return decorator
