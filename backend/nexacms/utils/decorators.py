from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_jwt


def current_role() -> str:
    """Role claim of the verified JWT; empty when absent."""
    return get_jwt().get("role", "")


def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            if current_role() not in allowed_roles:
                return jsonify({
                    "error": "Forbidden",
                    "message": "Insufficient permissions",
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
