from functools import wraps
from flask import current_app, g, jsonify
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

STUB_ADMIN = "admin"


def admin_required(fn):
    """
    Admin context for the editing endpoints.

    With ADMIN_AUTH_REQUIRED off (the default) every request acts as the
    stub admin user. With it on, a JWT carrying ``role: admin`` is needed.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_app.config.get("ADMIN_AUTH_REQUIRED"):
            g.current_user = STUB_ADMIN
            return fn(*args, **kwargs)

        verify_jwt_in_request()

        if get_jwt().get("role") != "admin":
            return jsonify({"error": "Insufficient permissions"}), 403

        g.current_user = get_jwt_identity()
        return fn(*args, **kwargs)
    return wrapper
