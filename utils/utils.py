from functools import wraps
from flask import request, jsonify, g, current_app
from models import db
from models.teachers import Teacher
from utils.tokens import decode_jwt


def get_request_token():
    """Token from the auth cookie, falling back to a Bearer header."""
    token = request.cookies.get(current_app.config.get("JWT_COOKIE_NAME", "access_token"))
    if token:
        return token

    header = request.headers.get("Authorization", "")
    if header.lower().startswith("bearer "):
        return header[7:].strip() or None
    return None

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_request_token()
        if not token:
            return jsonify({"error": "Unauthorized"}), 401

        decoded = decode_jwt(token)
        if not decoded:
            return jsonify({"error": "Invalid or expired token"}), 401
        g.user = decoded

        return f(*args, **kwargs)

    return decorated_function

def roles_required(*roles):
    """Require login and one of the given roles, read from the account rather than the token."""
    def decorator(f):
        @wraps(f)
        @login_required
        def decorated_function(*args, **kwargs):
            teacher_id = g.user.get("teacher_id")
            teacher = db.session.get(Teacher, teacher_id) if teacher_id is not None else None
            if not teacher or teacher.role not in roles:
                return jsonify({"error": "Unauthorized"}), 401
            return f(*args, **kwargs)
        return decorated_function
    return decorator

staff_required = roles_required("teacher", "admin")
admin_required = roles_required("admin")
