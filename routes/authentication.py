import logging

from flask import Blueprint, request, jsonify, make_response, current_app, g
from models.teachers import Teacher
from models import db
from utils.tokens import get_jwt_token, decode_jwt, token_claims
from utils.utils import get_request_token, login_required

auth_bp = Blueprint('auth_bp', __name__)
logger = logging.getLogger(__name__)


def _set_auth_cookie(response, token, max_age):
    response.set_cookie(
        current_app.config["JWT_COOKIE_NAME"], token,
        httponly=True,
        secure=current_app.config["JWT_COOKIE_SECURE"],
        samesite=current_app.config["JWT_COOKIE_SAMESITE"],
        path="/",
        max_age=max_age
    )
    return response

# Login
@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Email and password are required"}), 400

    email = data.get("email")
    password = data.get("password")

    if not isinstance(email, str) or not isinstance(password, str) or not email.strip() or not password:
        return jsonify({"error": "Email and password are required"}), 400
    email = email.strip().lower()

    teacher = Teacher.query.filter_by(email=email).first()

    if not teacher or not teacher.check_password(password):
        logger.info("Failed login attempt for %s", email)
        return jsonify({"error": "Invalid credentials"}), 401

    token = get_jwt_token(token_claims(teacher))

    response = make_response(jsonify({
        "message": "Login successful",
        "teacher": teacher.to_dict(),
        "token": token
    }))

    logger.info("Teacher %s logged in", teacher.email)
    return _set_auth_cookie(response, token, current_app.config["JWT_EXPIRATION_HOURS"] * 3600)

# Logout
@auth_bp.route('/logout', methods=['POST'])
def logout():
    response = make_response(jsonify({"message": "Logout successful"}))
    return _set_auth_cookie(response, "", 0)

# Auth Check
@auth_bp.route('/check-auth', methods=['GET'])
def check_auth():
    token = get_request_token()

    if not token:
        return jsonify({"error": "Not authenticated"}), 401

    decoded_token = decode_jwt(token)
    if not decoded_token:
        return jsonify({"error": "Invalid or expired token"}), 401

    return jsonify({
        "message": "Authenticated",
        "teacher": {
            "id": decoded_token.get("teacher_id"),
            "email": decoded_token.get("email"),
            "name": decoded_token.get("name"),
            "role": decoded_token.get("role")
        }
    }), 200

# Current teacher record
@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    teacher = db.session.get(Teacher, g.user.get("teacher_id"))
    if not teacher:
        return jsonify({"error": "Teacher not found"}), 404
    return jsonify(teacher.to_dict()), 200
