import datetime
import logging

import jwt
from flask import current_app, g

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def get_jwt_token(teacher_data):
    """Generate JWT token with teacher payload"""
    if not teacher_data:
        raise ValueError("Teacher data must be provided to generate JWT token")

    hours = current_app.config.get("JWT_EXPIRATION_HOURS", 24)
    expiration = datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(hours=hours)
    payload = {"exp": expiration, **teacher_data}

    logger.debug("Issuing token for teacher %s", teacher_data.get("teacher_id"))

    return jwt.encode(payload, current_app.config["SECRET_KEY"], algorithm=ALGORITHM)

def decode_jwt(token):
    """Decode and validate JWT token and store teacher claims in `g`."""
    try:
        payload = jwt.decode(token, current_app.config["SECRET_KEY"], algorithms=[ALGORITHM])
        g.user = payload
        return payload
    except jwt.ExpiredSignatureError:
        logger.info("Token expired")
        return None
    except jwt.InvalidTokenError:
        logger.info("Invalid token provided")
        return None

def token_claims(teacher):
    return {
        "teacher_id": teacher.id,
        "email": teacher.email,
        "name": teacher.name,
        "role": teacher.role,
    }
