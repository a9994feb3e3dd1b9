import pytest

from app import create_app
from models import db
from models.teachers import Teacher
from classes.seed_manager import SeedManager
from utils.tokens import get_jwt_token, token_claims

ADMIN_EMAIL = "admin@planetario.edu.br"
TEACHER_EMAIL = "professora@planetario.edu.br"
PASSWORD = "secret123"


@pytest.fixture
def app():
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        SeedManager.create_teacher(ADMIN_EMAIL, "Administrador", PASSWORD, role="admin")
        SeedManager.create_teacher(TEACHER_EMAIL, "Ana Souza", PASSWORD, role="teacher")
        SeedManager.seed_planets()
        SeedManager.seed_quizzes()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _headers_for(app, email):
    with app.app_context():
        teacher = Teacher.query.filter_by(email=email).first()
        token = get_jwt_token(token_claims(teacher))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _headers_for(app, ADMIN_EMAIL)


@pytest.fixture
def teacher_headers(app):
    return _headers_for(app, TEACHER_EMAIL)


@pytest.fixture
def admin_id(app):
    with app.app_context():
        return Teacher.query.filter_by(email=ADMIN_EMAIL).first().id


@pytest.fixture
def teacher_id(app):
    with app.app_context():
        return Teacher.query.filter_by(email=TEACHER_EMAIL).first().id
