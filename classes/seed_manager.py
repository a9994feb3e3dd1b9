import logging

from models import db
from models.teachers import Teacher
from models.planets import Planet
from models.moons import Moon
from models.quizzes import Quiz
from models.quiz_questions import QuizQuestion
from catalog.solar_system import PLANETS, MOONS
from catalog.starter_quizzes import STARTER_QUIZZES
from classes.validators import validate_email, validate_question, validate_role

logger = logging.getLogger(__name__)


class SeedManager:
    """Idempotent loading of the admin account and reference data."""

    @staticmethod
    def ensure_admin(email, password, name="Administrador"):
        email = validate_email(email)
        teacher = Teacher.query.filter_by(email=email).first()
        if teacher:
            return teacher, False

        teacher = Teacher(email=email, name=name, role="admin")
        teacher.set_password(password)
        db.session.add(teacher)
        db.session.commit()
        logger.info("Admin created: %s", email)
        return teacher, True

    @staticmethod
    def seed_planets():
        """Insert missing planets and moons; returns (planets, moons) added."""
        planets_added = 0
        for index, data in enumerate(PLANETS, start=1):
            if Planet.query.filter_by(name=data["name"]).first():
                continue
            db.session.add(Planet(order=index, **data))
            planets_added += 1
        db.session.flush()

        moons_added = 0
        order_by_planet = {}
        for data in MOONS:
            planet = Planet.query.filter_by(name=data["planet"]).first()
            if not planet:
                continue
            order_by_planet[planet.id] = order_by_planet.get(planet.id, 0) + 1
            if Moon.query.filter_by(planet_id=planet.id, name=data["name"]).first():
                continue
            fields = {key: value for key, value in data.items() if key != "planet"}
            db.session.add(Moon(planet_id=planet.id, order=order_by_planet[planet.id], **fields))
            moons_added += 1

        db.session.commit()
        logger.info("Seeded %s planets and %s moons", planets_added, moons_added)
        return planets_added, moons_added

    @staticmethod
    def seed_quizzes():
        """Insert starter quizzes whose title is not taken yet."""
        added = 0
        for quiz_data in STARTER_QUIZZES:
            if Quiz.query.filter_by(title=quiz_data["title"]).first():
                continue

            quiz = Quiz(
                title=quiz_data["title"],
                description=quiz_data["description"],
                difficulty=quiz_data["difficulty"],
                order=quiz_data["order"],
            )
            for position, data in enumerate(quiz_data["questions"], start=1):
                question_type = data.get("type", "multiple_choice")
                options, correct_answer = validate_question(
                    question_type, data.get("options"), data["correct_answer"]
                )
                planet = Planet.query.filter_by(name=data["planet"]).first() if data.get("planet") else None
                quiz.questions.append(QuizQuestion(
                    question=data["question"],
                    type=question_type,
                    options=options,
                    correct_answer=correct_answer,
                    explanation=data.get("explanation"),
                    points=data.get("points", 1),
                    order=position,
                    planet_id=planet.id if planet else None,
                ))
            db.session.add(quiz)
            added += 1

        db.session.commit()
        logger.info("Seeded %s quizzes", added)
        return added

    @staticmethod
    def set_password(email, password):
        teacher = Teacher.query.filter_by(email=email.strip().lower()).first()
        if not teacher:
            return False
        teacher.set_password(password)
        db.session.commit()
        return True

    @staticmethod
    def create_teacher(email, name, password, role="teacher"):
        email = validate_email(email)
        role = validate_role(role)
        if Teacher.query.filter_by(email=email).first():
            raise ValueError(f"Email already in use: {email}")
        teacher = Teacher(email=email, name=name, role=role)
        teacher.set_password(password)
        db.session.add(teacher)
        db.session.commit()
        return teacher
