import logging

from flask import Blueprint, request, jsonify, g
from models import db
from models.teachers import Teacher
from models.planets import Planet
from models.quizzes import Quiz
from models.quiz_questions import QuizQuestion
from models.quiz_results import QuizResult
from classes.validators import (
    validate_required, validate_text, validate_password, validate_email, validate_role, validate_difficulty,
    validate_question, parse_options, to_int, to_bool
)
from utils.utils import staff_required, admin_required

admin_bp = Blueprint('admin', __name__)
logger = logging.getLogger(__name__)

# The admin frontend posts camelCase keys
ALIASES = {
    "quiz_id": "quizId",
    "planet_id": "planetId",
    "correct_answer": "correctAnswer",
    "is_active": "isActive",
}


def get_field(data, name, default=None):
    if name in data:
        return data[name]
    alias = ALIASES.get(name)
    if alias and alias in data:
        return data[alias]
    return default

def has_field(data, name):
    return name in data or ALIASES.get(name) in data

def get_payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data

def server_error(action):
    db.session.rollback()
    logger.exception("Error %s", action)
    return jsonify({"error": "Internal server error"}), 500

#__________________________________________________________________________________________ * Quizzes *__________________________________________________

def apply_quiz_fields(quiz, data, partial=False):
    if not partial or "title" in data:
        quiz.title = validate_text("Title", data.get("title"), 255)
    if not partial or "description" in data:
        quiz.description = validate_text("Description", data.get("description"), required=False)
    if not partial or "difficulty" in data:
        quiz.difficulty = validate_difficulty(data.get("difficulty") or "easy")
    if not partial or has_field(data, "is_active"):
        quiz.is_active = to_bool(get_field(data, "is_active"), default=True)
    if not partial or "order" in data:
        quiz.order = to_int("order", data.get("order"), default=0)

@admin_bp.route('/quizzes', methods=['GET'])
@staff_required
def list_quizzes():
    quizzes = Quiz.query.order_by(Quiz.order.asc(), Quiz.id.asc()).all()
    return jsonify([quiz.to_dict() for quiz in quizzes]), 200

@admin_bp.route('/quizzes', methods=['POST'])
@staff_required
def create_quiz():
    try:
        data = get_payload()
        quiz = Quiz()
        apply_quiz_fields(quiz, data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        db.session.add(quiz)
        db.session.commit()
    except Exception:
        return server_error("creating quiz")

    logger.info("Quiz %s created by %s", quiz.id, g.user.get("email"))
    return jsonify(quiz.to_dict()), 201

@admin_bp.route('/quizzes/<int:quiz_id>', methods=['GET'])
@staff_required
def get_quiz(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404
    return jsonify(quiz.to_dict()), 200

@admin_bp.route('/quizzes/<int:quiz_id>', methods=['PUT'])
@staff_required
def update_quiz(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    try:
        apply_quiz_fields(quiz, get_payload(), partial=True)
    except ValueError as e:
        db.session.rollback()
        return jsonify({"error": str(e)}), 400

    try:
        db.session.commit()
    except Exception:
        return server_error("updating quiz")

    return jsonify(quiz.to_dict()), 200

@admin_bp.route('/quizzes/<int:quiz_id>', methods=['DELETE'])
@staff_required
def delete_quiz(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    try:
        db.session.delete(quiz)
        db.session.commit()
    except Exception:
        return server_error("deleting quiz")

    logger.info("Quiz %s deleted by %s", quiz_id, g.user.get("email"))
    return jsonify({"message": "Quiz deleted successfully"}), 200

@admin_bp.route('/quizzes/<int:quiz_id>/report', methods=['GET'])
@staff_required
def quiz_report(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    results = QuizResult.query.filter_by(quiz_id=quiz_id).all()
    scores = [result.score for result in results]

    hits = {}
    for result in results:
        for answer in result.answers or []:
            stats = hits.setdefault(answer.get("question_id"), {"attempts": 0, "correct": 0})
            stats["attempts"] += 1
            if answer.get("is_correct"):
                stats["correct"] += 1

    questions = []
    for question in quiz.active_questions:
        stats = hits.get(question.id, {"attempts": 0, "correct": 0})
        questions.append({
            "question_id": question.id,
            "question": question.question,
            "attempts": stats["attempts"],
            "correct": stats["correct"],
            "hit_rate": round(stats["correct"] / stats["attempts"] * 100) if stats["attempts"] else None,
        })

    return jsonify({
        "quiz_id": quiz.id,
        "title": quiz.title,
        "attempts": len(results),
        "average_score": round(sum(scores) / len(scores), 1) if scores else None,
        "best_score": max(scores) if scores else None,
        "worst_score": min(scores) if scores else None,
        "questions": questions,
    }), 200

#__________________________________________________________________________________________ * Quiz questions *__________________________________________________

def apply_question_fields(question, data, partial=False):
    if not partial or has_field(data, "quiz_id"):
        quiz_id = to_int("quiz_id", get_field(data, "quiz_id"), default=None)
        if quiz_id is None or not db.session.get(Quiz, quiz_id):
            raise ValueError("A valid quiz_id is required")
        question.quiz_id = quiz_id

    if not partial or has_field(data, "planet_id"):
        planet_ref = get_field(data, "planet_id")
        if planet_ref in (None, ""):
            question.planet_id = None
        else:
            planet = Planet.lookup(planet_ref)
            if not planet:
                raise ValueError("Planet not found")
            question.planet_id = planet.id

    if not partial or "question" in data:
        question.question = validate_text("Question text", data.get("question"))

    question_type = data.get("type") or question.type or "multiple_choice"
    options = parse_options(data["options"]) if "options" in data else question.options
    correct_answer = get_field(data, "correct_answer", question.correct_answer)
    question.options, question.correct_answer = validate_question(question_type, options, correct_answer)
    question.type = question_type

    if not partial or "explanation" in data:
        question.explanation = validate_text("Explanation", data.get("explanation"), required=False)
    if not partial or "points" in data:
        question.points = to_int("points", data.get("points"), default=1, minimum=0)
    if not partial or "order" in data:
        question.order = to_int("order", data.get("order"), default=0)
    if not partial or has_field(data, "is_active"):
        question.is_active = to_bool(get_field(data, "is_active"), default=True)

@admin_bp.route('/quiz-questions', methods=['GET'])
@staff_required
def list_questions():
    query = QuizQuestion.query
    quiz_id = request.args.get("quizId") or request.args.get("quiz_id")
    if quiz_id:
        try:
            query = query.filter_by(quiz_id=to_int("quizId", quiz_id))
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

    questions = query.order_by(QuizQuestion.order.asc(), QuizQuestion.id.asc()).all()
    return jsonify([q.to_dict(include_quiz=True) for q in questions]), 200

@admin_bp.route('/quiz-questions', methods=['POST'])
@staff_required
def create_question():
    try:
        data = get_payload()
        validate_required(data, "question")
        question = QuizQuestion()
        apply_question_fields(question, data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    try:
        db.session.add(question)
        db.session.commit()
    except Exception:
        return server_error("creating quiz question")

    return jsonify(question.to_dict()), 201

@admin_bp.route('/quiz-questions/<int:question_id>', methods=['GET'])
@staff_required
def get_question(question_id):
    question = db.session.get(QuizQuestion, question_id)
    if not question:
        return jsonify({"error": "Question not found"}), 404
    return jsonify(question.to_dict(include_quiz=True)), 200

@admin_bp.route('/quiz-questions/<int:question_id>', methods=['PUT'])
@staff_required
def update_question(question_id):
    question = db.session.get(QuizQuestion, question_id)
    if not question:
        return jsonify({"error": "Question not found"}), 404

    try:
        apply_question_fields(question, get_payload(), partial=True)
    except ValueError as e:
        db.session.rollback()
        return jsonify({"error": str(e)}), 400

    try:
        db.session.commit()
    except Exception:
        return server_error("updating quiz question")

    return jsonify(question.to_dict()), 200

@admin_bp.route('/quiz-questions/<int:question_id>', methods=['DELETE'])
@staff_required
def delete_question(question_id):
    question = db.session.get(QuizQuestion, question_id)
    if not question:
        return jsonify({"error": "Question not found"}), 404

    try:
        db.session.delete(question)
        db.session.commit()
    except Exception:
        return server_error("deleting quiz question")

    return jsonify({"message": "Question deleted successfully"}), 200

#__________________________________________________________________________________________ * Teachers *__________________________________________________

@admin_bp.route('/teachers', methods=['GET'])
@staff_required
def list_teachers():
    teachers = Teacher.query.order_by(Teacher.created_at.desc(), Teacher.id.desc()).all()
    return jsonify([teacher.to_dict() for teacher in teachers]), 200

@admin_bp.route('/teachers/<int:teacher_id>', methods=['GET'])
@staff_required
def get_teacher(teacher_id):
    teacher = db.session.get(Teacher, teacher_id)
    if not teacher:
        return jsonify({"error": "Teacher not found"}), 404
    return jsonify(teacher.to_dict()), 200

@admin_bp.route('/teachers', methods=['POST'])
@admin_required
def create_teacher():
    try:
        data = get_payload()
        validate_required(data, "email", "password", "name")
        email = validate_email(data["email"])
        name = validate_text("Name", data["name"], 100)
        role = validate_role(data.get("role") or "teacher")
        password = validate_password(data["password"])
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    if Teacher.query.filter_by(email=email).first():
        return jsonify({"error": "Email already in use"}), 409

    teacher = Teacher(email=email, name=name, role=role)
    teacher.set_password(password)

    try:
        db.session.add(teacher)
        db.session.commit()
    except Exception:
        return server_error("creating teacher")

    logger.info("Teacher %s (%s) created by %s", teacher.email, teacher.role, g.user.get("email"))
    return jsonify(teacher.to_dict()), 201

@admin_bp.route('/teachers/<int:teacher_id>', methods=['PUT'])
@admin_required
def update_teacher(teacher_id):
    teacher = db.session.get(Teacher, teacher_id)
    if not teacher:
        return jsonify({"error": "Teacher not found"}), 404

    try:
        data = get_payload()
        if data.get("email"):
            email = validate_email(data["email"])
            clash = Teacher.query.filter(Teacher.email == email, Teacher.id != teacher_id).first()
            if clash:
                return jsonify({"error": "Email already in use"}), 409
            teacher.email = email
        if data.get("name"):
            teacher.name = validate_text("Name", data["name"], 100)
        if data.get("role"):
            teacher.role = validate_role(data["role"])
        if data.get("password"):
            teacher.set_password(validate_password(data["password"]))
    except ValueError as e:
        db.session.rollback()
        return jsonify({"error": str(e)}), 400

    try:
        db.session.commit()
    except Exception:
        return server_error("updating teacher")

    return jsonify(teacher.to_dict()), 200

@admin_bp.route('/teachers/<int:teacher_id>', methods=['DELETE'])
@admin_required
def delete_teacher(teacher_id):
    if g.user.get("teacher_id") == teacher_id:
        return jsonify({"error": "You cannot delete your own account"}), 400

    teacher = db.session.get(Teacher, teacher_id)
    if not teacher:
        return jsonify({"error": "Teacher not found"}), 404

    try:
        db.session.delete(teacher)
        db.session.commit()
    except Exception:
        return server_error("deleting teacher")

    logger.info("Teacher %s deleted by %s", teacher_id, g.user.get("email"))
    return jsonify({"message": "Teacher deleted successfully"}), 200
