import logging

from flask import Blueprint, request, jsonify
from models import db
from models.quizzes import Quiz
from models.quiz_results import QuizResult
from classes.quiz_session import grade_answers
from classes.validators import to_int, validate_text

quizzes_bp = Blueprint("quizzes", __name__)
logger = logging.getLogger(__name__)

MAX_RESULTS = 50


def get_active_quiz(quiz_id):
    quiz = db.session.get(Quiz, quiz_id)
    if not quiz or not quiz.is_active:
        return None
    return quiz

# List active quizzes
@quizzes_bp.route("", methods=["GET"])
def list_quizzes():
    quizzes = Quiz.query.filter_by(is_active=True).order_by(Quiz.order.asc(), Quiz.id.asc()).all()
    return jsonify([quiz.to_dict(include_questions=False) for quiz in quizzes]), 200

# Quiz with its questions, answers stay on the server
@quizzes_bp.route("/<int:quiz_id>", methods=["GET"])
def get_quiz(quiz_id):
    quiz = get_active_quiz(quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404
    return jsonify(quiz.to_dict(include_answers=False)), 200

@quizzes_bp.route("/<int:quiz_id>/submit", methods=["POST"])
def submit_quiz(quiz_id):
    quiz = get_active_quiz(quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Request body must be a JSON object"}), 400

    answers = data.get("answers")
    if not isinstance(answers, list):
        return jsonify({"error": "Answers must be a list"}), 400

    try:
        player_name = validate_text("player_name", data.get("player_name"), 100, required=False) or "Anônimo"
        time_elapsed = to_int("time_elapsed", data.get("time_elapsed"), default=None, minimum=0)
        questions = [q.to_dict() for q in quiz.active_questions]
        graded = grade_answers(questions, answers)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    result = QuizResult(
        quiz_id=quiz.id,
        player_name=player_name,
        score=graded["score"],
        correct_answers=graded["correct_answers"],
        total_questions=graded["total_questions"],
        points_earned=graded["points_earned"],
        points_possible=graded["points_possible"],
        answers=graded["answers"],
        time_elapsed=time_elapsed
    )

    try:
        db.session.add(result)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.exception("Error saving quiz result")
        return jsonify({"error": "Internal server error"}), 500

    logger.info("Quiz %s submitted by %s: %s%%", quiz.id, player_name, result.score)

    response = result.to_dict()
    response.update({
        "quiz_title": quiz.title,
        "stars": graded["stars"],
        "message": graded["message"],
    })
    return jsonify(response), 201

@quizzes_bp.route("/<int:quiz_id>/results", methods=["GET"])
def list_results(quiz_id):
    quiz = get_active_quiz(quiz_id)
    if not quiz:
        return jsonify({"error": "Quiz not found"}), 404

    try:
        limit = to_int("limit", request.args.get("limit"), default=10, minimum=1)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    results = (
        QuizResult.query.filter_by(quiz_id=quiz_id)
        .order_by(QuizResult.completed_at.desc(), QuizResult.id.desc())
        .limit(min(limit, MAX_RESULTS))
        .all()
    )
    return jsonify([result.to_dict() for result in results]), 200
