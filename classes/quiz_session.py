"""
Quiz flow and scoring.

A quiz is taken as a linear walk over its active questions. Each question
has one answer slot; the score is the share of correct answers.
"""
import logging

from classes.validators import parse_true_false

logger = logging.getLogger(__name__)

SCORE_BANDS = [
    (90, 5, "Excellent! You have mastered the subject!"),
    (80, 4, "Very good! You know this topic well!"),
    (70, 3, "Good job! Keep studying!"),
    (60, 2, "Fair. Review a few concepts."),
    (0, 1, "You need to study more. Don't give up!"),
]


def _normalize(text):
    return " ".join(str(text).split()).lower()

def resolve_choice(question, answer):
    """Option text selected by an answer given as text or zero-based index."""
    options = question.get("options") or []
    if isinstance(answer, bool):
        return None
    if isinstance(answer, int):
        return options[answer] if 0 <= answer < len(options) else None

    text = str(answer).strip()
    for option in options:
        if _normalize(option) == _normalize(text):
            return option
    if text.isdecimal() and int(text) < len(options):
        return options[int(text)]
    return None

def correct_option(question):
    options = question.get("options") or []
    stored = str(question.get("correct_answer", "")).strip()
    if stored in options:
        return stored
    if stored.isdecimal() and int(stored) < len(options):
        return options[int(stored)]
    return stored

def check_answer(question, answer):
    """True when the answer matches the question's correct answer."""
    if answer is None:
        return False

    question_type = question.get("type", "multiple_choice")

    if question_type == "multiple_choice":
        selected = resolve_choice(question, answer)
        return selected is not None and selected == correct_option(question)

    if question_type == "true_false":
        given = parse_true_false(answer)
        expected = parse_true_false(question.get("correct_answer"))
        return given is not None and given == expected

    return _normalize(answer) == _normalize(question.get("correct_answer", ""))

def star_rating(score):
    for threshold, stars, _ in SCORE_BANDS:
        if score >= threshold:
            return stars
    return 1

def score_message(score):
    for threshold, _, message in SCORE_BANDS:
        if score >= threshold:
            return message
    return SCORE_BANDS[-1][2]

def percentage(correct, total):
    if total == 0:
        return 0
    return round(correct / total * 100)

def grade_answers(questions, answers):
    """
    Grade answers given in question order.

    Returns a dict with the score (percentage of correct answers), points
    and the per-question breakdown.
    """
    if len(answers) != len(questions):
        raise ValueError(
            f"Expected {len(questions)} answers, got {len(answers)}."
        )

    breakdown = []
    correct = 0
    points_earned = 0
    points_possible = 0

    for question, answer in zip(questions, answers):
        points = question.get("points", 1)
        is_correct = check_answer(question, answer)
        points_possible += points
        if is_correct:
            correct += 1
            points_earned += points

        breakdown.append({
            "question_id": question.get("id"),
            "selected_answer": answer,
            "correct_answer": correct_option(question) if question.get("type", "multiple_choice") == "multiple_choice"
            else question.get("correct_answer"),
            "is_correct": is_correct,
            "points": points if is_correct else 0,
            "explanation": question.get("explanation"),
        })

    score = percentage(correct, len(questions))
    logger.debug("Graded %s answers: %s correct (%s%%)", len(questions), correct, score)

    return {
        "score": score,
        "correct_answers": correct,
        "total_questions": len(questions),
        "points_earned": points_earned,
        "points_possible": points_possible,
        "stars": star_rating(score),
        "message": score_message(score),
        "answers": breakdown,
    }


class QuizSession:
    """Sequential question flow with one answer slot per question."""

    def __init__(self, questions):
        self.questions = list(questions)
        self.current = 0
        self.answers = [None] * len(self.questions)

    @property
    def current_question(self):
        if not self.questions:
            return None
        return self.questions[self.current]

    @property
    def is_first(self):
        return self.current == 0

    @property
    def is_last(self):
        return self.current >= len(self.questions) - 1

    @property
    def answered_count(self):
        return sum(1 for answer in self.answers if answer is not None)

    @property
    def all_answered(self):
        return all(answer is not None for answer in self.answers)

    @property
    def progress(self):
        if not self.questions:
            return 0
        return round((self.current + 1) / len(self.questions) * 100)

    def answer(self, value, index=None):
        if not self.questions:
            raise ValueError("This quiz has no questions.")
        index = self.current if index is None else index
        if not 0 <= index < len(self.questions):
            raise IndexError(f"Question index {index} out of range.")
        self.answers[index] = value

    def next(self):
        if not self.is_last:
            self.current += 1
        return self.current

    def previous(self):
        if not self.is_first:
            self.current -= 1
        return self.current

    def is_correct(self, index=None):
        index = self.current if index is None else index
        return check_answer(self.questions[index], self.answers[index])

    def finish(self):
        if not self.all_answered:
            missing = len(self.questions) - self.answered_count
            raise ValueError(f"{missing} question(s) still unanswered.")
        return grade_answers(self.questions, self.answers)
