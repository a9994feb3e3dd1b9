import pytest

from classes.quiz_session import QuizSession, check_answer, grade_answers, percentage, star_rating, score_message

QUESTIONS = [
    {"id": 1, "type": "multiple_choice", "options": ["Mercúrio", "Vênus", "Terra"], "correct_answer": "Mercúrio",
     "points": 1},
    {"id": 2, "type": "true_false", "correct_answer": "false", "points": 1},
    {"id": 3, "type": "text", "correct_answer": "Plutão", "points": 2, "explanation": "Reclassificado em 2006."},
]


@pytest.mark.parametrize("score, stars", [
    (100, 5), (90, 5), (89, 4), (80, 4), (79, 3), (70, 3), (69, 2), (60, 2), (59, 1), (0, 1),
])
def test_star_rating_bands(score, stars):
    assert star_rating(score) == stars


def test_score_message_follows_band():
    assert score_message(95).startswith("Excellent")
    assert score_message(10).startswith("You need to study more")


def test_percentage_rounds_and_handles_empty_quiz():
    assert percentage(2, 3) == 67
    assert percentage(1, 3) == 33
    assert percentage(0, 0) == 0


@pytest.mark.parametrize("answer, expected", [
    ("Mercúrio", True),
    ("  mercúrio ", True),
    (0, True),
    ("0", True),
    (1, False),
    (7, False),
    ("Júpiter", False),
    (True, False),
    (None, False),
])
def test_multiple_choice_answers(answer, expected):
    assert check_answer(QUESTIONS[0], answer) is expected


def test_true_false_and_text_answers():
    assert check_answer(QUESTIONS[1], False) is True
    assert check_answer(QUESTIONS[1], "Falso") is True
    assert check_answer(QUESTIONS[1], "talvez") is False
    assert check_answer(QUESTIONS[2], "PLUTÃO") is True
    assert check_answer(QUESTIONS[2], "Ceres") is False


def test_grade_answers_breakdown():
    graded = grade_answers(QUESTIONS, ["Terra", "false", "Plutão"])

    assert graded["correct_answers"] == 2
    assert graded["total_questions"] == 3
    assert graded["score"] == 67
    assert graded["stars"] == 2
    assert graded["points_earned"] == 3
    assert graded["points_possible"] == 4
    first = graded["answers"][0]
    assert first == {
        "question_id": 1,
        "selected_answer": "Terra",
        "correct_answer": "Mercúrio",
        "is_correct": False,
        "points": 0,
        "explanation": None,
    }


def test_grade_answers_length_mismatch():
    with pytest.raises(ValueError):
        grade_answers(QUESTIONS, ["Mercúrio"])


def test_grade_empty_quiz():
    graded = grade_answers([], [])
    assert graded["score"] == 0
    assert graded["stars"] == 1


def test_session_navigation_stays_in_bounds():
    session = QuizSession(QUESTIONS)

    assert session.is_first
    assert session.previous() == 0
    assert session.progress == 33

    assert session.next() == 1
    assert session.next() == 2
    assert session.is_last
    assert session.next() == 2
    assert session.progress == 100


def test_session_answers_are_kept_when_moving_back():
    session = QuizSession(QUESTIONS)
    session.answer("Mercúrio")
    session.next()
    session.answer("true")
    session.previous()

    assert session.answers == ["Mercúrio", "true", None]
    assert session.is_correct() is True
    assert session.is_correct(1) is False
    assert session.answered_count == 2
    assert not session.all_answered


def test_session_changing_an_answer_replaces_it():
    session = QuizSession(QUESTIONS)
    session.answer("Terra")
    session.answer("Mercúrio")
    assert session.answers[0] == "Mercúrio"


def test_finish_requires_every_answer():
    session = QuizSession(QUESTIONS)
    session.answer("Mercúrio")
    with pytest.raises(ValueError):
        session.finish()

    session.answer("false", index=1)
    session.answer("Plutão", index=2)
    result = session.finish()
    assert result["score"] == 100
    assert result["stars"] == 5


def test_answer_index_out_of_range():
    session = QuizSession(QUESTIONS)
    with pytest.raises(IndexError):
        session.answer("x", index=3)


def test_empty_session():
    session = QuizSession([])
    assert session.current_question is None
    assert session.progress == 0
    with pytest.raises(ValueError):
        session.answer("x")


@pytest.mark.parametrize("answer", ["²", "٣x", "½"])
def test_non_decimal_digits_are_just_wrong(answer):
    assert check_answer(QUESTIONS[0], answer) is False


def test_stored_answer_with_superscript_is_not_an_index():
    question = {"type": "multiple_choice", "options": ["10²", "10³"], "correct_answer": "²"}
    assert check_answer(question, 0) is False
    assert check_answer(question, "²") is False
