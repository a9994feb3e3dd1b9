import json
import re

from models.quizzes import DIFFICULTIES
from models.quiz_questions import QUESTION_TYPES
from models.teachers import ROLES

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

TRUE_VALUES = {"true", "verdadeiro", "v", "t", "1", "yes", "sim"}
FALSE_VALUES = {"false", "falso", "f", "0", "no", "nao", "não"}


def validate_required(data, *fields):
    missing = [field for field in fields if data.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Missing required fields: {', '.join(missing)}")

def validate_length(field_name, value, max_length):
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string.")
    if len(value) > max_length:
        raise ValueError(f"{field_name} must be {max_length} characters or fewer.")

def validate_text(field_name, value, max_length=None, required=True):
    """
    Stripped string from a JSON field.

    Missing or blank values raise unless ``required`` is False, in which
    case they come back as None.
    """
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string.")
    value = value.strip()
    if not value:
        if required:
            raise ValueError(f"{field_name} is required.")
        return None
    if max_length is not None:
        validate_length(field_name, value, max_length)
    return value

def validate_email(email):
    if not isinstance(email, str) or not EMAIL_RE.match(email):
        raise ValueError("Invalid email address.")
    validate_length("email", email, 120)
    return email.strip().lower()

def validate_password(password, min_length=6):
    if not isinstance(password, str) or len(password) < min_length:
        raise ValueError(f"Password must be at least {min_length} characters.")
    return password

def validate_role(role):
    if role not in ROLES:
        raise ValueError(f"Invalid role. Must be one of: {', '.join(ROLES)}")
    return role

def validate_difficulty(difficulty):
    difficulty = str(difficulty).lower()
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Invalid difficulty. Must be one of: {', '.join(DIFFICULTIES)}")
    return difficulty

def to_int(field_name, value, default=0, minimum=None):
    """Coerce form values like "3" or 3 to int; empty falls back to default."""
    if value in (None, ""):
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer.")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be an integer.")
    if minimum is not None and number < minimum:
        raise ValueError(f"{field_name} must be at least {minimum}.")
    return number

def to_bool(value, default=True):
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value}")

def parse_options(options):
    """
    Normalize question options to a list of non-blank strings.

    Accepts a list, a JSON array string, or one option per line.
    Returns None when there are no options.
    """
    if options in (None, ""):
        return None

    if isinstance(options, str):
        text = options.strip()
        if text.startswith("["):
            try:
                options = json.loads(text)
            except json.JSONDecodeError:
                raise ValueError("Options must be a valid JSON list.")
        else:
            options = text.split("\n")

    if not isinstance(options, list):
        raise ValueError("Options must be a list.")

    cleaned = [str(option).strip() for option in options if str(option).strip()]
    return cleaned or None

def parse_true_false(value):
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    return None

def validate_question(question_type, options, correct_answer):
    """
    Check that a question's answer fits its type.

    Returns the (options, correct_answer) pair to store.
    """
    if question_type not in QUESTION_TYPES:
        raise ValueError(f"Invalid question type. Must be one of: {', '.join(QUESTION_TYPES)}")

    if correct_answer is None or str(correct_answer).strip() == "":
        raise ValueError("A correct answer is required.")
    correct_answer = str(correct_answer).strip()

    if question_type == "multiple_choice":
        if not options or len(options) < 2:
            raise ValueError("Multiple choice questions need at least two options.")
        if correct_answer not in options:
            if not (correct_answer.isdecimal() and int(correct_answer) < len(options)):
                raise ValueError("The correct answer must be one of the options.")
        return options, correct_answer

    if question_type == "true_false":
        parsed = parse_true_false(correct_answer)
        if parsed is None:
            raise ValueError("True/false questions need 'true' or 'false' as the correct answer.")
        return None, "true" if parsed else "false"

    return None, correct_answer
