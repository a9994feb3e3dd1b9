from flask_sqlalchemy import SQLAlchemy

# Initialize SQLAlchemy
db = SQLAlchemy()

# Import models
from models.teachers import Teacher

from models.planets import Planet
from models.moons import Moon

from models.quizzes import Quiz
from models.quiz_questions import QuizQuestion
from models.quiz_results import QuizResult
