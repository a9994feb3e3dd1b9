from models import db
from datetime import datetime

class QuizResult(db.Model):
    __tablename__ = "quiz_results"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False)
    player_name = db.Column(db.String(100), nullable=False, default="Anônimo")
    score = db.Column(db.Integer, nullable=False)  # percentage 0-100
    correct_answers = db.Column(db.Integer, nullable=False)
    total_questions = db.Column(db.Integer, nullable=False)
    points_earned = db.Column(db.Integer, nullable=False, default=0)
    points_possible = db.Column(db.Integer, nullable=False, default=0)
    answers = db.Column(db.JSON, nullable=True)
    time_elapsed = db.Column(db.Integer, nullable=True)  # seconds
    completed_at = db.Column(db.DateTime, default=datetime.utcnow)

    quiz = db.relationship("Quiz", back_populates="results")

    def to_dict(self):
        return {
            "id": self.id,
            "quiz_id": self.quiz_id,
            "player_name": self.player_name,
            "score": self.score,
            "correct_answers": self.correct_answers,
            "total_questions": self.total_questions,
            "points_earned": self.points_earned,
            "points_possible": self.points_possible,
            "answers": self.answers or [],
            "time_elapsed": self.time_elapsed,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }
