from datetime import datetime
from models import db

QUESTION_TYPES = ("multiple_choice", "true_false", "text")


class QuizQuestion(db.Model):
    __tablename__ = "quiz_questions"

    id = db.Column(db.Integer, primary_key=True)
    quiz_id = db.Column(db.Integer, db.ForeignKey("quizzes.id"), nullable=False)
    planet_id = db.Column(db.Integer, db.ForeignKey("planets.id"), nullable=True)
    question = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default="multiple_choice")
    options = db.Column(db.JSON, nullable=True)
    correct_answer = db.Column(db.Text, nullable=False)
    explanation = db.Column(db.Text, nullable=True)
    points = db.Column(db.Integer, nullable=False, default=1)
    order = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    quiz = db.relationship("Quiz", back_populates="questions")
    planet = db.relationship("Planet")

    def to_dict(self, include_answer=True, include_quiz=False):
        data = {
            "id": self.id,
            "quiz_id": self.quiz_id,
            "planet_id": self.planet_id,
            "question": self.question,
            "type": self.type,
            "options": self.options,
            "points": self.points,
            "order": self.order,
            "is_active": self.is_active,
        }
        if include_answer:
            data["correct_answer"] = self.correct_answer
            data["explanation"] = self.explanation
        if include_quiz and self.quiz:
            data["quiz"] = self.quiz.to_dict(include_questions=False)
        return data
