from models import db
from datetime import datetime

DIFFICULTIES = ("easy", "medium", "hard")


class Quiz(db.Model):
    __tablename__ = "quizzes"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    difficulty = db.Column(db.String(20), nullable=False, default="easy")
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    questions = db.relationship(
        "QuizQuestion", back_populates="quiz", cascade="all, delete-orphan", order_by="QuizQuestion.order"
    )
    results = db.relationship("QuizResult", back_populates="quiz", cascade="all, delete-orphan")

    @property
    def active_questions(self):
        """Active questions in display order."""
        return [q for q in self.questions if q.is_active]

    def __repr__(self):
        return f"<Quiz {self.title}>"

    def to_dict(self, include_questions=True, include_answers=True):
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "is_active": self.is_active,
            "order": self.order,
            "total_questions": len(self.active_questions),
            "total_points": sum(q.points for q in self.active_questions),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
        if include_questions:
            data["questions"] = [
                q.to_dict(include_answer=include_answers) for q in self.active_questions
            ]
        return data
