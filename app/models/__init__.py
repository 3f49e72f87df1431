from app.models.base import Base, get_db
from app.models.participant import Participant
from app.models.question import Question
from app.models.quiz import Quiz
from app.models.submission import Submission

__all__ = ["Base", "Quiz", "Question", "Participant", "Submission", "get_db"]
