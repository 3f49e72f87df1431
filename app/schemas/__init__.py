from app.schemas.leaderboard import (
    AdminQuizStats,
    LeaderboardEntry,
    ParticipantResult,
    QuizResultsResponse,
    QuizStatsResponse,
)
from app.schemas.participant import (
    ParticipantCreateRequest,
    ParticipantResponse,
)
from app.schemas.question import (
    QuestionCreateRequest,
    QuestionDeleteResponse,
    QuestionResponse,
    QuestionUpdateRequest,
)
from app.schemas.quiz import (
    QrCodeResponse,
    QuizCreateRequest,
    QuizResponse,
    QuizWithQuestionsResponse,
)
from app.schemas.submission import (
    AnswerSubmitRequest,
    AnswerSubmitResponse,
    SubmissionFinalizeRequest,
    SubmissionResponse,
)

__all__ = [
    "QuizCreateRequest",
    "QuizResponse",
    "QuizWithQuestionsResponse",
    "QrCodeResponse",
    "QuestionCreateRequest",
    "QuestionUpdateRequest",
    "QuestionResponse",
    "QuestionDeleteResponse",
    "ParticipantCreateRequest",
    "ParticipantResponse",
    "AnswerSubmitRequest",
    "AnswerSubmitResponse",
    "SubmissionFinalizeRequest",
    "SubmissionResponse",
    "LeaderboardEntry",
    "QuizStatsResponse",
    "AdminQuizStats",
    "ParticipantResult",
    "QuizResultsResponse",
]
