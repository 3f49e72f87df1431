from datetime import datetime

from app.schemas.base import CamelModel
from app.schemas.participant import ParticipantResponse
from app.schemas.question import QuestionResponse
from app.schemas.quiz import QuizResponse
from app.schemas.submission import SubmissionResponse


class LeaderboardEntry(CamelModel):
    """리더보드 항목 (조회 시마다 계산, 저장하지 않음)"""
    participant_id: int
    name: str
    email: str
    score: int
    completion_time: int
    rank: int
    accuracy: int


class QuizStatsResponse(CamelModel):
    """퀴즈 통계 응답 스키마"""
    total_participants: int = 0
    average_score: int = 0
    highest_score: int = 0


class AdminQuizStats(QuizStatsResponse):
    """관리자 대시보드 퀴즈별 통계"""
    quiz_id: int
    title: str
    total_questions: int
    created_at: datetime


class ParticipantResult(ParticipantResponse):
    """제출 기록이 결합된 참가자 결과"""
    submission: SubmissionResponse
    score: int


class QuizResultsResponse(CamelModel):
    """관리자용 퀴즈 상세 결과 응답 스키마"""
    quiz: QuizResponse
    questions: list[QuestionResponse]
    participants: list[ParticipantResult]
    stats: QuizStatsResponse
