from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.question import QuestionResponse


class QuizCreateRequest(CamelModel):
    """퀴즈 생성 요청 스키마"""
    title: str = Field(..., min_length=1, description="퀴즈 제목")
    time_limit: int = Field(..., ge=1, description="제한 시간 (분)")
    is_active: bool = Field(True, description="활성 여부")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("퀴즈 제목은 비어 있을 수 없습니다")
        return v


class QuizResponse(CamelModel):
    """퀴즈 응답 스키마"""
    id: int
    title: str
    time_limit: int
    is_active: bool
    qr_code: str | None
    created_at: datetime


class QuizWithQuestionsResponse(QuizResponse):
    """문제 목록을 포함한 퀴즈 응답 스키마"""
    questions: list[QuestionResponse]


class QrCodeResponse(CamelModel):
    """QR 코드 생성 응답 스키마"""
    qr_code: str
    qr_code_data_url: str
    quiz: QuizResponse
