import json
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class AnswerSubmitRequest(CamelModel):
    """문항별 답안 제출 요청 스키마 (실시간 점수 집계)"""
    participant_id: int = Field(..., description="참가자 ID")
    quiz_id: int = Field(..., description="퀴즈 ID")
    question_id: int = Field(..., description="문제 ID")
    is_correct: bool = Field(..., description="정답 여부")
    points: int = Field(10, ge=1, description="문제 배점")


class AnswerSubmitResponse(CamelModel):
    """문항별 답안 제출 응답 스키마"""
    success: bool
    score: int
    updated_at: datetime


class SubmissionFinalizeRequest(CamelModel):
    """최종 제출 요청 스키마

    score/total_questions를 생략하면 서버가 문제 정답과 비교해 직접 채점한다.
    """
    participant_id: int = Field(..., description="참가자 ID")
    quiz_id: int = Field(..., description="퀴즈 ID")
    answers: dict[str, Any] = Field(default_factory=dict, description="{문제 ID: 답안}")
    score: int | None = Field(None, ge=0, description="클라이언트 채점 점수")
    total_questions: int | None = Field(None, ge=0, description="전체 문제 수")
    completion_time: int = Field(..., ge=0, description="소요 시간 (초)")

    @field_validator("answers", mode="before")
    @classmethod
    def parse_answers(cls, v: Any) -> Any:
        """프론트엔드가 JSON 문자열로 보낸 답안도 허용"""
        if isinstance(v, str):
            try:
                v = json.loads(v) if v.strip() else {}
            except json.JSONDecodeError as e:
                raise ValueError(f"answers JSON 파싱 실패: {e.msg}")
        if v is None:
            return {}
        return v


class SubmissionResponse(CamelModel):
    """제출 기록 응답 스키마"""
    id: int
    participant_id: int
    quiz_id: int
    answers: str
    score: int
    total_questions: int
    completion_time: int
    submitted_at: datetime
