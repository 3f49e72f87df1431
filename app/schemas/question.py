from typing import Literal

from pydantic import Field, field_validator

from app.schemas.base import CamelModel

QuestionType = Literal["multiple_choice", "true_false", "fill_blank", "reorder", "sort", "match"]


class QuestionCreateRequest(CamelModel):
    """문제 생성 요청 스키마"""
    quiz_id: int = Field(..., description="퀴즈 ID")
    question_text: str = Field(..., min_length=1, description="문제 내용")
    question_type: QuestionType = Field(..., description="문제 유형")
    options: list[str] | None = Field(None, description="선택지 (객관식 등)")
    correct_answer: str = Field(..., min_length=1, description="정답")
    points: int = Field(10, ge=1, description="배점")
    order_index: int | None = Field(None, ge=0, description="표시 순서 (생략 시 마지막에 추가)")

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        cleaned = [option.strip() for option in v]
        if any(not option for option in cleaned):
            raise ValueError("선택지 내용은 비어 있을 수 없습니다")
        return cleaned


class QuestionUpdateRequest(CamelModel):
    """문제 수정 요청 스키마 (부분 수정)"""
    question_text: str | None = Field(None, min_length=1)
    question_type: QuestionType | None = None
    options: list[str] | None = None
    correct_answer: str | None = Field(None, min_length=1)
    points: int | None = Field(None, ge=1)
    order_index: int | None = Field(None, ge=0)


class QuestionResponse(CamelModel):
    """문제 응답 스키마"""
    id: int
    quiz_id: int
    question_text: str
    question_type: str
    options: list[str] | None
    correct_answer: str
    points: int
    order_index: int


class QuestionDeleteResponse(CamelModel):
    """문제 삭제 응답 스키마"""
    message: str
