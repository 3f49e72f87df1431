from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


class ParticipantCreateRequest(CamelModel):
    """참가자 등록 요청 스키마"""
    name: str = Field(..., min_length=1, description="이름")
    email: str = Field(..., min_length=3, description="이메일")
    phone: str = Field(..., min_length=1, description="전화번호")
    quiz_id: int = Field(..., description="퀴즈 ID")

    @field_validator("name", "phone")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("필수 항목은 비어 있을 수 없습니다")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError("올바른 이메일 형식이 아닙니다")
        return v


class ParticipantResponse(CamelModel):
    """참가자 응답 스키마"""
    id: int
    name: str
    email: str
    phone: str
    quiz_id: int
    created_at: datetime
