from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import question as question_schema
from app.services import question_service

router = APIRouter(prefix="/questions", tags=["questions"])


@router.post("", response_model=question_schema.QuestionResponse)
async def create_question(
    request: question_schema.QuestionCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """문제 생성 API"""
    return await question_service.create_question(db, request)


@router.put("/{question_id}", response_model=question_schema.QuestionResponse)
async def update_question(
    question_id: int,
    request: question_schema.QuestionUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    """문제 수정 API (전달된 필드만 수정)"""
    return await question_service.update_question(db, question_id, request)


@router.delete("/{question_id}", response_model=question_schema.QuestionDeleteResponse)
async def delete_question(
    question_id: int,
    db: AsyncSession = Depends(get_db),
):
    """문제 삭제 API"""
    return await question_service.delete_question(db, question_id)
