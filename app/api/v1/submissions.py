from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import submission as submission_schema
from app.services import submission_service

router = APIRouter(tags=["submissions"])


@router.post("/submissions", response_model=submission_schema.SubmissionResponse)
async def create_submission(
    request: submission_schema.SubmissionFinalizeRequest,
    db: AsyncSession = Depends(get_db),
):
    """최종 제출 API (이미 제출 기록이 있으면 같은 기록을 갱신)"""
    return await submission_service.finalize_submission(db, request)


@router.put("/submissions", response_model=submission_schema.SubmissionResponse)
async def update_submission(
    request: submission_schema.SubmissionFinalizeRequest,
    db: AsyncSession = Depends(get_db),
):
    """제출 기록 갱신 API (기록이 없으면 생성)"""
    return await submission_service.finalize_submission(db, request)


@router.post("/submit-answer", response_model=submission_schema.AnswerSubmitResponse)
async def submit_answer(
    request: submission_schema.AnswerSubmitRequest,
    db: AsyncSession = Depends(get_db),
):
    """문항별 답안 제출 API (실시간 점수 반환)"""
    return await submission_service.record_answer(db, request)
