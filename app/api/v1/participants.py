from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import participant as participant_schema, submission as submission_schema
from app.services import participant_service, submission_service

router = APIRouter(prefix="/participants", tags=["participants"])


@router.post("", response_model=participant_schema.ParticipantResponse)
async def register_participant(
    request: participant_schema.ParticipantCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """참가자 등록 API"""
    return await participant_service.register_participant(db, request)


@router.get("/{participant_id}/submission", response_model=submission_schema.SubmissionResponse)
async def get_participant_submission(
    participant_id: int,
    db: AsyncSession = Depends(get_db),
):
    """참가자 제출 기록 조회 API"""
    return await submission_service.get_submission(db, participant_id)
