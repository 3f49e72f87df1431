from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.base import get_db
from app.schemas import leaderboard as leaderboard_schema
from app.services import leaderboard_service

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=list[leaderboard_schema.AdminQuizStats])
async def get_admin_stats(
    db: AsyncSession = Depends(get_db),
):
    """관리자 대시보드 통계 API"""
    return await leaderboard_service.get_admin_stats(db)


@router.get("/quizzes/{quiz_id}/results", response_model=leaderboard_schema.QuizResultsResponse)
async def get_quiz_results(
    quiz_id: int,
    db: AsyncSession = Depends(get_db),
):
    """관리자용 퀴즈 상세 결과 API"""
    return await leaderboard_service.get_quiz_results(db, quiz_id)
