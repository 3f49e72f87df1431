from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.base import get_db
from app.schemas import leaderboard as leaderboard_schema
from app.services import export_service, leaderboard_service

router = APIRouter(prefix="/quizzes", tags=["leaderboard"])

POLL_INTERVAL_HEADER = "X-Poll-Interval"


@router.get("/{quiz_id}/leaderboard", response_model=list[leaderboard_schema.LeaderboardEntry])
async def get_leaderboard(
    quiz_id: int,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """리더보드 조회 API (클라이언트는 X-Poll-Interval 초 간격으로 다시 조회)"""
    response.headers[POLL_INTERVAL_HEADER] = str(settings.leaderboard_poll_interval_seconds)
    return await leaderboard_service.get_leaderboard(db, quiz_id)


@router.get("/{quiz_id}/stats", response_model=leaderboard_schema.QuizStatsResponse)
async def get_quiz_stats(
    quiz_id: int,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 통계 조회 API"""
    response.headers[POLL_INTERVAL_HEADER] = str(settings.leaderboard_poll_interval_seconds)
    return await leaderboard_service.get_quiz_stats(db, quiz_id)


@router.get("/{quiz_id}/export")
async def export_results(
    quiz_id: int,
    db: AsyncSession = Depends(get_db),
):
    """결과 CSV 내보내기 API"""
    csv_text = await export_service.export_leaderboard_csv(db, quiz_id)
    filename = export_service.build_export_filename(quiz_id)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
