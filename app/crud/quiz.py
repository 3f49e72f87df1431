from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.quiz import Quiz


async def create_quiz(
    session: AsyncSession,
    title: str,
    time_limit: int,
    is_active: bool = True,
) -> Quiz:
    """퀴즈 생성"""
    quiz = Quiz(
        title=title,
        time_limit=time_limit,
        is_active=is_active,
    )
    session.add(quiz)
    await session.commit()
    await session.refresh(quiz)
    return quiz


async def get_quiz_by_id(session: AsyncSession, quiz_id: int) -> Quiz | None:
    """ID로 퀴즈 조회"""
    result = await session.execute(select(Quiz).where(Quiz.id == quiz_id))
    return result.scalar_one_or_none()


async def get_quiz_by_qr_code(session: AsyncSession, qr_code: str) -> Quiz | None:
    """QR 참가 토큰으로 퀴즈 조회"""
    result = await session.execute(select(Quiz).where(Quiz.qr_code == qr_code))
    return result.scalar_one_or_none()


async def get_quiz_with_questions(session: AsyncSession, quiz_id: int) -> Quiz | None:
    """퀴즈 조회 (문제 목록을 order_index 순으로 함께 로드)"""
    stmt = (
        select(Quiz)
        .where(Quiz.id == quiz_id)
        .options(selectinload(Quiz.questions))
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_all_quizzes(session: AsyncSession) -> Sequence[Quiz]:
    """모든 퀴즈 조회"""
    result = await session.execute(select(Quiz).order_by(Quiz.id))
    return result.scalars().all()


async def update_quiz_qr_code(
    session: AsyncSession,
    quiz_id: int,
    qr_code: str,
) -> Quiz | None:
    """퀴즈 QR 참가 토큰 저장"""
    quiz = await get_quiz_by_id(session, quiz_id)
    if not quiz:
        return None
    
    quiz.qr_code = qr_code
    await session.commit()
    await session.refresh(quiz)
    return quiz
