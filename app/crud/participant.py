from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.participant import Participant


async def create_participant(
    session: AsyncSession,
    name: str,
    email: str,
    phone: str,
    quiz_id: int,
) -> Participant:
    """참가자 생성"""
    participant = Participant(
        name=name,
        email=email,
        phone=phone,
        quiz_id=quiz_id,
    )
    session.add(participant)
    await session.commit()
    await session.refresh(participant)
    return participant


async def get_participant_by_id(session: AsyncSession, participant_id: int) -> Participant | None:
    """ID로 참가자 조회"""
    result = await session.execute(select(Participant).where(Participant.id == participant_id))
    return result.scalar_one_or_none()


async def get_participant_by_email_and_quiz(
    session: AsyncSession,
    email: str,
    quiz_id: int,
) -> Participant | None:
    """이메일과 퀴즈 ID로 참가자 조회 (중복 등록 확인용)"""
    stmt = select(Participant).where(
        Participant.email == email,
        Participant.quiz_id == quiz_id,
    )
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def get_participants_by_quiz_id(session: AsyncSession, quiz_id: int) -> Sequence[Participant]:
    """퀴즈별 참가자 목록 조회 (등록 순)"""
    stmt = select(Participant).where(Participant.quiz_id == quiz_id).order_by(Participant.id)
    result = await session.execute(stmt)
    return result.scalars().all()
