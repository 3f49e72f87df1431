from typing import Any, Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.question import Question


async def create_question(
    session: AsyncSession,
    quiz_id: int,
    question_text: str,
    question_type: str,
    correct_answer: str,
    order_index: int,
    options: list[str] | None = None,
    points: int = 10,
) -> Question:
    """문제 생성"""
    question = Question(
        quiz_id=quiz_id,
        question_text=question_text,
        question_type=question_type,
        options=options,
        correct_answer=correct_answer,
        points=points,
        order_index=order_index,
    )
    session.add(question)
    await session.commit()
    await session.refresh(question)
    return question


async def get_question_by_id(session: AsyncSession, question_id: int) -> Question | None:
    """ID로 문제 조회"""
    result = await session.execute(select(Question).where(Question.id == question_id))
    return result.scalar_one_or_none()


async def get_questions_by_quiz_id(session: AsyncSession, quiz_id: int) -> Sequence[Question]:
    """퀴즈별 문제 목록 조회 (order_index 오름차순)"""
    stmt = (
        select(Question)
        .where(Question.quiz_id == quiz_id)
        .order_by(Question.order_index, Question.id)
    )
    result = await session.execute(stmt)
    return result.scalars().all()


async def get_question_count_by_quiz_id(session: AsyncSession, quiz_id: int) -> int:
    """퀴즈별 문제 개수 조회"""
    count_stmt = select(func.count(Question.id)).where(Question.quiz_id == quiz_id)
    total_count = await session.scalar(count_stmt)
    return total_count or 0


async def update_question(
    session: AsyncSession,
    question_id: int,
    values: dict[str, Any],
) -> Question | None:
    """문제 부분 수정 (전달된 필드만 반영)"""
    question = await get_question_by_id(session, question_id)
    if not question:
        return None
    
    for field, value in values.items():
        setattr(question, field, value)
    
    await session.commit()
    await session.refresh(question)
    return question


async def delete_question(session: AsyncSession, question_id: int) -> bool:
    """문제 삭제 (이미 기록된 답안은 건드리지 않음)"""
    question = await get_question_by_id(session, question_id)
    if not question:
        return False
    
    await session.delete(question)
    await session.commit()
    return True
