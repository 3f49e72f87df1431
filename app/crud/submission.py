from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.participant import Participant
from app.models.submission import Submission


async def create_submission(
    session: AsyncSession,
    participant_id: int,
    quiz_id: int,
    answers: str = "{}",
    score: int = 0,
    total_questions: int = 0,
    completion_time: int = 0,
) -> Submission:
    """제출 기록 생성"""
    submission = Submission(
        participant_id=participant_id,
        quiz_id=quiz_id,
        answers=answers,
        score=score,
        total_questions=total_questions,
        completion_time=completion_time,
        submitted_at=datetime.now(timezone.utc),
    )
    session.add(submission)
    await session.commit()
    await session.refresh(submission)
    return submission


async def get_submission_by_participant(
    session: AsyncSession,
    participant_id: int,
) -> Submission | None:
    """참가자 ID로 제출 기록 조회 (참가자당 최대 1건)"""
    result = await session.execute(
        select(Submission).where(Submission.participant_id == participant_id)
    )
    return result.scalar_one_or_none()


async def get_submissions_by_quiz(session: AsyncSession, quiz_id: int) -> Sequence[Submission]:
    """퀴즈별 제출 기록 조회"""
    result = await session.execute(
        select(Submission).where(Submission.quiz_id == quiz_id).order_by(Submission.id)
    )
    return result.scalars().all()


async def get_submissions_with_participants(
    session: AsyncSession,
    quiz_id: int,
) -> list[tuple[Submission, Participant]]:
    """퀴즈별 제출 기록과 참가자 조회

    INNER JOIN이므로 참가자 레코드가 없는 제출 기록은 결과에서 빠진다.
    """
    stmt = (
        select(Submission, Participant)
        .join(Participant, Submission.participant_id == Participant.id)
        .where(Submission.quiz_id == quiz_id)
        .order_by(Submission.id)
    )
    result = await session.execute(stmt)
    return [(row.Submission, row.Participant) for row in result.all()]


async def update_submission(
    session: AsyncSession,
    submission: Submission,
    answers: str | None = None,
    score: int | None = None,
    total_questions: int | None = None,
    completion_time: int | None = None,
    submitted_at: datetime | None = None,
) -> Submission:
    """제출 기록 수정 (전달된 값만 덮어씀)"""
    if answers is not None:
        submission.answers = answers
    if score is not None:
        submission.score = score
    if total_questions is not None:
        submission.total_questions = total_questions
    if completion_time is not None:
        submission.completion_time = completion_time
    if submitted_at is not None:
        submission.submitted_at = submitted_at
    
    await session.commit()
    await session.refresh(submission)
    return submission
