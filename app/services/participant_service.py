import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import participant as participant_crud, quiz as quiz_crud
from app.exceptions import DuplicateParticipantError, QuizNotFoundError
from app.schemas import participant as participant_schema

logger = logging.getLogger(__name__)


async def register_participant(
    session: AsyncSession,
    request: participant_schema.ParticipantCreateRequest,
) -> participant_schema.ParticipantResponse:
    """참가자 등록 (같은 퀴즈에 같은 이메일은 한 번만 등록 가능)"""
    quiz = await quiz_crud.get_quiz_by_id(session, request.quiz_id)
    if not quiz:
        raise QuizNotFoundError(request.quiz_id)

    existing = await participant_crud.get_participant_by_email_and_quiz(
        session,
        request.email,
        request.quiz_id,
    )
    if existing:
        logger.warning(f"중복 참가 등록 시도: email={request.email}, quiz_id={request.quiz_id}")
        raise DuplicateParticipantError(request.email, request.quiz_id)

    try:
        participant = await participant_crud.create_participant(
            session,
            name=request.name,
            email=request.email,
            phone=request.phone,
            quiz_id=request.quiz_id,
        )
    except IntegrityError:
        # 조회와 생성 사이에 같은 참가자가 먼저 등록된 경우 (유니크 제약 위반)
        await session.rollback()
        raise DuplicateParticipantError(request.email, request.quiz_id)

    logger.info(f"참가자 등록: participant_id={participant.id}, quiz_id={participant.quiz_id}")
    return participant_schema.ParticipantResponse.model_validate(participant)
