import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import quiz as quiz_crud
from app.exceptions import QrCodeGenerationError, QuizNotFoundError, QuizQrCodeNotFoundError
from app.schemas import quiz as quiz_schema
from app.services import qr_service

logger = logging.getLogger(__name__)


async def create_quiz(
    session: AsyncSession,
    request: quiz_schema.QuizCreateRequest,
) -> quiz_schema.QuizResponse:
    """퀴즈 생성"""
    quiz = await quiz_crud.create_quiz(
        session,
        title=request.title,
        time_limit=request.time_limit,
        is_active=request.is_active,
    )
    logger.info(f"퀴즈 생성: quiz_id={quiz.id}, title={quiz.title}, time_limit={quiz.time_limit}")
    return quiz_schema.QuizResponse.model_validate(quiz)


async def get_quiz_with_questions(
    session: AsyncSession,
    quiz_id: int,
) -> quiz_schema.QuizWithQuestionsResponse:
    """문제 목록을 포함한 퀴즈 조회"""
    quiz = await quiz_crud.get_quiz_with_questions(session, quiz_id)
    if not quiz:
        raise QuizNotFoundError(quiz_id)
    return quiz_schema.QuizWithQuestionsResponse.model_validate(quiz)


async def get_quiz_by_qr_code(
    session: AsyncSession,
    qr_code: str,
) -> quiz_schema.QuizResponse:
    """QR 참가 토큰으로 퀴즈 조회"""
    quiz = await quiz_crud.get_quiz_by_qr_code(session, qr_code)
    if not quiz:
        raise QuizQrCodeNotFoundError(qr_code)
    return quiz_schema.QuizResponse.model_validate(quiz)


async def generate_qr_code(
    session: AsyncSession,
    quiz_id: int,
    origin: str,
) -> quiz_schema.QrCodeResponse:
    """참가 토큰 발급 및 QR 이미지 생성

    다시 호출하면 새 토큰으로 교체되며 이전 토큰으로는 더 이상 조회되지 않는다.
    """
    quiz = await quiz_crud.get_quiz_by_id(session, quiz_id)
    if not quiz:
        raise QuizNotFoundError(quiz_id)

    token = qr_service.generate_join_token(quiz_id)
    join_url = qr_service.build_join_url(origin, token)

    try:
        data_url = qr_service.render_qr_data_url(join_url)
    except Exception as e:
        logger.error(f"QR 코드 렌더링 실패: quiz_id={quiz_id}, error={e}", exc_info=True)
        raise QrCodeGenerationError()

    updated_quiz = await quiz_crud.update_quiz_qr_code(session, quiz_id, token)
    if not updated_quiz:
        raise QuizNotFoundError(quiz_id)

    logger.info(f"QR 코드 생성: quiz_id={quiz_id}, join_url={join_url}")
    return quiz_schema.QrCodeResponse(
        qr_code=token,
        qr_code_data_url=data_url,
        quiz=quiz_schema.QuizResponse.model_validate(updated_quiz),
    )
