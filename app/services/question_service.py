import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import question as question_crud, quiz as quiz_crud
from app.exceptions import InvalidQuestionError, QuestionNotFoundError, QuizNotFoundError
from app.schemas import question as question_schema

logger = logging.getLogger(__name__)

# null로 덮어쓸 수 없는 필드
_REQUIRED_FIELDS = ("question_text", "question_type", "correct_answer", "points", "order_index")


async def create_question(
    session: AsyncSession,
    request: question_schema.QuestionCreateRequest,
) -> question_schema.QuestionResponse:
    """문제 생성 (order_index 생략 시 현재 문제 수를 사용해 마지막에 추가)"""
    quiz = await quiz_crud.get_quiz_by_id(session, request.quiz_id)
    if not quiz:
        raise QuizNotFoundError(request.quiz_id)

    order_index = request.order_index
    if order_index is None:
        order_index = await question_crud.get_question_count_by_quiz_id(session, request.quiz_id)

    question = await question_crud.create_question(
        session,
        quiz_id=request.quiz_id,
        question_text=request.question_text,
        question_type=request.question_type,
        options=request.options,
        correct_answer=request.correct_answer,
        points=request.points,
        order_index=order_index,
    )
    logger.info(
        f"문제 생성: question_id={question.id}, quiz_id={question.quiz_id}, order_index={question.order_index}"
    )
    return question_schema.QuestionResponse.model_validate(question)


async def get_questions(
    session: AsyncSession,
    quiz_id: int,
) -> list[question_schema.QuestionResponse]:
    """퀴즈별 문제 목록 조회 (order_index 순)"""
    questions = await question_crud.get_questions_by_quiz_id(session, quiz_id)
    return [question_schema.QuestionResponse.model_validate(q) for q in questions]


async def update_question(
    session: AsyncSession,
    question_id: int,
    request: question_schema.QuestionUpdateRequest,
) -> question_schema.QuestionResponse:
    """문제 부분 수정"""
    values = request.model_dump(exclude_unset=True)
    null_fields = [field for field in _REQUIRED_FIELDS if field in values and values[field] is None]
    if null_fields:
        raise InvalidQuestionError(f"필수 항목은 null일 수 없습니다: {', '.join(null_fields)}")

    question = await question_crud.update_question(session, question_id, values)
    if not question:
        raise QuestionNotFoundError(question_id)

    logger.info(f"문제 수정: question_id={question_id}, fields={sorted(values)}")
    return question_schema.QuestionResponse.model_validate(question)


async def delete_question(
    session: AsyncSession,
    question_id: int,
) -> question_schema.QuestionDeleteResponse:
    """문제 삭제"""
    deleted = await question_crud.delete_question(session, question_id)
    if not deleted:
        raise QuestionNotFoundError(question_id)

    logger.info(f"문제 삭제: question_id={question_id}")
    return question_schema.QuestionDeleteResponse(message="문제가 삭제되었습니다")
