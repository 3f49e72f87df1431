import asyncio
import json
import logging
import weakref
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import participant as participant_crud, question as question_crud, submission as submission_crud
from app.exceptions import (
    InvalidSubmissionError,
    ParticipantNotFoundError,
    SubmissionNotFoundError,
)
from app.models.submission import Submission
from app.schemas import submission as submission_schema

logger = logging.getLogger(__name__)

DEFAULT_POINTS = 10

# 참가자별 제출 기록 갱신 락 (같은 참가자의 동시 요청으로 인한 갱신 유실 방지)
# 락을 잡고 있는 코루틴이 없으면 자동으로 정리된다.
_submission_locks: "weakref.WeakValueDictionary[int, asyncio.Lock]" = weakref.WeakValueDictionary()


def get_submission_lock(participant_id: int) -> asyncio.Lock:
    """참가자 ID별 락 조회 (없으면 생성)"""
    lock = _submission_locks.get(participant_id)
    if lock is None:
        lock = asyncio.Lock()
        _submission_locks[participant_id] = lock
    return lock


def load_answers(raw: str | None) -> dict[str, Any]:
    """저장된 답안 JSON을 dict로 변환 (손상된 값은 빈 맵으로 취급)"""
    if not raw:
        return {}
    try:
        answers = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"답안 JSON 파싱 실패, 빈 답안으로 처리: {raw[:100]}")
        return {}
    return answers if isinstance(answers, dict) else {}


def dump_answers(answers: Mapping[str, Any]) -> str:
    return json.dumps(answers, ensure_ascii=False)


def calculate_running_score(answers: Mapping[str, Any], fallback_points: int = DEFAULT_POINTS) -> int:
    """답안 맵 전체로부터 점수 재계산

    {"isCorrect": bool, "points": int} 항목은 저장된 배점을 사용하고,
    배점 없이 정답 여부만 있는 항목은 fallback_points를 사용한다.
    채점 결과가 없는 항목(문자열 답안, 문제와 매칭되지 않은 답안)은 집계하지 않는다.
    """
    score = 0
    for entry in answers.values():
        if isinstance(entry, bool):
            if entry:
                score += fallback_points
        elif isinstance(entry, dict) and entry.get("isCorrect") is True:
            score += int(entry.get("points", fallback_points))
    return score


def is_answer_correct(answer: Any, correct_answer: str) -> bool:
    """대소문자/앞뒤 공백을 무시한 정답 비교"""
    if answer is None:
        return False
    if not isinstance(answer, str):
        answer = str(answer)
    if not answer.strip():
        return False
    return answer.strip().lower() == correct_answer.strip().lower()


def grade_answers(questions: Iterable[Any], answers: Mapping[str, Any]) -> int:
    """문제별 정답과 비교해 맞힌 문제의 배점 합계 반환"""
    score = 0
    for question in questions:
        if is_answer_correct(answers.get(str(question.id)), question.correct_answer):
            score += question.points
    return score


def build_graded_answers(questions: Iterable[Any], answers: Mapping[str, Any]) -> dict[str, Any]:
    """최종 제출 답안을 실시간 집계와 같은 형태로 변환

    문제와 매칭되는 답안은 {"answer", "isCorrect", "points"}로 저장해서
    최종 제출 이후 도착한 문항별 답안이 점수를 다시 계산해도 기존 정답이 유지되도록 한다.
    """
    questions_by_id = {str(question.id): question for question in questions}
    graded = {}
    for question_id, answer in answers.items():
        question = questions_by_id.get(str(question_id))
        if question is None:
            graded[str(question_id)] = {"answer": answer}
            continue
        graded[str(question_id)] = {
            "answer": answer,
            "isCorrect": is_answer_correct(answer, question.correct_answer),
            "points": question.points,
        }
    return graded


async def _get_validated_participant(session: AsyncSession, participant_id: int, quiz_id: int):
    participant = await participant_crud.get_participant_by_id(session, participant_id)
    if not participant:
        raise ParticipantNotFoundError(participant_id)
    if participant.quiz_id != quiz_id:
        raise InvalidSubmissionError(
            f"참가자({participant_id})는 퀴즈({quiz_id})에 등록되어 있지 않습니다"
        )
    return participant


async def record_answer(
    session: AsyncSession,
    request: submission_schema.AnswerSubmitRequest,
) -> submission_schema.AnswerSubmitResponse:
    """문항별 답안 기록 및 실시간 점수 재계산

    같은 문제에 다시 답하면 이전 기록을 덮어쓰고, 점수는 항상 전체 답안 맵에서
    다시 계산하므로 같은 요청을 반복해도 점수가 변하지 않는다.
    """
    await _get_validated_participant(session, request.participant_id, request.quiz_id)

    async with get_submission_lock(request.participant_id):
        submission = await submission_crud.get_submission_by_participant(session, request.participant_id)
        if submission is None:
            total_questions = await question_crud.get_question_count_by_quiz_id(session, request.quiz_id)
            submission = await submission_crud.create_submission(
                session,
                participant_id=request.participant_id,
                quiz_id=request.quiz_id,
                total_questions=total_questions,
            )
            logger.info(
                f"제출 기록 생성: participant_id={request.participant_id}, quiz_id={request.quiz_id}"
            )

        answers = load_answers(submission.answers)
        answers[str(request.question_id)] = {
            "isCorrect": request.is_correct,
            "points": request.points,
        }
        score = calculate_running_score(answers, fallback_points=request.points)

        submission = await submission_crud.update_submission(
            session,
            submission,
            answers=dump_answers(answers),
            score=score,
        )

    logger.info(
        f"답안 기록: participant_id={request.participant_id}, question_id={request.question_id}, "
        f"is_correct={request.is_correct}, score={submission.score}"
    )
    return submission_schema.AnswerSubmitResponse(
        success=True,
        score=submission.score,
        updated_at=datetime.now(timezone.utc),
    )


async def finalize_submission(
    session: AsyncSession,
    request: submission_schema.SubmissionFinalizeRequest,
) -> submission_schema.SubmissionResponse:
    """최종 제출 (없으면 생성, 있으면 같은 행을 덮어씀)"""
    await _get_validated_participant(session, request.participant_id, request.quiz_id)

    questions = await question_crud.get_questions_by_quiz_id(session, request.quiz_id)
    score = request.score
    if score is None:
        score = grade_answers(questions, request.answers)
    total_questions = request.total_questions
    if total_questions is None:
        total_questions = len(questions)

    answers = dump_answers(build_graded_answers(questions, request.answers))

    async with get_submission_lock(request.participant_id):
        try:
            submission = await submission_crud.get_submission_by_participant(session, request.participant_id)
            if submission is None:
                submission = await submission_crud.create_submission(
                    session,
                    participant_id=request.participant_id,
                    quiz_id=request.quiz_id,
                    answers=answers,
                    score=score,
                    total_questions=total_questions,
                    completion_time=request.completion_time,
                )
                logger.info(f"최종 제출 (신규 생성): participant_id={request.participant_id}")
            else:
                submission = await submission_crud.update_submission(
                    session,
                    submission,
                    answers=answers,
                    score=score,
                    total_questions=total_questions,
                    completion_time=request.completion_time,
                    submitted_at=datetime.now(timezone.utc),
                )
                logger.info(f"최종 제출 (기존 기록 갱신): participant_id={request.participant_id}")
        except Exception as e:
            logger.error(
                f"최종 제출 실패: participant_id={request.participant_id}, error={e}",
                exc_info=True,
            )
            await session.rollback()
            raise

    logger.info(
        f"최종 제출 완료: participant_id={request.participant_id}, score={submission.score}, "
        f"total_questions={submission.total_questions}, completion_time={submission.completion_time}"
    )
    return submission_schema.SubmissionResponse.model_validate(submission)


async def get_submission(
    session: AsyncSession,
    participant_id: int,
) -> submission_schema.SubmissionResponse:
    """참가자 제출 기록 조회"""
    submission: Submission | None = await submission_crud.get_submission_by_participant(session, participant_id)
    if not submission:
        raise SubmissionNotFoundError(participant_id)
    return submission_schema.SubmissionResponse.model_validate(submission)
