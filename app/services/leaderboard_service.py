import logging
import math
from typing import Any, Iterable, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import question as question_crud, quiz as quiz_crud, submission as submission_crud
from app.exceptions import QuizNotFoundError
from app.schemas import leaderboard as leaderboard_schema, question as question_schema, quiz as quiz_schema
from app.schemas import submission as submission_schema

logger = logging.getLogger(__name__)

# 정확도 계산 시 문항당 배점 (실제 문항 배점과 무관하게 10점 기준으로 계산)
ACCURACY_POINTS_PER_QUESTION = 10


def round_half_up(value: float) -> int:
    """0.5는 올림 (Python 기본 round의 은행가 반올림과 다름)"""
    return math.floor(value + 0.5)


def calculate_accuracy(score: int, total_questions: int) -> int:
    """정확도(%) = score / (total_questions * 10) * 100, 문제 수가 0이면 0"""
    if total_questions <= 0:
        return 0
    return round_half_up(score / (total_questions * ACCURACY_POINTS_PER_QUESTION) * 100)


def rank_entries(rows: Iterable[tuple[Any, Any]]) -> list[leaderboard_schema.LeaderboardEntry]:
    """(제출 기록, 참가자) 쌍을 순위가 매겨진 리더보드 항목으로 변환

    점수 내림차순, 동점이면 완료 시간이 짧은 순. 순위는 정렬 후 1부터 순차 부여하며
    점수와 시간이 모두 같아도 공동 순위를 주지 않는다.
    """
    ordered = sorted(
        rows,
        key=lambda row: (-row[0].score, row[0].completion_time),
    )
    return [
        leaderboard_schema.LeaderboardEntry(
            participant_id=participant.id,
            name=participant.name,
            email=participant.email,
            score=submission.score,
            completion_time=submission.completion_time,
            rank=rank,
            accuracy=calculate_accuracy(submission.score, submission.total_questions),
        )
        for rank, (submission, participant) in enumerate(ordered, start=1)
    ]


def summarize_scores(scores: Sequence[int]) -> leaderboard_schema.QuizStatsResponse:
    """참가자 수, 평균 점수(반올림), 최고 점수 (제출이 없으면 모두 0)"""
    if not scores:
        return leaderboard_schema.QuizStatsResponse(
            total_participants=0,
            average_score=0,
            highest_score=0,
        )
    return leaderboard_schema.QuizStatsResponse(
        total_participants=len(scores),
        average_score=round_half_up(sum(scores) / len(scores)),
        highest_score=max(scores),
    )


async def get_leaderboard(
    session: AsyncSession,
    quiz_id: int,
) -> list[leaderboard_schema.LeaderboardEntry]:
    """퀴즈 리더보드 조회 (조회할 때마다 제출 기록으로부터 다시 계산)"""
    rows = await submission_crud.get_submissions_with_participants(session, quiz_id)
    entries = rank_entries(rows)
    logger.debug(f"리더보드 계산: quiz_id={quiz_id}, entries={len(entries)}")
    return entries


async def get_quiz_stats(
    session: AsyncSession,
    quiz_id: int,
) -> leaderboard_schema.QuizStatsResponse:
    """퀴즈 통계 조회"""
    submissions = await submission_crud.get_submissions_by_quiz(session, quiz_id)
    return summarize_scores([s.score for s in submissions])


async def get_admin_stats(session: AsyncSession) -> list[leaderboard_schema.AdminQuizStats]:
    """관리자 대시보드: 전체 퀴즈별 통계"""
    quizzes = await quiz_crud.get_all_quizzes(session)
    stats = []
    for quiz in quizzes:
        quiz_stats = await get_quiz_stats(session, quiz.id)
        total_questions = await question_crud.get_question_count_by_quiz_id(session, quiz.id)
        stats.append(
            leaderboard_schema.AdminQuizStats(
                quiz_id=quiz.id,
                title=quiz.title,
                total_questions=total_questions,
                created_at=quiz.created_at,
                **quiz_stats.model_dump(),
            )
        )
    return stats


async def get_quiz_results(
    session: AsyncSession,
    quiz_id: int,
) -> leaderboard_schema.QuizResultsResponse:
    """관리자용 퀴즈 상세 결과 (문제, 참가자별 제출 기록, 통계)"""
    quiz = await quiz_crud.get_quiz_by_id(session, quiz_id)
    if not quiz:
        raise QuizNotFoundError(quiz_id)

    questions = await question_crud.get_questions_by_quiz_id(session, quiz_id)
    rows = await submission_crud.get_submissions_with_participants(session, quiz_id)

    participants = []
    for submission, participant in rows:
        participant_data = leaderboard_schema.ParticipantResult(
            id=participant.id,
            name=participant.name,
            email=participant.email,
            phone=participant.phone,
            quiz_id=participant.quiz_id,
            created_at=participant.created_at,
            submission=submission_schema.SubmissionResponse.model_validate(submission),
            score=submission.score,
        )
        participants.append(participant_data)

    return leaderboard_schema.QuizResultsResponse(
        quiz=quiz_schema.QuizResponse.model_validate(quiz),
        questions=[question_schema.QuestionResponse.model_validate(q) for q in questions],
        participants=participants,
        stats=await get_quiz_stats(session, quiz_id),
    )
