import csv
import io
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.schemas.leaderboard import LeaderboardEntry
from app.services import leaderboard_service

CSV_HEADER = ["Rank", "Name", "Email", "Score", "Completion Time (seconds)", "Accuracy (%)"]


def build_leaderboard_csv(entries: Sequence[LeaderboardEntry]) -> str:
    """리더보드를 CSV 텍스트로 변환 (이름/이메일은 큰따옴표, 숫자는 그대로)

    행 사이만 줄바꿈으로 구분하고 마지막 행 뒤에는 줄바꿈을 붙이지 않는다.
    """
    buffer = io.StringIO()
    header_writer = csv.writer(buffer, lineterminator="\n")
    header_writer.writerow(CSV_HEADER)

    # QUOTE_NONNUMERIC: 문자열만 따옴표로 감싸고 내부 따옴표는 두 번 써서 이스케이프
    row_writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for entry in entries:
        row_writer.writerow([
            entry.rank,
            entry.name,
            entry.email,
            entry.score,
            entry.completion_time,
            entry.accuracy,
        ])
    return buffer.getvalue().removesuffix("\n")


def build_export_filename(quiz_id: int) -> str:
    return f"quiz-{quiz_id}-results.csv"


async def export_leaderboard_csv(session: AsyncSession, quiz_id: int) -> str:
    """퀴즈 리더보드 CSV 내보내기"""
    entries = await leaderboard_service.get_leaderboard(session, quiz_id)
    return build_leaderboard_csv(entries)
