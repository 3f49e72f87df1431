from app.services.export_service import export_leaderboard_csv
from app.services.leaderboard_service import (
    get_admin_stats,
    get_leaderboard,
    get_quiz_results,
    get_quiz_stats,
)
from app.services.participant_service import register_participant
from app.services.qr_service import (
    build_join_url,
    generate_join_token,
    render_qr_data_url,
)
from app.services.question_service import (
    create_question,
    delete_question,
    get_questions,
    update_question,
)
from app.services.quiz_service import (
    create_quiz,
    generate_qr_code,
    get_quiz_by_qr_code,
    get_quiz_with_questions,
)
from app.services.submission_service import (
    finalize_submission,
    get_submission,
    grade_answers,
    record_answer,
)

__all__ = [
    "create_quiz",
    "get_quiz_with_questions",
    "get_quiz_by_qr_code",
    "generate_qr_code",
    "generate_join_token",
    "build_join_url",
    "render_qr_data_url",
    "create_question",
    "get_questions",
    "update_question",
    "delete_question",
    "register_participant",
    "record_answer",
    "finalize_submission",
    "get_submission",
    "grade_answers",
    "get_leaderboard",
    "get_quiz_stats",
    "get_admin_stats",
    "get_quiz_results",
    "export_leaderboard_csv",
]
