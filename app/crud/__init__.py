from app.crud.participant import (
    create_participant,
    get_participant_by_email_and_quiz,
    get_participant_by_id,
    get_participants_by_quiz_id,
)
from app.crud.question import (
    create_question,
    delete_question,
    get_question_by_id,
    get_question_count_by_quiz_id,
    get_questions_by_quiz_id,
    update_question,
)
from app.crud.quiz import (
    create_quiz,
    get_all_quizzes,
    get_quiz_by_id,
    get_quiz_by_qr_code,
    get_quiz_with_questions,
    update_quiz_qr_code,
)
from app.crud.submission import (
    create_submission,
    get_submission_by_participant,
    get_submissions_by_quiz,
    get_submissions_with_participants,
    update_submission,
)

__all__ = [
    "create_quiz",
    "get_quiz_by_id",
    "get_quiz_by_qr_code",
    "get_quiz_with_questions",
    "get_all_quizzes",
    "update_quiz_qr_code",
    "create_question",
    "get_question_by_id",
    "get_questions_by_quiz_id",
    "get_question_count_by_quiz_id",
    "update_question",
    "delete_question",
    "create_participant",
    "get_participant_by_id",
    "get_participant_by_email_and_quiz",
    "get_participants_by_quiz_id",
    "create_submission",
    "get_submission_by_participant",
    "get_submissions_by_quiz",
    "get_submissions_with_participants",
    "update_submission",
]
