from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.models.base import get_db
from app.schemas import question as question_schema, quiz as quiz_schema
from app.services import question_service, quiz_service

router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.post("", response_model=quiz_schema.QuizResponse)
async def create_quiz(
    request: quiz_schema.QuizCreateRequest,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 생성 API"""
    return await quiz_service.create_quiz(db, request)


@router.get("/qr/{qr_code}", response_model=quiz_schema.QuizResponse)
async def get_quiz_by_qr_code(
    qr_code: str,
    db: AsyncSession = Depends(get_db),
):
    """QR 참가 토큰으로 퀴즈 조회 API"""
    return await quiz_service.get_quiz_by_qr_code(db, qr_code)


@router.get("/{quiz_id}", response_model=quiz_schema.QuizWithQuestionsResponse)
async def get_quiz(
    quiz_id: int,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈 조회 API (문제 목록 포함)"""
    return await quiz_service.get_quiz_with_questions(db, quiz_id)


@router.post("/{quiz_id}/qr-code", response_model=quiz_schema.QrCodeResponse)
async def generate_qr_code(
    quiz_id: int,
    http_request: Request,
    db: AsyncSession = Depends(get_db),
):
    """QR 코드 생성 API"""
    origin = settings.public_origin or str(http_request.base_url)
    return await quiz_service.generate_qr_code(db, quiz_id, origin)


@router.get("/{quiz_id}/questions", response_model=list[question_schema.QuestionResponse])
async def get_questions(
    quiz_id: int,
    db: AsyncSession = Depends(get_db),
):
    """퀴즈별 문제 목록 조회 API (order_index 순)"""
    return await question_service.get_questions(db, quiz_id)
