"""Quiz API 통합 테스트"""
import pytest
from unittest.mock import patch

from app.core.config import settings


async def _create_quiz(client, title="상식 퀴즈", time_limit=10):
    response = await client.post("/api/quizzes", json={"title": title, "timeLimit": time_limit})
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_create_quiz(client):
    """퀴즈 생성 (camelCase 응답)"""
    response = await client.post("/api/quizzes", json={"title": "상식 퀴즈", "timeLimit": 10})
    
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 1
    assert data["title"] == "상식 퀴즈"
    assert data["timeLimit"] == 10
    assert data["isActive"] is True
    assert data["qrCode"] is None
    assert "createdAt" in data


@pytest.mark.asyncio
async def test_create_quiz_ids_increase(client):
    """퀴즈 ID는 1부터 순차 증가"""
    first = await _create_quiz(client, title="첫 번째")
    second = await _create_quiz(client, title="두 번째")
    
    assert first["id"] == 1
    assert second["id"] == 2


@pytest.mark.asyncio
async def test_create_quiz_snake_case(client):
    """snake_case 필드명도 허용"""
    response = await client.post(
        "/api/quizzes",
        json={"title": "비활성 퀴즈", "time_limit": 5, "is_active": False},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["timeLimit"] == 5
    assert data["isActive"] is False


@pytest.mark.asyncio
async def test_create_quiz_invalid(client):
    """제한 시간이 0이면 400"""
    response = await client.post("/api/quizzes", json={"title": "상식 퀴즈", "timeLimit": 0})
    
    assert response.status_code == 400
    data = response.json()
    assert data["message"] == "요청 데이터가 올바르지 않습니다"
    assert isinstance(data["error"], list)


@pytest.mark.asyncio
async def test_create_quiz_blank_title(client):
    """공백 제목은 400"""
    response = await client.post("/api/quizzes", json={"title": "   ", "timeLimit": 10})
    
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_get_quiz_with_questions(client):
    """퀴즈 조회 시 문제 목록이 order_index 순으로 포함"""
    quiz = await _create_quiz(client)
    for text, order_index in [("세 번째", 2), ("첫 번째", 0), ("두 번째", 1)]:
        response = await client.post(
            "/api/questions",
            json={
                "quizId": quiz["id"],
                "questionText": text,
                "questionType": "fill_blank",
                "correctAnswer": "답",
                "orderIndex": order_index,
            },
        )
        assert response.status_code == 200
    
    response = await client.get(f"/api/quizzes/{quiz['id']}")
    
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == quiz["title"]
    assert [q["questionText"] for q in data["questions"]] == ["첫 번째", "두 번째", "세 번째"]


@pytest.mark.asyncio
async def test_get_quiz_not_found(client):
    """존재하지 않는 퀴즈 조회"""
    response = await client.get("/api/quizzes/999")
    
    assert response.status_code == 404
    data = response.json()
    assert "퀴즈를 찾을 수 없습니다" in data["message"]
    assert data["error"] == "QuizNotFoundError"


@pytest.mark.asyncio
async def test_generate_qr_code(client):
    """QR 코드 생성 후 토큰으로 퀴즈 조회"""
    quiz = await _create_quiz(client)
    
    response = await client.post(f"/api/quizzes/{quiz['id']}/qr-code")
    
    assert response.status_code == 200
    data = response.json()
    assert data["qrCode"].startswith(f"quiz-{quiz['id']}-")
    assert data["qrCodeDataUrl"].startswith("data:image/png;base64,")
    assert data["quiz"]["qrCode"] == data["qrCode"]
    
    lookup = await client.get(f"/api/quizzes/qr/{data['qrCode']}")
    assert lookup.status_code == 200
    assert lookup.json()["id"] == quiz["id"]


@pytest.mark.asyncio
async def test_generate_qr_code_join_url(client):
    """QR 코드에는 요청 origin 기준 참가 URL이 담김"""
    quiz = await _create_quiz(client)
    
    with patch("app.services.qr_service.render_qr_data_url", return_value="data:image/png;base64,AAAA") as mock_render:
        response = await client.post(f"/api/quizzes/{quiz['id']}/qr-code")
    
    assert response.status_code == 200
    token = response.json()["qrCode"]
    mock_render.assert_called_once_with(f"http://testserver/quiz/{token}")


@pytest.mark.asyncio
async def test_generate_qr_code_public_origin(client):
    """PUBLIC_ORIGIN 설정 시 해당 주소로 참가 URL 생성"""
    quiz = await _create_quiz(client)
    
    with patch.object(settings, "public_origin", "https://quiz.example.com/"):
        with patch("app.services.qr_service.render_qr_data_url", return_value="data:image/png;base64,AAAA") as mock_render:
            response = await client.post(f"/api/quizzes/{quiz['id']}/qr-code")
    
    assert response.status_code == 200
    token = response.json()["qrCode"]
    mock_render.assert_called_once_with(f"https://quiz.example.com/quiz/{token}")


@pytest.mark.asyncio
async def test_generate_qr_code_render_failure(client):
    """QR 렌더링 실패 시 500, 토큰은 저장되지 않음"""
    quiz = await _create_quiz(client)
    
    with patch("app.services.qr_service.render_qr_data_url", side_effect=ValueError("boom")):
        response = await client.post(f"/api/quizzes/{quiz['id']}/qr-code")
    
    assert response.status_code == 500
    assert response.json()["error"] == "QrCodeGenerationError"
    
    quiz_response = await client.get(f"/api/quizzes/{quiz['id']}")
    assert quiz_response.json()["qrCode"] is None


@pytest.mark.asyncio
async def test_generate_qr_code_quiz_not_found(client):
    """존재하지 않는 퀴즈의 QR 코드 생성"""
    response = await client.post("/api/quizzes/999/qr-code")
    
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_quiz_by_qr_code_not_found(client):
    """등록되지 않은 QR 토큰 조회"""
    response = await client.get("/api/quizzes/qr/quiz-1-0")
    
    assert response.status_code == 404
    assert response.json()["error"] == "QuizQrCodeNotFoundError"


@pytest.mark.asyncio
async def test_unknown_route(client):
    """존재하지 않는 경로도 {message, error} 형식"""
    response = await client.get("/api/unknown")
    
    assert response.status_code == 404
    data = response.json()
    assert "message" in data
    assert "error" in data


@pytest.mark.asyncio
async def test_health_check(client):
    """헬스 체크"""
    response = await client.get("/health")
    
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
