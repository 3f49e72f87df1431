"""Admin API 통합 테스트"""
import pytest


@pytest.mark.asyncio
async def test_admin_stats(client):
    """퀴즈별 통계 목록"""
    quiz_id = (await client.post("/api/quizzes", json={"title": "상식 퀴즈", "timeLimit": 10})).json()["id"]
    await client.post("/api/quizzes", json={"title": "빈 퀴즈", "timeLimit": 3})
    await client.post(
        "/api/questions",
        json={
            "quizId": quiz_id,
            "questionText": "1 + 1 = ?",
            "questionType": "fill_blank",
            "correctAnswer": "2",
        },
    )
    participant = (await client.post(
        "/api/participants",
        json={"name": "김철수", "email": "kim@example.com", "phone": "010", "quizId": quiz_id},
    )).json()
    await client.post(
        "/api/submissions",
        json={"participantId": participant["id"], "quizId": quiz_id, "answers": {"1": "2"}, "completionTime": 7},
    )
    
    response = await client.get("/api/admin/stats")
    
    assert response.status_code == 200
    data = {item["quizId"]: item for item in response.json()}
    assert data[quiz_id]["title"] == "상식 퀴즈"
    assert data[quiz_id]["totalQuestions"] == 1
    assert data[quiz_id]["totalParticipants"] == 1
    assert data[quiz_id]["averageScore"] == 10
    assert data[quiz_id]["highestScore"] == 10
    empty_quiz = [item for item in data.values() if item["title"] == "빈 퀴즈"][0]
    assert empty_quiz["totalParticipants"] == 0
    assert empty_quiz["totalQuestions"] == 0


@pytest.mark.asyncio
async def test_admin_quiz_results(client):
    """퀴즈 상세 결과 (문제, 참가자별 제출 기록, 통계)"""
    quiz_id = (await client.post("/api/quizzes", json={"title": "상식 퀴즈", "timeLimit": 10})).json()["id"]
    await client.post(
        "/api/questions",
        json={
            "quizId": quiz_id,
            "questionText": "1 + 1 = ?",
            "questionType": "fill_blank",
            "correctAnswer": "2",
        },
    )
    participant = (await client.post(
        "/api/participants",
        json={"name": "김철수", "email": "kim@example.com", "phone": "010", "quizId": quiz_id},
    )).json()
    # 제출하지 않은 참가자는 결과에서 제외
    await client.post(
        "/api/participants",
        json={"name": "이영희", "email": "lee@example.com", "phone": "010", "quizId": quiz_id},
    )
    await client.post(
        "/api/submissions",
        json={
            "participantId": participant["id"],
            "quizId": quiz_id,
            "answers": {},
            "score": 10,
            "totalQuestions": 1,
            "completionTime": 7,
        },
    )
    
    response = await client.get(f"/api/admin/quizzes/{quiz_id}/results")
    
    assert response.status_code == 200
    data = response.json()
    assert data["quiz"]["id"] == quiz_id
    assert len(data["questions"]) == 1
    assert len(data["participants"]) == 1
    result = data["participants"][0]
    assert result["name"] == "김철수"
    assert result["score"] == 10
    assert result["submission"]["completionTime"] == 7
    assert data["stats"] == {"totalParticipants": 1, "averageScore": 10, "highestScore": 10}


@pytest.mark.asyncio
async def test_admin_quiz_results_not_found(client):
    """존재하지 않는 퀴즈 결과 조회"""
    response = await client.get("/api/admin/quizzes/999/results")
    
    assert response.status_code == 404
    assert response.json()["error"] == "QuizNotFoundError"
