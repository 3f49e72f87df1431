"""Leaderboard / Stats / Export API 통합 테스트"""
import pytest

from app.models.submission import Submission


async def _create_quiz(client, title="상식 퀴즈"):
    response = await client.post("/api/quizzes", json={"title": title, "timeLimit": 10})
    return response.json()["id"]


async def _add_result(client, quiz_id, name, score, completion_time, total_questions=10):
    """참가자 등록 후 최종 제출"""
    participant = (await client.post(
        "/api/participants",
        json={
            "name": name,
            "email": f"{name.lower()}@example.com",
            "phone": "010",
            "quizId": quiz_id,
        },
    )).json()
    response = await client.post(
        "/api/submissions",
        json={
            "participantId": participant["id"],
            "quizId": quiz_id,
            "answers": {},
            "score": score,
            "totalQuestions": total_questions,
            "completionTime": completion_time,
        },
    )
    assert response.status_code == 200
    return participant["id"]


@pytest.mark.asyncio
async def test_leaderboard_ordering(client):
    """점수 내림차순, 동점이면 소요 시간 오름차순"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=50, completion_time=10)
    await _add_result(client, quiz_id, "B", score=80, completion_time=20)
    await _add_result(client, quiz_id, "C", score=80, completion_time=15)
    
    response = await client.get(f"/api/quizzes/{quiz_id}/leaderboard")
    
    assert response.status_code == 200
    data = response.json()
    assert [entry["name"] for entry in data] == ["C", "B", "A"]
    assert [entry["rank"] for entry in data] == [1, 2, 3]
    assert [entry["accuracy"] for entry in data] == [80, 80, 50]
    assert data[0]["email"] == "c@example.com"
    assert data[0]["completionTime"] == 15


@pytest.mark.asyncio
async def test_leaderboard_ties_get_distinct_ranks(client):
    """점수와 시간이 모두 같아도 순위는 1부터 연속"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=30, completion_time=10)
    await _add_result(client, quiz_id, "B", score=30, completion_time=10)
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/leaderboard")).json()
    
    assert [entry["rank"] for entry in data] == [1, 2]


@pytest.mark.asyncio
async def test_leaderboard_empty(client):
    """제출이 없으면 빈 리더보드"""
    quiz_id = await _create_quiz(client)
    
    response = await client.get(f"/api/quizzes/{quiz_id}/leaderboard")
    
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_leaderboard_poll_interval_header(client):
    """리더보드/통계 응답에 폴링 주기 헤더 포함"""
    quiz_id = await _create_quiz(client)
    
    leaderboard = await client.get(f"/api/quizzes/{quiz_id}/leaderboard")
    stats = await client.get(f"/api/quizzes/{quiz_id}/stats")
    
    assert leaderboard.headers["X-Poll-Interval"] == "5"
    assert stats.headers["X-Poll-Interval"] == "5"


@pytest.mark.asyncio
async def test_leaderboard_zero_questions(client):
    """문제 수가 0이면 정확도 0"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=0, completion_time=5, total_questions=0)
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/leaderboard")).json()
    
    assert data[0]["accuracy"] == 0


@pytest.mark.asyncio
async def test_leaderboard_after_running_score(client):
    """실시간 집계만 한 참가자도 리더보드에 포함 (정답 1/2 = 50%)"""
    quiz_id = await _create_quiz(client)
    question_ids = []
    for index in range(2):
        response = await client.post(
            "/api/questions",
            json={
                "quizId": quiz_id,
                "questionText": f"문제 {index + 1}",
                "questionType": "true_false",
                "correctAnswer": "true",
            },
        )
        question_ids.append(response.json()["id"])
    participant = (await client.post(
        "/api/participants",
        json={"name": "김철수", "email": "kim@example.com", "phone": "010", "quizId": quiz_id},
    )).json()
    for question_id, is_correct in zip(question_ids, [True, False]):
        await client.post(
            "/api/submit-answer",
            json={
                "participantId": participant["id"],
                "quizId": quiz_id,
                "questionId": question_id,
                "isCorrect": is_correct,
            },
        )
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/leaderboard")).json()
    
    assert len(data) == 1
    assert data[0]["score"] == 10
    assert data[0]["accuracy"] == 50


@pytest.mark.asyncio
async def test_leaderboard_accuracy_uses_ten_point_basis(client):
    """정확도는 문항당 10점 기준으로 계산 (배점이 크면 100%를 넘을 수 있음)"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=30, completion_time=10, total_questions=2)
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/leaderboard")).json()
    
    assert data[0]["accuracy"] == 150


@pytest.mark.asyncio
async def test_quiz_stats_empty(client):
    """제출이 없으면 통계는 모두 0"""
    quiz_id = await _create_quiz(client)
    
    response = await client.get(f"/api/quizzes/{quiz_id}/stats")
    
    assert response.status_code == 200
    assert response.json() == {"totalParticipants": 0, "averageScore": 0, "highestScore": 0}


@pytest.mark.asyncio
async def test_quiz_stats(client):
    """참가자 수, 평균 점수(반올림), 최고 점수"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=50, completion_time=10)
    await _add_result(client, quiz_id, "B", score=80, completion_time=20)
    await _add_result(client, quiz_id, "C", score=80, completion_time=15)
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/stats")).json()
    
    assert data == {"totalParticipants": 3, "averageScore": 70, "highestScore": 80}


@pytest.mark.asyncio
async def test_quiz_stats_average_rounds_half_up(client):
    """평균 12.5점은 13점으로 반올림"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=10, completion_time=10)
    await _add_result(client, quiz_id, "B", score=15, completion_time=10)
    
    data = (await client.get(f"/api/quizzes/{quiz_id}/stats")).json()
    
    assert data["averageScore"] == 13


@pytest.mark.asyncio
async def test_export_csv(client):
    """CSV 내보내기 (리더보드 순서, 문자열 필드는 큰따옴표)"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=50, completion_time=10)
    await _add_result(client, quiz_id, "B", score=80, completion_time=20)
    
    response = await client.get(f"/api/quizzes/{quiz_id}/export")
    
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert f'filename="quiz-{quiz_id}-results.csv"' in response.headers["content-disposition"]
    lines = response.text.splitlines()
    assert lines[0] == "Rank,Name,Email,Score,Completion Time (seconds),Accuracy (%)"
    assert lines[1] == '1,"B","b@example.com",80,20,80'
    assert lines[2] == '2,"A","a@example.com",50,10,50'


@pytest.mark.asyncio
async def test_export_csv_empty(client):
    """제출이 없으면 헤더만"""
    quiz_id = await _create_quiz(client)
    
    response = await client.get(f"/api/quizzes/{quiz_id}/export")
    
    assert response.text.splitlines() == [
        "Rank,Name,Email,Score,Completion Time (seconds),Accuracy (%)",
    ]


@pytest.mark.asyncio
async def test_leaderboard_skips_orphan_submission(client, test_db_session):
    """참가자가 없는 제출 기록은 리더보드/CSV에서 제외"""
    quiz_id = await _create_quiz(client)
    await _add_result(client, quiz_id, "A", score=50, completion_time=10)
    test_db_session.add(Submission(
        participant_id=999,
        quiz_id=quiz_id,
        answers="{}",
        score=100,
        total_questions=10,
        completion_time=1,
    ))
    await test_db_session.commit()
    
    leaderboard = (await client.get(f"/api/quizzes/{quiz_id}/leaderboard")).json()
    export = await client.get(f"/api/quizzes/{quiz_id}/export")
    
    assert [entry["name"] for entry in leaderboard] == ["A"]
    assert len(export.text.splitlines()) == 2
