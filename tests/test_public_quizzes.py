import pytest


@pytest.fixture
def quizzes(client):
    return {quiz["title"]: quiz["id"] for quiz in client.get("/api/quizzes").get_json()}


def test_lists_active_quizzes_without_questions(client):
    response = client.get("/api/quizzes")

    assert response.status_code == 200
    quizzes = response.get_json()
    assert [q["title"] for q in quizzes] == ["Planetas Rochosos", "Gigantes Gasosos", "Sistema Solar Básico"]
    assert all("questions" not in q for q in quizzes)
    assert quizzes[0]["total_questions"] == 4


def test_quiz_hides_answers(client, quizzes):
    response = client.get(f"/api/quizzes/{quizzes['Planetas Rochosos']}")

    assert response.status_code == 200
    questions = response.get_json()["questions"]
    assert len(questions) == 4
    assert all("correct_answer" not in q and "explanation" not in q for q in questions)
    assert questions[3]["type"] == "true_false"


def test_inactive_quiz_is_hidden(client, quizzes, teacher_headers):
    quiz_id = quizzes["Gigantes Gasosos"]
    client.put(f"/api/admin/quizzes/{quiz_id}", json={"is_active": False}, headers=teacher_headers)

    assert client.get(f"/api/quizzes/{quiz_id}").status_code == 404
    assert "Gigantes Gasosos" not in [q["title"] for q in client.get("/api/quizzes").get_json()]
    assert client.post(f"/api/quizzes/{quiz_id}/submit", json={"answers": []}).status_code == 404


def test_perfect_submission(client, quizzes):
    quiz_id = quizzes["Sistema Solar Básico"]
    response = client.post(
        f"/api/quizzes/{quiz_id}/submit",
        json={"player_name": "Lia", "answers": ["8", "  plutão "], "time_elapsed": 42},
    )

    assert response.status_code == 201
    result = response.get_json()
    assert result["score"] == 100
    assert result["correct_answers"] == 2
    assert result["points_earned"] == 3
    assert result["points_possible"] == 3
    assert result["stars"] == 5
    assert result["quiz_title"] == "Sistema Solar Básico"
    assert result["time_elapsed"] == 42
    assert result["answers"][1]["correct_answer"] == "Plutão"


def test_answers_by_option_index(client, quizzes):
    quiz_id = quizzes["Sistema Solar Básico"]
    result = client.post(f"/api/quizzes/{quiz_id}/submit", json={"answers": [1, "Ceres"]}).get_json()

    assert result["score"] == 50
    assert result["stars"] == 1
    assert result["player_name"] == "Anônimo"
    assert [a["is_correct"] for a in result["answers"]] == [True, False]


def test_true_false_accepts_portuguese(client, quizzes):
    quiz_id = quizzes["Planetas Rochosos"]
    result = client.post(
        f"/api/quizzes/{quiz_id}/submit",
        json={"answers": ["Mercúrio", "Marte", "Terra", "Verdadeiro"]},
    ).get_json()

    assert result["score"] == 75
    assert result["stars"] == 3


@pytest.mark.parametrize("payload", [
    {"answers": ["8"]},
    {"answers": "8,Plutão"},
    {},
    {"answers": ["8", "Plutão"], "time_elapsed": -3},
])
def test_submission_is_validated(client, quizzes, payload):
    response = client.post(f"/api/quizzes/{quizzes['Sistema Solar Básico']}/submit", json=payload)
    assert response.status_code == 400


def test_unknown_quiz(client):
    assert client.get("/api/quizzes/999").status_code == 404
    assert client.post("/api/quizzes/999/submit", json={"answers": []}).status_code == 404


def test_results_newest_first_with_limit(client, quizzes):
    quiz_id = quizzes["Sistema Solar Básico"]
    for name in ("Ana", "Bia", "Caio"):
        client.post(f"/api/quizzes/{quiz_id}/submit", json={"player_name": name, "answers": ["8", "Plutão"]})

    results = client.get(f"/api/quizzes/{quiz_id}/results?limit=2").get_json()

    assert [r["player_name"] for r in results] == ["Caio", "Bia"]
    assert client.get(f"/api/quizzes/{quiz_id}/results?limit=0").status_code == 400


@pytest.mark.parametrize("payload", [
    ["8", "Plutão"],
    {"answers": ["8", "Plutão"], "player_name": 7},
    {"answers": ["8", "Plutão"], "player_name": "x" * 101},
])
def test_submission_rejects_wrong_types(client, quizzes, payload):
    response = client.post(f"/api/quizzes/{quizzes['Sistema Solar Básico']}/submit", json=payload)
    assert response.status_code == 400


def test_unusual_digit_answer_is_graded_wrong(client, quizzes):
    response = client.post(
        f"/api/quizzes/{quizzes['Planetas Rochosos']}/submit",
        json={"answers": ["²", "Marte", "Vênus", "true"]},
    )

    assert response.status_code == 201
    assert [a["is_correct"] for a in response.get_json()["answers"]] == [False, True, True, True]
