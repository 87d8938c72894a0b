from __future__ import annotations


def _ids(data):
    return [g["id"] for g in data["suggestions"]]


def test_survey_questions_use_category_allow_list(client):
    response = client.get("/api/survey")
    assert response.status_code == 200
    questions = {q["id"]: q for q in response.json()}

    assert set(questions) == {"category", "budgetMin", "budgetMax"}
    assert questions["category"]["type"] == "choice"
    assert "jewelry" in questions["category"]["options"]
    assert "tech" in questions["category"]["options"]


def test_survey_result_filters_by_category_and_budget(client):
    data = client.post("/api/survey-result", json={"category": "jewelry", "budgetMax": 80}).json()
    assert _ids(data) == [2, 3, 4]

    data = client.post("/api/survey-result", json={"category": "experiences", "budgetMin": "300"}).json()
    assert _ids(data) == [5, 6, 8]
    assert all(g["price"] >= 300 for g in data["suggestions"])


def test_survey_result_defaults_to_top_ten(client):
    data = client.post("/api/survey-result", json={}).json()
    suggestions = data["suggestions"]

    assert len(suggestions) == 10
    keys = [(g["success_rate"], g["total_reviews"]) for g in suggestions]
    assert keys == sorted(keys, reverse=True)


def test_survey_result_ignores_unknown_answers(client):
    everything = client.post("/api/survey-result", json={}).json()
    data = client.post("/api/survey-result", json={"category": "weapons", "age": 30}).json()
    assert _ids(data) == _ids(everything)


def test_survey_result_rejects_non_numeric_budget(client):
    response = client.post("/api/survey-result", json={"budgetMin": "cheap"})
    assert response.status_code == 400
    assert response.json()["error"] == "validation_error"
