"""Tests for the RSVP preview, passage and assessment API routes."""

import logging

import pytest
from fastapi.testclient import TestClient

from speedlearn.api.dependencies import get_passage_catalog
from speedlearn.main import app
from speedlearn.services.passages import PassageCatalog
from speedlearn.services.scoring import FEEDBACK_EXCELLENT, FEEDBACK_GOOD_EFFORT


# =============================================================================
# RSVP Token Preview
# =============================================================================


class TestTokenPreview:
    """Tests for POST /api/rsvp/tokens."""

    def test_units_are_annotated(self, client):
        response = client.post(
            "/api/rsvp/tokens", json={"text": "Hello wonderful world.", "wpm": 300}
        )
        assert response.status_code == 200
        data = response.json()

        assert data["wpm"] == 300
        assert data["total_words"] == 3
        assert data["estimated_ms"] == 760
        assert data["estimated_time"] == "1 min"

        first = data["units"][0]
        assert first["text"] == "Hello"
        assert first["sequence_index"] == 0
        assert first["orp_index"] == 2
        assert (first["before"], first["focus"], first["after"]) == ("He", "l", "lo")
        assert first["delay_ms"] == 200

        assert [u["delay_ms"] for u in data["units"]] == [200, 260, 300]
        assert data["units"][2]["is_sentence_final"] is True

    def test_punctuation_only_unit(self, client):
        data = client.post("/api/rsvp/tokens", json={"text": "yes - no", "wpm": 300}).json()
        dash = data["units"][1]
        assert dash["is_punctuation_only"] is True
        assert dash["delay_ms"] == 100

    def test_default_wpm_from_settings(self, client):
        data = client.post("/api/rsvp/tokens", json={"text": "one two"}).json()
        assert data["wpm"] == 300
        assert data["estimated_ms"] == 400

    @pytest.mark.parametrize(
        "payload",
        [
            {"text": ""},
            {"text": "words", "wpm": 50},
            {"text": "words", "wpm": 5000},
            {"wpm": 300},
        ],
    )
    def test_invalid_request(self, client, payload):
        response = client.post("/api/rsvp/tokens", json=payload)
        assert response.status_code == 422

    def test_blank_text_has_no_units(self, client):
        data = client.post("/api/rsvp/tokens", json={"text": "   "}).json()
        assert data["total_words"] == 0
        assert data["units"] == []
        assert data["estimated_ms"] == 0


# =============================================================================
# Passages
# =============================================================================


class TestPassages:
    """Tests for the passage browsing routes."""

    def test_list_passages(self, client):
        response = client.get("/api/passages")
        assert response.status_code == 200
        data = response.json()
        assert [p["id"] for p in data] == ["easy-01", "medium-01", "hard-01"]
        assert "questions" not in data[0]
        assert data[0]["word_count"] == 38

    def test_filter_by_difficulty(self, client):
        data = client.get("/api/passages", params={"difficulty": "easy"}).json()
        assert [p["id"] for p in data] == ["easy-01"]

    def test_filter_by_category(self, client):
        data = client.get("/api/passages", params={"category": "physical sciences"}).json()
        assert [p["id"] for p in data] == ["medium-01"]

    def test_filters_combine(self, client):
        params = {"category": "Economics", "difficulty": "medium"}
        assert client.get("/api/passages", params=params).json() == []

    def test_unknown_difficulty(self, client):
        response = client.get("/api/passages", params={"difficulty": "impossible"})
        assert response.status_code == 422

    def test_get_passage_hides_answers(self, client):
        response = client.get("/api/passages/medium-01")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Black Holes"
        assert data["ideal_wpm"] == 300
        assert len(data["questions"]) == 2
        for question in data["questions"]:
            assert "answer" not in question
            assert question["options"]

    def test_get_passage_not_found(self, client):
        response = client.get("/api/passages/nope")
        assert response.status_code == 404
        assert response.json()["detail"] == "Passage not found: nope"

    def test_random_passage_by_difficulty(self, client):
        response = client.get("/api/passages/random", params={"difficulty": "medium"})
        assert response.status_code == 200
        assert response.json()["id"] == "medium-01"

    def test_random_passage_any(self, client):
        data = client.get("/api/passages/random").json()
        assert data["id"] in {"easy-01", "medium-01", "hard-01"}

    def test_random_passage_no_match(self, client):
        params = {"module": "economics", "difficulty": "hard"}
        response = client.get("/api/passages/random", params=params)
        assert response.status_code == 404
        assert response.json()["detail"] == "No hard passages available in module economics"

    def test_random_passage_by_module_and_difficulty(self, client):
        params = {"module": "technology", "difficulty": "hard"}
        response = client.get("/api/passages/random", params=params)
        assert response.status_code == 200
        assert response.json()["id"] == "hard-01"

    def test_random_passage_by_module(self, client):
        data = client.get("/api/passages/random", params={"module": "physical-sciences"}).json()
        assert data["id"] == "medium-01"

    def test_random_passage_unknown_module(self, client):
        response = client.get("/api/passages/random", params={"module": "nope"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Module not found: nope"

    def test_list_passages_by_module(self, client):
        data = client.get("/api/passages", params={"module": "technology"}).json()
        assert [p["id"] for p in data] == ["medium-01", "hard-01"]

    def test_list_passages_module_and_difficulty(self, client):
        params = {"module": "technology", "difficulty": "medium"}
        data = client.get("/api/passages", params=params).json()
        assert [p["id"] for p in data] == ["medium-01"]

    def test_list_passages_unknown_module(self, client):
        response = client.get("/api/passages", params={"module": "nope"})
        assert response.status_code == 404
        assert response.json()["detail"] == "Module not found: nope"


# =============================================================================
# Modules
# =============================================================================


class TestModules:
    """Tests for GET /api/modules."""

    def test_list_modules(self, client):
        response = client.get("/api/modules")
        assert response.status_code == 200
        data = response.json()

        assert data["total"] == 3
        assert [m["id"] for m in data["modules"]] == [
            "economics",
            "physical-sciences",
            "technology",
        ]
        technology = data["modules"][2]
        assert technology["name"] == "Technology & Computing"
        assert technology["description"]
        assert technology["difficulties"] == ["medium", "hard"]

    def test_module_entries_hide_passage_ids(self, client):
        data = client.get("/api/modules").json()
        for module in data["modules"]:
            assert set(module) == {"id", "name", "description", "difficulties"}

    def test_empty_catalog_has_no_modules(self):
        app.dependency_overrides[get_passage_catalog] = lambda: PassageCatalog()
        try:
            with TestClient(app) as client:
                data = client.get("/api/modules").json()
        finally:
            app.dependency_overrides.clear()

        assert data == {"modules": [], "total": 0}



# =============================================================================
# Submission
# =============================================================================


class TestSubmit:
    """Tests for POST /api/submit."""

    def submit(self, client, **overrides):
        payload = {
            "passageId": "easy-01",
            "readingTimeSeconds": 12,
            "answers": [
                {"questionId": "q1", "selectedOption": "It falls"},
                {"questionId": "q2", "selectedOption": "The equilibrium price"},
            ],
        }
        payload.update(overrides)
        return client.post("/api/submit", json=payload)

    def test_excellent_submission(self, client):
        response = self.submit(client)
        assert response.status_code == 200
        data = response.json()

        assert data["metrics"] == {
            "wpm": 190,
            "accuracy": 100,
            "retention": 76,
            "speed_learning_score": 90,
        }
        assert data["feedback"] == FEEDBACK_EXCELLENT
        assert data["level"] == "Excellent"
        assert data["passage_info"] == {
            "id": "easy-01",
            "title": "Supply and Demand",
            "difficulty": "easy",
        }

    def test_answer_review(self, client):
        response = self.submit(
            client,
            answers=[
                {"questionId": "q1", "selectedOption": "It rises"},
                {"questionId": "q2", "selectedOption": "The equilibrium price"},
            ],
        )
        data = response.json()

        assert data["metrics"]["accuracy"] == 50
        assert data["metrics"]["retention"] == 38
        assert data["metrics"]["speed_learning_score"] == 60
        assert data["feedback"] == FEEDBACK_GOOD_EFFORT
        assert data["level"] == "Fair"
        assert data["answer_review"][0] == {
            "question_id": "q1",
            "selected_option": "It rises",
            "correct_answer": "It falls",
            "is_correct": False,
        }
        assert data["answer_review"][1]["is_correct"] is True

    def test_snake_case_request_accepted(self, client):
        response = client.post(
            "/api/submit",
            json={
                "passage_id": "easy-01",
                "reading_time_seconds": 12,
                "answers": [{"question_id": "q1", "selected_option": "It falls"}],
            },
        )
        assert response.status_code == 200
        assert response.json()["metrics"]["accuracy"] == 50

    def test_unknown_passage(self, client):
        response = self.submit(client, passageId="nope")
        assert response.status_code == 404

    @pytest.mark.parametrize("seconds", [0, -3])
    def test_non_positive_reading_time(self, client, seconds):
        response = self.submit(client, readingTimeSeconds=seconds)
        assert response.status_code == 400
        assert "reading_time_seconds" in response.json()["detail"]

    def test_too_many_correct_answers(self, client):
        answers = [{"questionId": "q1", "selectedOption": "It falls"}] * 3
        response = self.submit(client, answers=answers)
        assert response.status_code == 400

    def test_missing_fields(self, client):
        response = client.post("/api/submit", json={"answers": []})
        assert response.status_code == 422

    def test_submission_is_logged_with_fields(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="speedlearn.api.routes.assessment"):
            self.submit(client)

        (record,) = [r for r in caplog.records if r.name == "speedlearn.api.routes.assessment"]
        assert record.extra_data["passage_id"] == "easy-01"
        assert record.extra_data["level"] == "Excellent"
