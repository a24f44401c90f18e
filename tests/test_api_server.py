"""End-to-end tests for the HTTP API the page talks to."""

import json


def _answer_current(api_client, option_index):
    api_client.post("/quiz/select", json={"option_index": option_index})
    return api_client.post("/quiz/advance")


class TestPage:
    def test_index_serves_html(self, api_client):
        response = api_client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "DevOps QuizMaster" in response.text

    def test_page_handles_empty_history_and_failed_feedback(self, api_client):
        page = api_client.get("/").text
        assert "'clear-history-button').disabled = payload.entries.length === 0" in page
        assert "Could not generate AI analysis at this time." in page
        assert "target.textContent = UI.feedback_error" in page

    def test_initial_state(self, api_client):
        body = api_client.get("/state").json()
        assert body["view"] == "HOME"
        assert body["is_generating"] is False
        assert body["quiz"] is None
        assert body["form"]["default_difficulty"] == "Intermediate"


class TestGenerate:
    def test_blank_topic_is_rejected(self, api_client, genai_client):
        response = api_client.post("/generate", json={"topic": "   ", "difficulty": "Beginner"})
        assert response.status_code == 422
        genai_client.models.generate_content.assert_not_called()

    def test_unknown_difficulty_is_rejected(self, api_client):
        response = api_client.post("/generate", json={"topic": "Docker", "difficulty": "Impossible"})
        assert response.status_code == 422

    def test_failure_is_reported_in_state(self, api_client, genai_client):
        genai_client.models.generate_content.side_effect = RuntimeError("quota")
        body = api_client.post("/generate", json={"topic": "Docker"}).json()
        assert body["view"] == "HOME"
        assert body["error"]
        assert body["is_generating"] is False

    def test_select_without_quiz_conflicts(self, api_client):
        response = api_client.post("/quiz/select", json={"option_index": 0})
        assert response.status_code == 409


class TestFullFlow:
    def test_generate_answer_review_and_history(self, api_client, genai_client, make_response, quiz_payload):
        genai_client.models.generate_content.side_effect = [
            make_response(json.dumps(quiz_payload)),
            make_response("**Good** work on probes."),
        ]

        body = api_client.post("/generate", json={"topic": " Docker ", "difficulty": "Advanced"}).json()
        assert body["view"] == "QUIZ"
        quiz = body["quiz"]
        assert quiz["topic"] == "Docker"
        assert quiz["difficulty"] == "Advanced"
        assert quiz["question_number"] == 1
        assert quiz["options_html"][0] == "Option 1-A"

        step = api_client.post("/quiz/select", json={"option_index": 9})
        assert step.status_code == 422

        unanswered = api_client.post("/quiz/advance").json()
        assert unanswered["quiz"]["question_number"] == 1

        for question in quiz_payload["questions"]:
            body = _answer_current(api_client, question["correctAnswerIndex"]).json()
        assert body["view"] == "RESULTS"
        assert body["has_results"] is True

        results = api_client.get("/results").json()
        assert results["percentage"] == 100
        assert results["verdict"] == "Great Job!"

        feedback = api_client.get("/results/feedback").json()
        assert feedback["feedback"] == "**Good** work on probes."
        assert "<strong>Good</strong>" in feedback["feedback_html"]
        assert api_client.get("/results/feedback").json() == feedback
        assert genai_client.models.generate_content.call_count == 2

        assert api_client.post("/retry").json()["view"] == "HOME"
        assert api_client.get("/results").status_code == 404

        assert api_client.post("/history/open").json()["view"] == "HISTORY"
        entries = api_client.get("/history").json()["entries"]
        assert len(entries) == 1
        assert entries[0]["topic"] == "Docker"
        assert entries[0]["percentage"] == 100

        assert api_client.delete("/history").json() == {"entries": []}
        assert api_client.get("/history").json() == {"entries": []}
        assert api_client.post("/history/back").json()["view"] == "HOME"

    def test_home_abandons_quiz(self, api_client):
        api_client.post("/generate", json={"topic": "Git"})
        _answer_current(api_client, 0)
        body = api_client.post("/home").json()
        assert body["view"] == "HOME"
        assert body["quiz"] is None
        assert api_client.get("/history").json() == {"entries": []}

    def test_feedback_without_results_conflicts(self, api_client):
        assert api_client.get("/results/feedback").status_code == 409
