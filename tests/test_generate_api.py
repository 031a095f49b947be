# tests/test_generate_api.py
import json
import pytest
from fastapi.testclient import TestClient

from exam_generator.utils.config import settings
from exam_generator.utils.errors import (
    AuthenticationError,
    EmptyResponseError,
    ExamGenerationError,
    ParseError,
    QuestionValidationError,
    UpstreamError,
    UpstreamRateLimitError,
    UpstreamTimeoutError,
)
from conftest import SAMPLE_QUESTIONS, TEST_TOKEN, make_request_body


class TestGenerateSuccess:
    def test_full_generation_returns_parsed_questions(self, client: TestClient, mock_complete):
        mock_complete.return_value = "```json\n" + json.dumps(SAMPLE_QUESTIONS) + "\n```"
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 200
        assert response.json() == {"questions": SAMPLE_QUESTIONS}

        prompt = mock_complete.await_args.args[0]
        assert "- 1 open-ended questions" in prompt
        assert "Subject: Biology" in prompt

    def test_regeneration_sends_single_question_prompt(self, client: TestClient, mock_complete):
        replacement = {"type": "true-false", "question": "Leaves are green.", "answer": "True"}
        mock_complete.return_value = json.dumps([replacement])
        response = client.post("/api/generate", json=make_request_body(
            regenerateIndex=2, regenerateQuestionType="true-false"
        ))
        assert response.status_code == 200
        assert response.json()["questions"] == [replacement]

        prompt = mock_complete.await_args.args[0]
        assert "exactly one" in prompt
        assert 'of type "true-false"' in prompt

    def test_records_are_passed_through_without_schema_checks(self, client: TestClient, mock_complete):
        mock_complete.return_value = '[{"question": "Only text"}, {"type": "open-ended", "question": "Q", "answer": "A", "hint": "x"}]'
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 200
        assert response.json()["questions"] == [
            {"question": "Only text"},
            {"type": "open-ended", "question": "Q", "answer": "A", "hint": "x"},
        ]

    def test_count_mismatch_is_trusted_by_default(self, client: TestClient, mock_complete):
        mock_complete.return_value = json.dumps(SAMPLE_QUESTIONS[:1])
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 200
        assert len(response.json()["questions"]) == 1


class TestGenerateFailures:
    @pytest.mark.parametrize("error_cls", [
        AuthenticationError,
        UpstreamTimeoutError,
        UpstreamRateLimitError,
        UpstreamError,
    ])
    def test_provider_failures_map_to_distinct_messages(self, client: TestClient, mock_complete, error_cls):
        mock_complete.side_effect = error_cls()
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": error_cls.user_message}

    def test_failure_messages_are_distinct(self):
        messages = [
            AuthenticationError.user_message,
            UpstreamTimeoutError.user_message,
            UpstreamRateLimitError.user_message,
            UpstreamError.user_message,
            EmptyResponseError.user_message,
            ParseError.user_message,
            QuestionValidationError.user_message,
        ]
        assert len(set(messages)) == len(messages)

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_completion(self, client: TestClient, mock_complete, content):
        mock_complete.return_value = content
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": EmptyResponseError.user_message}

    @pytest.mark.parametrize("content", ["not json at all", '{"a": 1}', "```json\n[{broken\n```"])
    def test_unparseable_completion(self, client: TestClient, mock_complete, content):
        mock_complete.return_value = content
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": ParseError.user_message}

    def test_unexpected_exception_returns_generic_error(self, client: TestClient, mock_complete):
        mock_complete.side_effect = KeyError("choices")
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": ExamGenerationError.user_message}

    def test_missing_credential_fails_before_outbound_call(self, client: TestClient, mock_complete, monkeypatch):
        monkeypatch.setattr(settings, "github_pat", None)
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": AuthenticationError.user_message}
        mock_complete.assert_not_called()

    def test_error_body_never_contains_credential(self, client: TestClient, mock_complete):
        mock_complete.side_effect = AuthenticationError("Model provider rejected the credential")
        response = client.post("/api/generate", json=make_request_body())
        assert TEST_TOKEN not in response.text


class TestRequestValidation:
    def test_empty_topics_rejected(self, client: TestClient, mock_complete):
        response = client.post("/api/generate", json=make_request_body(topics=[]))
        assert response.status_code == 422
        assert "error" in response.json()
        mock_complete.assert_not_called()

    def test_negative_count_rejected(self, client: TestClient, mock_complete):
        response = client.post("/api/generate", json=make_request_body(
            questionCounts={"open-ended": -1, "multiple-choice": 0, "true-false": 0}
        ))
        assert response.status_code == 422
        mock_complete.assert_not_called()

    def test_unknown_language_rejected(self, client: TestClient, mock_complete):
        response = client.post("/api/generate", json=make_request_body(language="de"))
        assert response.status_code == 422

    def test_regeneration_index_without_type_rejected(self, client: TestClient, mock_complete):
        response = client.post("/api/generate", json=make_request_body(regenerateIndex=1))
        assert response.status_code == 422
        mock_complete.assert_not_called()


class TestStrictValidation:
    @pytest.fixture(autouse=True)
    def strict(self, monkeypatch):
        monkeypatch.setattr(settings, "strict_validation", True)

    def test_matching_output_is_accepted(self, client: TestClient, mock_complete):
        mock_complete.return_value = json.dumps(SAMPLE_QUESTIONS)
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 200

    def test_wrong_count_is_rejected(self, client: TestClient, mock_complete):
        mock_complete.return_value = json.dumps(SAMPLE_QUESTIONS[:2])
        response = client.post("/api/generate", json=make_request_body())
        assert response.status_code == 500
        assert response.json() == {"error": QuestionValidationError.user_message}
