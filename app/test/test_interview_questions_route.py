"""
Test Interview Questions Routes

End-to-end tests of POST /api/interview-questions and POST /generate-qa with
the completion client and MongoDB collection replaced by in-memory fakes.

Dependencies:
- pytest: For testing framework
- fastapi.testclient: For issuing requests against the app
"""

import pytest
from pymongo.errors import ServerSelectionTimeoutError
from conftest import FakeCompletionClient
from app.core.dependencies import get_completion_client
from app.errors.exceptions import ProviderError, ProviderThrottled, ProviderUnavailable
from app.main import app

REQUEST_BODY = {
    "jobType": "Backend Engineer",
    "workExperience": "3",
    "companyType": "Startup",
    "location": "Berlin",
}

EXPECTED_QUESTIONS = [
    {"question": "What is a closure?", "answer": "A function bundled with its lexical scope."},
    {"question": "Describe REST.", "answer": "An architectural style for networked APIs."},
]


def use_completion_client(fake: FakeCompletionClient):
    app.dependency_overrides[get_completion_client] = lambda: fake


@pytest.mark.parametrize("path", ["/api/interview-questions", "/generate-qa"])
def test_success_returns_questions_only(client, fake_collection, path):
    """Test that success returns only the parsed questions on both paths."""
    response = client.post(path, json=REQUEST_BODY)

    assert response.status_code == 200
    assert response.json() == {"questions": EXPECTED_QUESTIONS}
    fake_collection.insert_one.assert_awaited_once()


def test_success_persists_request_fields_and_records(client, fake_collection, completion_client):
    """Test that the request fields and records are persisted."""
    client.post("/api/interview-questions", json=REQUEST_BODY)

    document = fake_collection.insert_one.call_args.args[0]
    for key, value in REQUEST_BODY.items():
        assert document[key] == value
    assert document["questions"] == EXPECTED_QUESTIONS
    assert "Backend Engineer role" in completion_client.prompts[0]


def test_missing_fields_flow_through(client, fake_collection, completion_client):
    """Test that missing fields reach the prompt and store without validation errors."""
    response = client.post("/api/interview-questions", json={"jobType": "Designer", "workExperience": 4})

    assert response.status_code == 200
    assert "- Work Experience: 4 years" in completion_client.prompts[0]
    document = fake_collection.insert_one.call_args.args[0]
    assert document["workExperience"] == "4"
    assert document["location"] is None


def test_missing_body_is_accepted(client, completion_client):
    """Test that a request without a body is treated as all fields missing."""
    response = client.post("/api/interview-questions")

    assert response.status_code == 200
    assert len(completion_client.prompts) == 1


def test_non_object_body_is_rejected(client, fake_collection):
    """Test that a body that is not a JSON object gets 422."""
    response = client.post("/api/interview-questions", json=["not", "an", "object"])

    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request body"
    fake_collection.insert_one.assert_not_called()


def test_unparseable_completion_returns_500_and_persists_nothing(client, fake_collection):
    """Test that an unparseable completion returns 500 and stores nothing."""
    use_completion_client(FakeCompletionClient(text="I'm sorry, I can only chat about the weather."))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to parse AI provider response properly."}
    fake_collection.insert_one.assert_not_called()


def test_completion_without_answers_returns_500(client, fake_collection):
    """Test that numbered items without answers return 500."""
    use_completion_client(FakeCompletionClient(text="1. First?\n2. Second?\n"))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 500
    fake_collection.insert_one.assert_not_called()


def test_throttled_with_provider_hint(client, fake_collection):
    """Test that throttling returns 503 with the provider's retry hint."""
    use_completion_client(FakeCompletionClient(error=ProviderThrottled("quota", retry_after="37s")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 503
    assert response.json() == {
        "error": "AI provider quota exceeded. Please try again later.",
        "retryAfter": "37s",
    }
    assert response.headers["retry-after"] == "37"
    fake_collection.insert_one.assert_not_called()


def test_throttled_without_hint_uses_default(client):
    """Test that throttling without a hint falls back to 60s."""
    use_completion_client(FakeCompletionClient(error=ProviderThrottled("quota")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 503
    assert response.json()["retryAfter"] == "60s"
    assert response.headers["retry-after"] == "60"


def test_provider_unavailable_returns_502(client):
    """Test that an unreachable provider returns 502."""
    use_completion_client(FakeCompletionClient(error=ProviderUnavailable("connection refused")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 502
    assert response.json() == {"error": "AI provider is unavailable."}


def test_provider_error_returns_500_with_distinct_message(client):
    """Test that other provider errors return 500 with their own message."""
    use_completion_client(FakeCompletionClient(error=ProviderError("bad request")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate interview questions."}


def test_persistence_failure_returns_500_despite_parsed_records(client, fake_collection):
    """Test that a failed save returns 500 even though records were parsed."""
    fake_collection.insert_one.side_effect = ServerSelectionTimeoutError("No servers found")

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to save interview questions"}
    assert "questions" not in response.json()


def test_unexpected_error_returns_internal_server_error(client):
    """Test that an unexpected exception returns a generic 500."""
    use_completion_client(FakeCompletionClient(error=RuntimeError("boom")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_non_string_fields_flow_through_as_text(client, fake_collection, completion_client):
    """Test that booleans, numbers, objects and arrays are passed on as JSON text."""
    response = client.post(
        "/api/interview-questions",
        json={"jobType": True, "workExperience": 3.5, "companyType": {"a": 1}, "location": ["X", "Y"]},
    )

    assert response.status_code == 200
    prompt = completion_client.prompts[0]
    assert "for a true role" in prompt
    assert "- Work Experience: 3.5 years" in prompt
    assert '- Target Company Type: {"a": 1}' in prompt
    assert '- Preferred Location: ["X", "Y"]' in prompt
    document = fake_collection.insert_one.call_args.args[0]
    assert document["jobType"] == "true"
    assert document["companyType"] == '{"a": 1}'


def test_infinite_retry_hint_still_returns_503(client):
    """Test that an infinite retry hint falls back to the default header value."""
    use_completion_client(FakeCompletionClient(error=ProviderThrottled("quota", retry_after="infs")))

    response = client.post("/api/interview-questions", json=REQUEST_BODY)

    assert response.status_code == 503
    assert response.headers["retry-after"] == "60"
