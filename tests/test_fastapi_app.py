import httpx
import pytest
from fastapi.testclient import TestClient

from gig_advisor.application.chat.graph import build_chat_graph
from gig_advisor.application.chat.prompts import FALLBACK_MESSAGE, REFUSAL_MESSAGE
from gig_advisor.application.services.domain_classifier import KeywordDomainClassifier
from gig_advisor.application.services.finance_keywords import FINANCE_KEYWORDS
from gig_advisor.application.services.reference_data_resolver import ReferenceDataResolver
from gig_advisor.application.use_cases.answer_query import AnswerQueryUseCase
from gig_advisor.domain.ports.domain_classifier_port import IDomainClassifier
from gig_advisor.infrastructure.entrypoints.fastapi_app import create_app
from gig_advisor.infrastructure.llm.gemini_adapter import GeminiCompletionClient


def _test_client(completion, classifier=None):
    graph = build_chat_graph(
        classifier=classifier or KeywordDomainClassifier(FINANCE_KEYWORDS),
        resolver=ReferenceDataResolver(),
        completion=completion,
    )
    return TestClient(create_app(AnswerQueryUseCase(graph)))


@pytest.fixture()
def client(completion):
    return _test_client(completion)


def test_finance_query_returns_model_answer(client, completion):
    response = client.post("/api/chat", json={"query": "How do I track mileage expenses?"})

    assert response.status_code == 200
    body = response.json()
    assert body["response"] == completion.response
    assert body["response"] != REFUSAL_MESSAGE
    assert len(completion.prompts) == 1


def test_off_domain_query_is_refused(client, completion):
    response = client.post("/api/chat", json={"query": "What's the weather today?"})

    assert response.status_code == 200
    assert response.json() == {"response": REFUSAL_MESSAGE}
    assert completion.prompts == []


@pytest.mark.parametrize("payload", [{}, {"query": ""}, {"query": "   "}, {"query": None}])
def test_missing_query_is_a_client_error(client, payload):
    response = client.post("/api/chat", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Query is required"}


def test_request_without_body_is_missing_query(client):
    response = client.post("/api/chat")

    assert response.status_code == 400
    assert response.json() == {"error": "Query is required"}


def test_malformed_json_is_a_client_error(client):
    response = client.post(
        "/api/chat",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_non_string_query_is_a_client_error(client):
    response = client.post("/api/chat", json={"query": 42})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_failing_external_service_still_returns_200():
    def handler(request):
        return httpx.Response(503, json={"error": "unavailable"})

    completion = GeminiCompletionClient(
        api_key="k", transport=httpx.MockTransport(handler)
    )
    client = _test_client(completion)

    response = client.post("/api/chat", json={"query": "What is my tax bracket?"})

    assert response.status_code == 200
    assert response.json() == {"response": FALLBACK_MESSAGE}


def test_unexpected_error_is_a_generic_500(completion):
    class BrokenClassifier(IDomainClassifier):
        def is_finance_domain(self, query):
            raise RuntimeError("secret internal detail")

    client = _test_client(completion, classifier=BrokenClassifier())

    response = client.post("/api/chat", json={"query": "tax"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret" not in response.text


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
