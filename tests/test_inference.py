"""Tests for inference services."""

from unittest.mock import MagicMock, patch

import pytest
from feedbackhub.core.config import settings
from feedbackhub.services.inference import (
    InferenceError,
    InferenceServiceFactory,
    OpenAIInference,
    UnavailableInference,
    WorkersAIInference,
)
from feedbackhub.services.insights import INSIGHT_SCHEMA


@pytest.fixture
def no_credentials(monkeypatch):
    monkeypatch.setattr(settings, "inference_provider", "auto")
    monkeypatch.setattr(settings, "openai_api_key", "")
    monkeypatch.setattr(settings, "cloudflare_account_id", "")
    monkeypatch.setattr(settings, "cloudflare_api_token", "")


def _http_response(status_code=200, payload=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = payload
    return response


class TestFactory:
    """Test provider selection."""

    def test_auto_without_credentials(self, no_credentials):
        assert isinstance(InferenceServiceFactory.create(), UnavailableInference)

    def test_auto_prefers_workers_ai(self, no_credentials, monkeypatch):
        monkeypatch.setattr(settings, "cloudflare_account_id", "acct")
        monkeypatch.setattr(settings, "cloudflare_api_token", "token")
        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        service = InferenceServiceFactory.create()
        assert isinstance(service, WorkersAIInference)
        assert service.url.endswith("/acct/ai/run/@cf/meta/llama-3-8b-instruct")

    def test_auto_uses_openai_key(self, no_credentials, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", "sk-test")
        with patch("feedbackhub.services.inference.openai.OpenAI"):
            assert isinstance(InferenceServiceFactory.create(), OpenAIInference)

    def test_explicit_none(self, no_credentials):
        assert isinstance(InferenceServiceFactory.create("none"), UnavailableInference)

    def test_unknown_provider(self, no_credentials):
        with pytest.raises(ValueError):
            InferenceServiceFactory.create("carrier-pigeon")


def test_unavailable_always_raises(no_credentials):
    with pytest.raises(InferenceError, match="No inference provider configured."):
        UnavailableInference().infer("prompt", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)


class TestWorkersAI:
    """Test the Workers AI REST client."""

    def _service(self):
        return WorkersAIInference(account_id="acct", api_token="token", model="@cf/test/model")

    def test_request_shape_and_object_response(self):
        body = {"success": True, "result": {"response": {"positive_summary": []}}}
        with patch("feedbackhub.services.inference.requests.post",
                   return_value=_http_response(payload=body)) as post:
            result = self._service().infer("the prompt", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)

        assert result == {"positive_summary": []}
        url = post.call_args.args[0]
        kwargs = post.call_args.kwargs
        assert url == "https://api.cloudflare.com/client/v4/accounts/acct/ai/run/@cf/test/model"
        assert kwargs["headers"] == {"Authorization": "Bearer token"}
        assert kwargs["json"]["response_format"] == {"type": "json_schema", "json_schema": INSIGHT_SCHEMA}
        assert kwargs["json"]["max_tokens"] == 500
        assert kwargs["json"]["temperature"] == 0
        assert kwargs["json"]["messages"][0]["role"] == "system"
        assert kwargs["json"]["messages"][1] == {"role": "user", "content": "the prompt"}

    def test_string_response(self):
        body = {"success": True, "result": {"response": '{"positive_summary": []}'}}
        with patch("feedbackhub.services.inference.requests.post", return_value=_http_response(payload=body)):
            result = self._service().infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)
        assert result == '{"positive_summary": []}'

    def test_http_error(self):
        response = _http_response(status_code=402, text="billing required")
        with patch("feedbackhub.services.inference.requests.post", return_value=response):
            with pytest.raises(InferenceError, match="402 - billing required"):
                self._service().infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)

    def test_api_error(self):
        body = {"success": False, "errors": [{"code": 5007, "message": "No such model"}]}
        with patch("feedbackhub.services.inference.requests.post", return_value=_http_response(payload=body)):
            with pytest.raises(InferenceError, match="No such model"):
                self._service().infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)

    @pytest.mark.parametrize("body", [
        [{"response": "{}"}],
        {"success": True, "result": ["not", "a", "dict"]},
        {"success": True, "result": "plain text"},
    ])
    def test_unexpected_body(self, body):
        with patch("feedbackhub.services.inference.requests.post", return_value=_http_response(payload=body)):
            with pytest.raises(InferenceError, match="Workers AI returned an unexpected body."):
                self._service().infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)

    def test_missing_response(self):
        body = {"success": True, "result": {}}
        with patch("feedbackhub.services.inference.requests.post", return_value=_http_response(payload=body)):
            with pytest.raises(InferenceError):
                self._service().infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)


class TestOpenAI:
    """Test the OpenAI client wrapper."""

    def _service(self, content):
        with patch("feedbackhub.services.inference.openai.OpenAI") as client_cls:
            service = OpenAIInference(api_key="sk-test", model="gpt-test")
        completion = MagicMock()
        completion.choices = [MagicMock()]
        completion.choices[0].message.content = content
        client_cls.return_value.chat.completions.create.return_value = completion
        return service, client_cls.return_value

    def test_returns_message_content(self):
        service, client = self._service('  {"positive_summary": []}  ')
        result = service.infer("the prompt", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)

        assert result == '{"positive_summary": []}'
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["max_tokens"] == 500
        assert kwargs["temperature"] == 0
        assert kwargs["response_format"]["type"] == "json_schema"
        assert kwargs["response_format"]["json_schema"]["schema"] is INSIGHT_SCHEMA

    def test_empty_content_raises(self):
        service, _ = self._service(None)
        with pytest.raises(InferenceError):
            service.infer("p", INSIGHT_SCHEMA, max_output_tokens=500, temperature=0)
