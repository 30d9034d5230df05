"""Inference services that turn a prompt and JSON schema into model output."""

import logging
from typing import Any, Dict, List, Optional, Union

import openai
import requests

from ..core.config import settings
from ..core.constants import ErrorConstants, PromptConstants

logger = logging.getLogger(__name__)

InferenceResponse = Union[str, Dict[str, Any]]


class InferenceError(Exception):
    """Raised when an inference provider cannot produce a response."""


def _messages(prompt: str) -> List[Dict[str, str]]:
    system = PromptConstants.SYSTEM_PROMPT.format(family=settings.product_family)
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": prompt},
    ]


class InferenceService:
    """Base inference capability: prompt and schema in, text or object out."""

    name = "base"

    def infer(self, prompt: str, schema: Dict[str, Any], *,
              max_output_tokens: int, temperature: float) -> InferenceResponse:
        raise NotImplementedError


class OpenAIInference(InferenceService):
    """OpenAI chat completions with JSON-schema response format."""

    name = "openai"

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.client = openai.OpenAI(api_key=api_key or settings.openai_api_key)
        self.model = model or settings.openai_model
        logger.info(f"OpenAI inference initialized with model {self.model}")

    def infer(self, prompt: str, schema: Dict[str, Any], *,
              max_output_tokens: int, temperature: float) -> InferenceResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=_messages(prompt),
            response_format={
                "type": "json_schema",
                "json_schema": {"name": PromptConstants.SCHEMA_NAME, "schema": schema},
            },
            max_tokens=max_output_tokens,
            temperature=temperature,
            timeout=settings.request_timeout,
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise InferenceError("OpenAI returned an empty response.")
        return content.strip()


class WorkersAIInference(InferenceService):
    """Cloudflare Workers AI through the REST API."""

    name = "workers_ai"
    base_url = "https://api.cloudflare.com/client/v4/accounts"

    def __init__(self, account_id: Optional[str] = None, api_token: Optional[str] = None,
                 model: Optional[str] = None):
        self.account_id = account_id or settings.cloudflare_account_id
        self.api_token = api_token or settings.cloudflare_api_token
        self.model = model or settings.workers_ai_model
        self.headers = {"Authorization": f"Bearer {self.api_token}"}

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.account_id}/ai/run/{self.model}"

    def infer(self, prompt: str, schema: Dict[str, Any], *,
              max_output_tokens: int, temperature: float) -> InferenceResponse:
        response = requests.post(
            self.url,
            headers=self.headers,
            json={
                "messages": _messages(prompt),
                "response_format": {"type": "json_schema", "json_schema": schema},
                "max_tokens": max_output_tokens,
                "temperature": temperature,
            },
            timeout=settings.request_timeout,
        )

        if response.status_code != 200:
            body = response.text[:ErrorConstants.MAX_ERROR_BODY_LENGTH]
            raise InferenceError(f"Workers AI request failed: {response.status_code} - {body}")

        data = response.json()
        if not isinstance(data, dict):
            raise InferenceError("Workers AI returned an unexpected body.")
        if not data.get("success", True):
            errors = "; ".join(
                str(e.get("message", e) if isinstance(e, dict) else e)
                for e in data.get("errors") or []
            )
            raise InferenceError(f"Workers AI returned an error: {errors or 'unknown error'}")

        result = data.get("result") or {}
        if not isinstance(result, dict):
            raise InferenceError("Workers AI returned an unexpected body.")
        payload = result.get("response")
        if payload is None:
            raise InferenceError("Workers AI returned no response field.")
        return payload


class UnavailableInference(InferenceService):
    """Used when no provider is configured; every call fails."""

    name = "none"

    def __init__(self):
        logger.info("No inference provider configured; insights will use the heuristic fallback")

    def infer(self, prompt: str, schema: Dict[str, Any], *,
              max_output_tokens: int, temperature: float) -> InferenceResponse:
        raise InferenceError("No inference provider configured.")


class InferenceServiceFactory:
    """Factory for creating inference services."""

    @staticmethod
    def create(provider: Optional[str] = None) -> InferenceService:
        """Create the configured inference service."""
        provider = (provider or settings.inference_provider or "auto").lower()

        if provider == "auto":
            if settings.has_workers_ai_credentials:
                return WorkersAIInference()
            if settings.openai_api_key:
                return OpenAIInference()
            return UnavailableInference()
        if provider == "workers_ai":
            return WorkersAIInference()
        if provider == "openai":
            return OpenAIInference()
        if provider == "none":
            return UnavailableInference()
        raise ValueError(f"Unknown inference provider: {provider}")
