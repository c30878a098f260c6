from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from recipebox.services.errors import ConfigurationError, MalformedResponseError, TransportError
from recipebox.services.types import ModelRequest

logger = logging.getLogger(__name__)

XAI_API_URL = "https://api.x.ai/v1/chat/completions"
DEFAULT_TEXT_MODEL = "grok-3-latest"
DEFAULT_VISION_MODEL = "grok-2-vision-1212"
DEFAULT_TIMEOUT = 60.0
PLACEHOLDER_API_KEYS = frozenset({"your_api_key_here"})

_FAILURE_MESSAGES = {
    "generate": "Failed to generate recipe",
    "extract": "Failed to extract recipe",
}
IMAGE_FAILURE_MESSAGE = "Failed to extract recipe from image"


class XaiClient:
    """Chat-completions client for the xAI endpoint.

    Exactly one HTTP attempt per ``complete`` call; retries belong to callers.
    """

    def __init__(
        self,
        api_key: str,
        *,
        api_url: str = XAI_API_URL,
        text_model: str = DEFAULT_TEXT_MODEL,
        vision_model: str = DEFAULT_VISION_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.text_model = text_model
        self.vision_model = vision_model
        self.timeout = timeout
        self._http_client = http_client
        self._check_api_key()

    def _check_api_key(self) -> None:
        key = (self.api_key or "").strip()
        if not key or key in PLACEHOLDER_API_KEYS:
            raise ConfigurationError("xAI API key not configured")

    def select_model(self, request: ModelRequest) -> str:
        return self.vision_model if request.has_image else self.text_model

    def build_payload(self, request: ModelRequest) -> dict[str, Any]:
        if request.has_image:
            user_content: str | list[dict[str, Any]] = [
                {"type": "text", "text": request.user},
                {"type": "image_url", "image_url": {"url": request.image_data_url}},
            ]
        else:
            user_content = request.user

        payload: dict[str, Any] = {
            "model": self.select_model(request),
            "messages": [
                {"role": "system", "content": request.system},
                {"role": "user", "content": user_content},
            ],
            "temperature": request.temperature,
        }
        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens
        return payload

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key.strip()}",
        }

    def _post(self, payload: dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(
                self.api_url, json=payload, headers=self._headers(), timeout=self.timeout
            )
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.api_url, json=payload, headers=self._headers())

    def complete(self, request: ModelRequest) -> dict[str, Any]:
        """Send ``request`` and return the decoded response envelope."""
        payload = self.build_payload(request)
        failure = IMAGE_FAILURE_MESSAGE if request.has_image else _FAILURE_MESSAGES[request.mode]
        logger.info("Calling %s (mode=%s)", payload["model"], request.mode)

        try:
            response = self._post(payload)
        except httpx.HTTPError as error:
            logger.warning("%s: %s", failure, error)
            raise TransportError(f"{failure}: {error}", url=self.api_url) from error

        if not response.is_success:
            # 4xx and 5xx are classified the same way
            logger.warning("%s: model endpoint returned HTTP %s", failure, response.status_code)
            raise TransportError(failure, status_code=response.status_code, url=self.api_url)

        try:
            envelope = response.json()
        except json.JSONDecodeError as error:
            raise MalformedResponseError("Model response body is not JSON") from error

        if not isinstance(envelope, dict):
            raise MalformedResponseError("Model response body is not a JSON object")
        return envelope
