from __future__ import annotations

import json
from typing import Any, Callable

import httpx

from recipebox.services.types import ModelRequest

TACOS_JSON = (
    '{"name":"Tacos","description":"Quick tacos","cuisine":"Mexican","prepTime":10,"cookTime":15,'
    '"servings":4,"difficulty":"Easy","dietaryTags":[],'
    '"ingredients":[{"item":"tortilla","amount":"8","unit":"pcs"}],'
    '"instructions":["Heat tortillas","Add filling"],"tips":[],"nutrition":null,'
    '"imageUrl":null,"sourceUrl":null}'
)


def make_envelope(content: Any) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class ModelClientStub:
    """Records every request and replays a canned envelope or error."""

    def __init__(self, envelope: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.envelope = envelope if envelope is not None else make_envelope(TACOS_JSON)
        self.error = error
        self.requests: list[ModelRequest] = []

    def complete(self, request: ModelRequest) -> dict[str, Any]:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.envelope


class PageFetcherStub:
    def __init__(self, text: str = "<html><body>recipe</body></html>", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.urls: list[str] = []

    def __call__(self, url: str) -> str:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


def mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def json_response(status_code: int, body: Any) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"),
                          headers={"Content-Type": "application/json"})

