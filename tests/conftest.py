"""Pytest configuration - fake transport, sample payloads, and .env for live tests."""

import io
import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
from dotenv import load_dotenv

from justcms import JustCmsClient

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

TOKEN = "test-token"
PROJECT_ID = "proj-123"


# =============================================================================
# Fake Transport
# =============================================================================


class FakeResponse:
    """Stand-in for the object returned by urllib.request.urlopen."""

    def __init__(self, body: bytes):
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


@dataclass
class FakeTransport:
    """Replays queued responses and records every request."""

    responses: list[tuple[int, bytes]] = field(default_factory=list)
    requests: list[urllib.request.Request] = field(default_factory=list)
    timeouts: list[Any] = field(default_factory=list)

    def reply(self, status: int = 200, body: Any = None, raw: str | None = None) -> None:
        """Queue a response. ``body`` is JSON-encoded unless ``raw`` is given."""
        payload = raw if raw is not None else json.dumps(body)
        self.responses.append((status, payload.encode("utf-8")))

    def __call__(self, req: urllib.request.Request, **kwargs: Any) -> FakeResponse:
        self.requests.append(req)
        self.timeouts.append(kwargs.get("timeout"))
        status, body = self.responses.pop(0)
        if status >= 400:
            raise urllib.error.HTTPError(req.full_url, status, "error", {}, io.BytesIO(body))
        return FakeResponse(body)

    @property
    def last(self) -> urllib.request.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return urllib.parse.urlsplit(self.last.full_url).path

    @property
    def last_query(self) -> dict[str, list[str]]:
        return urllib.parse.parse_qs(urllib.parse.urlsplit(self.last.full_url).query, keep_blank_values=True)


@pytest.fixture
def transport(monkeypatch) -> FakeTransport:
    fake = FakeTransport()
    monkeypatch.setattr(urllib.request, "urlopen", fake)
    return fake


@pytest.fixture
def client() -> JustCmsClient:
    return JustCmsClient(token=TOKEN, project_id=PROJECT_ID, env={})


# =============================================================================
# Sample Payloads
# =============================================================================


def variant(name: str, width: int) -> dict[str, Any]:
    return {
        "url": f"https://cdn.justcms.co/{name}-{width}.webp",
        "width": width,
        "height": width // 2,
        "filename": f"{name}-{width}.webp",
    }


@pytest.fixture
def page_summary_payload() -> dict[str, Any]:
    return {
        "title": "Hello World",
        "subtitle": "First post",
        "coverImage": {"alt": "Cover", "variants": [variant("cover", 480), variant("cover", 1200)]},
        "slug": "hello-world",
        "categories": [{"name": "Blog", "slug": "blog"}],
        "createdAt": "2025-01-02T10:00:00Z",
        "updatedAt": "2025-01-03T10:00:00Z",
    }


@pytest.fixture
def page_detail_payload(page_summary_payload) -> dict[str, Any]:
    return {
        **page_summary_payload,
        "meta": {"title": "Hello World | Blog", "description": "Our first post"},
        "content": [
            {"type": "header", "styles": ["Centered"], "header": "Welcome", "subheader": None, "size": "h1"},
            {
                "type": "list",
                "styles": [],
                "options": [{"title": "One", "subtitle": "first"}, {"title": "Two"}],
            },
            {"type": "embed", "styles": [], "url": "https://www.youtube.com/watch?v=abc"},
            {
                "type": "image",
                "styles": ["Wide"],
                "images": [{"alt": "Photo", "variants": [variant("photo", 480), variant("photo", 1200)]}],
            },
            {"type": "code", "styles": [], "code": "print('hi')"},
            {"type": "text", "styles": ["Highlight"], "text": "<p>Body</p>"},
            {"type": "cta", "styles": [], "text": "Sign up", "url": "/signup", "description": None},
            {"type": "custom", "styles": [], "blockId": "pricing", "plan": "pro", "price": 10},
        ],
    }


@pytest.fixture
def menu_payload() -> dict[str, Any]:
    return {
        "id": "main",
        "name": "Main menu",
        "items": [
            {
                "title": "Docs",
                "icon": "book",
                "url": "/docs",
                "styles": [],
                "children": [
                    {
                        "title": "API",
                        "subtitle": "Reference",
                        "icon": "",
                        "url": "/docs/api",
                        "styles": ["Bold"],
                        "children": [],
                    }
                ],
            }
        ],
    }


@pytest.fixture
def layout_payload() -> dict[str, Any]:
    return {
        "id": "footer",
        "name": "Footer",
        "items": [
            {"label": "Copyright", "description": "", "uid": "copyright", "type": "text", "value": "(c) 2025"},
            {"label": "Show social", "description": "Toggle", "uid": "social", "type": "boolean", "value": True},
        ],
    }
