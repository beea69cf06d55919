"""
Test Configuration

Pytest configuration and fixtures for the test suite.
"""

import os

os.environ.setdefault("GOOGLE_GEMINI_KEY", "test-gemini-key")
os.environ.setdefault("LOG_JSON_FORMAT", "false")

from types import SimpleNamespace
from typing import Callable, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from revu.config import Settings
from revu.main import app
from revu.services.ai_engine import AIReviewError, get_review_engine

SAMPLE_REVIEW = """❌ **Bad Code:**
```javascript
var x = 1
```

🔍 **Issues:**
- **❌** Uses `var` instead of `const`.
"""


class FakeCompletions:
    """Stands in for AsyncOpenAI().chat.completions."""

    def __init__(self, content: Optional[str] = SAMPLE_REVIEW, error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: List[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)], usage=None)


class FakeAIClient:
    def __init__(self, completions: FakeCompletions):
        self.completions = completions
        self.chat = SimpleNamespace(completions=completions)


class FakeEngine:
    """Review engine double used by the API tests."""

    def __init__(self, review: str = SAMPLE_REVIEW, fail: bool = False):
        self.review = review
        self.fail = fail
        self.received: List[str] = []

    async def generate_review(self, code: str) -> str:
        self.received.append(code)
        if self.fail:
            raise AIReviewError("vendor unavailable")
        return self.review


class StubReviewClient:
    """Review proxy client double used by the UI tests."""

    def __init__(self, review: str = SAMPLE_REVIEW, error: Optional[Exception] = None):
        self.review = review
        self.error = error
        self.calls: List[str] = []
        self.on_call: Optional[Callable[[], None]] = None

    def request_review(self, code: str) -> str:
        self.calls.append(code)
        if self.on_call is not None:
            self.on_call()
        if self.error is not None:
            raise self.error
        return self.review


@pytest.fixture
def sample_review() -> str:
    """Markdown review returned by the fakes."""
    return SAMPLE_REVIEW


@pytest.fixture
def sample_code() -> str:
    return "function add(a, b) {\n  return a + b\n}\n"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, google_gemini_key="test-gemini-key")


@pytest.fixture
def make_ai_client() -> Callable[..., FakeAIClient]:
    """Factory for fake AI clients: make_ai_client(content=..., error=...)."""
    def factory(content: Optional[str] = SAMPLE_REVIEW, error: Optional[Exception] = None) -> FakeAIClient:
        return FakeAIClient(FakeCompletions(content=content, error=error))
    return factory


@pytest.fixture
def fake_ai_client(make_ai_client) -> FakeAIClient:
    return make_ai_client()


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def client(fake_engine: FakeEngine) -> Generator[TestClient, None, None]:
    """Test client with the review engine replaced by a fake."""
    app.dependency_overrides[get_review_engine] = lambda: fake_engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_stub_client() -> Callable[..., StubReviewClient]:
    """Factory for review proxy client doubles: make_stub_client(review=..., error=...)."""
    def factory(review: str = SAMPLE_REVIEW, error: Optional[Exception] = None) -> StubReviewClient:
        return StubReviewClient(review=review, error=error)
    return factory
