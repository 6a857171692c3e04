import os

# Settings are read at import time; provide a credential before anything imports app.*
os.environ["LLM_PROVIDER"] = "gemini"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["STRICT_METHODS"] = "true"

import pytest
from fastapi.testclient import TestClient

from app.agents.llm.base import LLMClient
from app.agents.llm.client import get_llm_client


class FakeLLM(LLMClient):
    """Returns a canned reply (or raises) and records every call."""

    provider = "fake"

    def __init__(self, reply: str = "", error: Exception | None = None):
        super().__init__(model="fake-model")
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_text(self, *, system, user, config):
        self.calls.append({"system": system, "user": user, "config": config})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    return FakeLLM


@pytest.fixture
def api_client():
    """TestClient factory; `llm` is served for every request via the dependency override."""
    from app.main import app

    def _make(llm: LLMClient) -> TestClient:
        app.dependency_overrides[get_llm_client] = lambda: llm
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
