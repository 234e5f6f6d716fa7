from types import SimpleNamespace

import pytest


class FakeModels:
    def __init__(self, text="Beba mais água e caminhe 30 minutos por dia.", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeClient:
    def __init__(self, **kwargs):
        self.models = FakeModels(**kwargs)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def client_factory():
    return FakeClient


@pytest.fixture
def gemini(monkeypatch):
    """Replace google.genai.Client so no request leaves the test process."""
    holder = {"client": FakeClient()}

    def factory(api_key=None, **kwargs):
        holder["api_key"] = api_key
        return holder["client"]

    monkeypatch.setenv("API_KEY", "test-key")
    monkeypatch.setattr("google.genai.Client", factory)
    return holder
