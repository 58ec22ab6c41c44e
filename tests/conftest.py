import pytest

from services.application_assistant import ApplicationAssistant
from services.storage import JsonStore


class FakeCompletionClient:
    """Stands in for CompletionClient; records every prompt it receives."""

    def __init__(self, response="", error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def complete(self, prompt, json_mode=False):
        self.calls.append({"prompt": prompt, "json_mode": json_mode})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def make_assistant():
    """Factory returning (assistant, fake_client) for a canned response or error."""
    def _make(response="", error=None, **kwargs):
        fake = FakeCompletionClient(response=response, error=error)
        return ApplicationAssistant(fake, **kwargs), fake
    return _make


@pytest.fixture
def store(tmp_path):
    return JsonStore(str(tmp_path / "store"))
