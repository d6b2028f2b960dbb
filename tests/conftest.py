"""Shared fixtures: a scripted upstream completion stream and LLM client."""
import pytest

from saudi_trip.services.mock_llm import make_chunk


class FakeUpstream:
    """Yields scripted chunks, then optionally raises mid-stream."""

    def __init__(self, deltas=(), error=None):
        self.deltas = list(deltas)
        self.error = error
        self.closed = False
        self.consumed = 0

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for delta in self.deltas:
            self.consumed += 1
            # Strings become SDK chunks; anything else is passed through raw
            yield make_chunk(delta, "test-model", "chunk-1") if isinstance(delta, str) else delta
        if self.error is not None:
            raise self.error

    async def close(self):
        self.closed = True


class FakeLLMClient:
    """Records stream_chat calls and returns a FakeUpstream."""

    def __init__(self, upstream=None, open_error=None):
        self.upstream = upstream or FakeUpstream()
        self.open_error = open_error
        self.calls = []

    async def stream_chat(self, messages, model=None, temperature=None, max_tokens=None):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.open_error is not None:
            raise self.open_error
        return self.upstream


@pytest.fixture
def make_llm():
    """Factory for fake LLM clients with a scripted stream."""
    def _make(deltas=(), stream_error=None, open_error=None):
        return FakeLLMClient(FakeUpstream(deltas, stream_error), open_error)
    return _make
