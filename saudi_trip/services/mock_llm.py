"""
Mock LLM Client - Offline stand-in for the completion API.
Streams a short canned itinerary as OpenAI chat completion chunks.
"""
import asyncio
import logging
import re
import time
import uuid
from typing import Optional

from openai.types.chat import ChatCompletionChunk
from openai.types.chat.chat_completion_chunk import Choice, ChoiceDelta

logger = logging.getLogger(__name__)

CANNED_ITINERARY = """Day 1: Riyadh
- Morning: Masmak Fortress and the old Deira souq.
- Afternoon: National Museum of Saudi Arabia.
- Evening: Sunset at the Edge of the World, dinner in Diriyah.

Day 2: Diriyah
- Morning: At-Turaif UNESCO district walking tour.
- Afternoon: Bujairi Terrace for lunch and coffee.
- Evening: Kingdom Centre Sky Bridge.

Tip: Dress modestly and plan visits around prayer times."""


def make_chunk(content: Optional[str], model: str, chunk_id: str, finish_reason: Optional[str] = None) -> ChatCompletionChunk:
    """Build a chunk in the shape the OpenAI SDK yields while streaming."""
    return ChatCompletionChunk(
        id=chunk_id,
        object="chat.completion.chunk",
        created=int(time.time()),
        model=model,
        choices=[Choice(index=0, delta=ChoiceDelta(content=content), finish_reason=finish_reason)],
    )


class MockStream:
    """Async iterator of chunks with the same close() hook as the SDK stream."""

    def __init__(self, pieces: list[str], model: str, delay: float = 0.0):
        self._pieces = pieces
        self._model = model
        self._delay = delay
        self._id = f"mock-{uuid.uuid4().hex[:12]}"
        self.closed = False

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        # The real APIs open with an empty role-only delta
        yield make_chunk("", self._model, self._id)
        for piece in self._pieces:
            if self.closed:
                return
            if self._delay:
                await asyncio.sleep(self._delay)
            yield make_chunk(piece, self._model, self._id)
        yield make_chunk(None, self._model, self._id, finish_reason="stop")

    async def close(self):
        self.closed = True


class MockLLMClient:
    """Streams CANNED_ITINERARY word by word."""

    def __init__(self, delay: float = 0.02):
        self.model = "mock-itinerary"
        self.delay = delay

    async def stream_chat(
        self,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> MockStream:
        logger.info(f"Mock LLM streaming canned itinerary for {len(messages)} messages")
        pieces = re.findall(r"\S+\s*", CANNED_ITINERARY)
        return MockStream(pieces, self.model, self.delay)
