"""
Itinerary Relay.
Bridges the upstream token stream of the LLM to the downstream HTTP response,
forwarding each text delta as soon as it arrives and in arrival order.

One relay serves exactly one request:

    idle -> requesting -> streaming -> completed | failed
"""
import logging
from enum import Enum
from typing import Any, AsyncIterator, Optional

from ..models.stream import StreamEnd, StreamError, StreamEvent, TextDelta
from .llm_client import LLMClient
from .prompt_builder import ItineraryPrompts

logger = logging.getLogger(__name__)


class RelayState(str, Enum):
    """Lifecycle of a relay."""
    IDLE = "idle"
    REQUESTING = "requesting"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"


class RelayError(Exception):
    """Base class for relay failures."""


class UpstreamRequestError(RelayError):
    """The upstream service rejected or never answered the request."""


class StreamInterrupted(RelayError):
    """The upstream stream broke after streaming had started."""


def extract_text(chunk: Any) -> str:
    """Text payload of one ChatCompletionChunk; '' when the delta carries none."""
    if not chunk.choices:
        return ""
    delta = chunk.choices[0].delta
    if delta is None:
        return ""
    return delta.content or ""


class ItineraryRelay:
    """Single-use relay from an LLM completion stream to a byte stream."""

    def __init__(self, client: LLMClient):
        self.client = client
        self.state = RelayState.IDLE
        self.failure: Optional[str] = None
        self._upstream = None

    def _transition(self, state: RelayState):
        logger.debug(f"Relay {self.state.value} -> {state.value}")
        self.state = state

    async def open(
        self,
        system_prompt: str,
        user_prompt: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        """
        Send the streaming completion request upstream.

        Raises:
            RelayError: the relay was already used
            UpstreamRequestError: the request failed before any chunk was read
        """
        if self.state != RelayState.IDLE:
            raise RelayError(f"Relay cannot be reopened from state '{self.state.value}'")

        self._transition(RelayState.REQUESTING)
        messages = ItineraryPrompts(system=system_prompt, user=user_prompt).to_messages()
        try:
            self._upstream = await self.client.stream_chat(
                messages,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except Exception as e:
            self.failure = str(e)
            self._transition(RelayState.FAILED)
            logger.error(f"Upstream completion request failed: {e}")
            raise UpstreamRequestError(str(e)) from e

        self._transition(RelayState.STREAMING)

    async def _next_event(self, chunks: AsyncIterator[Any]) -> StreamEvent:
        """Read one upstream chunk and classify it."""
        try:
            chunk = await anext(chunks)
            return TextDelta(text=extract_text(chunk))
        except StopAsyncIteration:
            return StreamEnd()
        except Exception as e:
            return StreamError(reason=f"{type(e).__name__}: {e}")

    async def stream(self) -> AsyncIterator[bytes]:
        """
        Yield the generated text as UTF-8 bytes.

        Ends normally once the upstream stream is exhausted. Raises
        StreamInterrupted if reading upstream fails, after everything
        received so far has been yielded.
        """
        if self.state != RelayState.STREAMING:
            raise RelayError(f"Relay is not streaming (state '{self.state.value}')")

        chunks = aiter(self._upstream)
        try:
            while True:
                event = await self._next_event(chunks)

                if isinstance(event, TextDelta):
                    if event.text:
                        yield event.text.encode("utf-8")
                elif isinstance(event, StreamEnd):
                    self._transition(RelayState.COMPLETED)
                    logger.info("Itinerary stream completed")
                    return
                elif isinstance(event, StreamError):
                    self.failure = event.reason
                    self._transition(RelayState.FAILED)
                    logger.error(f"Streaming error: {event.reason}")
                    raise StreamInterrupted(event.reason)
        finally:
            if self.state == RelayState.STREAMING:
                # Consumer stopped reading, e.g. the client disconnected
                self.failure = "consumer went away"
                self._transition(RelayState.FAILED)
                logger.info("Downstream consumer disconnected, closing upstream stream")
            await self._close_upstream()

    async def _close_upstream(self):
        upstream, self._upstream = self._upstream, None
        if upstream is None:
            return
        close = getattr(upstream, "close", None)
        if close is None:
            return
        try:
            await close()
        except Exception as e:
            logger.warning(f"Error closing upstream stream: {e}")
