"""
Stream events - What the relay reads off the upstream completion stream.
"""
from pydantic import BaseModel, ConfigDict
from typing import Literal, Union


class TextDelta(BaseModel):
    """A piece of generated text. May be empty."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = ""


class StreamEnd(BaseModel):
    """The upstream stream finished normally."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["end"] = "end"


class StreamError(BaseModel):
    """The upstream stream broke while being read."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    reason: str


StreamEvent = Union[TextDelta, StreamEnd, StreamError]
