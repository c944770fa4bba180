"""Response payloads returned by the chat-completion endpoint."""

from typing import Optional

from pydantic import Field

from .base import WireModel
from .chat_message import ChatMessage


class ChatUsage(WireModel):
    """Token accounting for a single request."""

    prompt_tokens: int
    completion_tokens: int = 0
    total_tokens: int


class ChatChoice(WireModel):
    """One generated alternative.

    ``finish_reason`` is ``"stop"``, ``"length"`` or ``"function_call"``
    for complete responses.
    """

    index: int
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatCompletion(WireModel):
    """Represents a successful chat-completion response body."""

    id: str
    object: str = "chat.completion"
    created: int = Field(..., description="Unix timestamp (seconds) of creation.")
    model: str
    choices: list[ChatChoice] = Field(default_factory=list)
    usage: Optional[ChatUsage] = None

    def first_message(self) -> Optional[ChatMessage]:
        """Return the message of the first choice, if any."""
        if not self.choices:
            return None
        return self.choices[0].message
