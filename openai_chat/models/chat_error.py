"""Error envelope returned by the chat API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .base import WireModel

if TYPE_CHECKING:
    from ..utils.error_handler import RemoteServiceError


class ChatErrorPayload(WireModel):
    """Details of a failed request."""

    message: str
    type: str
    param: Optional[str] = None
    code: Optional[str] = None


class ChatError(WireModel):
    """Represents the ``{"error": {...}}`` body of a failed API call."""

    error: ChatErrorPayload

    def to_exception(self) -> RemoteServiceError:
        """Wrap this envelope in a raisable exception."""
        from ..utils.error_handler import RemoteServiceError

        return RemoteServiceError(self.error)
