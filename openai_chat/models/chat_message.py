"""Models representing chat messages and function calls."""

from __future__ import annotations

import json
from typing import Any, Optional

from loguru import logger

from .base import WireModel
from .enums import ChatRole


class ChatFunctionCall(WireModel):
    """The name and arguments of a function the model asks to call.

    ``arguments`` is the raw JSON text produced by the model.  It is kept
    verbatim so that a record decoded from the wire encodes back to the
    same payload; use :meth:`parsed_arguments` to obtain a mapping.
    """

    name: str
    arguments: Optional[str] = None

    def parsed_arguments(self) -> dict[str, Any]:
        """Decode ``arguments`` into a dictionary.

        Returns an empty dictionary when no arguments were supplied.
        Raises :class:`~openai_chat.utils.error_handler.DecodingError`
        when the text is not a JSON object.
        """
        from ..utils.error_handler import DecodingError

        if not self.arguments:
            return {}
        try:
            parsed = json.loads(self.arguments)
        except json.JSONDecodeError as exc:
            logger.error("Arguments for function {} are not valid JSON: {}", self.name, exc)
            raise DecodingError(
                f"Arguments for function '{self.name}' are not valid JSON"
            ) from exc
        if not isinstance(parsed, dict):
            logger.error("Arguments for function {} are not a JSON object", self.name)
            raise DecodingError(
                f"Arguments for function '{self.name}' must decode to a JSON object"
            )
        return parsed


class ChatMessage(WireModel):
    """Represents a single message in a chat conversation.

    ``content`` is documented as required for every message except an
    assistant message that carries a ``function_call``.  ``name`` is
    required when the role is ``function`` and limited to 64 characters.
    Neither rule is enforced here; see :mod:`openai_chat.utils.contract`
    for explicit checks.
    """

    role: ChatRole
    content: Optional[str] = None
    name: Optional[str] = None
    function_call: Optional[ChatFunctionCall] = None
