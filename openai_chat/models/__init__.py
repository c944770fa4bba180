"""Expose the wire records at the package level.

Importing these classes here allows consumers to write concise imports like::

    from openai_chat.models import ChatConversation, ChatMessage, ChatRole

These names refer to the underlying Pydantic models defined in their
respective modules.
"""

from .chat_error import ChatError, ChatErrorPayload  # noqa: F401
from .chat_functions import (  # noqa: F401
    ChatFunctionArgs,
    ChatFunctions,
    FunctionCall,
    JSONSchemaParameters,
    JSONSchemaProperty,
)
from .chat_message import ChatFunctionCall, ChatMessage  # noqa: F401
from .completion import ChatChoice, ChatCompletion, ChatUsage  # noqa: F401
from .conversation import ChatConversation, ChatConversationFunction  # noqa: F401
from .enums import ChatRole  # noqa: F401
