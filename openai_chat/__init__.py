"""Typed request and response records for an OpenAI-style chat-completion API.

The records mirror the service's JSON schema and serialise through
:mod:`openai_chat.utils.codec`::

    from openai_chat import ChatConversation, ChatMessage, ChatRole, encode

    payload = encode(
        ChatConversation(
            model="gpt-3.5-turbo",
            messages=[ChatMessage(role=ChatRole.USER, content="Hello")],
            top_probability_mass=0.9,
        )
    )
"""

from .models import (  # noqa: F401
    ChatChoice,
    ChatCompletion,
    ChatConversation,
    ChatConversationFunction,
    ChatError,
    ChatErrorPayload,
    ChatFunctionArgs,
    ChatFunctionCall,
    ChatFunctions,
    ChatMessage,
    ChatRole,
    ChatUsage,
    FunctionCall,
    JSONSchemaParameters,
    JSONSchemaProperty,
)
from .services.conversation_builder import ConversationBuilder  # noqa: F401
from .utils.codec import decode, encode, encode_dict  # noqa: F401
from .utils.contract import check_contract, find_violations  # noqa: F401
from .utils.error_handler import (  # noqa: F401
    ChatModelError,
    ContractViolationError,
    DecodingError,
    RemoteServiceError,
)

__version__ = "0.1.0"
