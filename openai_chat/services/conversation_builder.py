"""Assemble chat-completion requests from a running message history.

:class:`ConversationBuilder` collects messages in chronological order and
produces immutable :class:`ChatConversation` or
:class:`ChatConversationFunction` records.  Sampling parameters that are
not set on the builder fall back to :class:`LlmConfig` and, when that is
unset too, are omitted so the server default applies.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from loguru import logger

from ..config.llm_config import LlmConfig, get_llm_config
from ..models.chat_functions import ChatFunctionArgs, ChatFunctions, FunctionCall
from ..models.chat_message import ChatFunctionCall, ChatMessage
from ..models.conversation import ChatConversation, ChatConversationFunction
from ..models.enums import ChatRole


class ConversationBuilder:
    """Mutable helper producing immutable request records.

    Parameters
    ----------
    llm_config: LlmConfig, optional
        Source of the default model, temperature, token limit and user.
        Loaded from the environment via :func:`get_llm_config` when omitted.
    **parameters:
        Request fields (``temperature``, ``top_probability_mass``,
        ``max_tokens`` ...) that override the configured defaults.
    """

    def __init__(self, llm_config: LlmConfig | None = None, **parameters: Any) -> None:
        self.llm_config = llm_config or get_llm_config()
        self._messages: list[ChatMessage] = []
        self._functions: list[tuple[str, Optional[str], Optional[ChatFunctionArgs]]] = []
        self._parameters: dict[str, Any] = dict(parameters)

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def add(self, message: ChatMessage) -> "ConversationBuilder":
        self._messages.append(message)
        return self

    def system(self, content: str) -> "ConversationBuilder":
        return self.add(ChatMessage(role=ChatRole.SYSTEM, content=content))

    def user(self, content: str, name: Optional[str] = None) -> "ConversationBuilder":
        return self.add(ChatMessage(role=ChatRole.USER, content=content, name=name))

    def assistant(
        self,
        content: Optional[str] = None,
        function_call: Optional[ChatFunctionCall] = None,
    ) -> "ConversationBuilder":
        """Record an assistant reply, optionally one that requested a function call."""
        return self.add(
            ChatMessage(role=ChatRole.ASSISTANT, content=content, function_call=function_call)
        )

    def function_result(self, name: str, content: str) -> "ConversationBuilder":
        """Record the output of a client-side function for the model to read."""
        return self.add(ChatMessage(role=ChatRole.FUNCTION, name=name, content=content))

    def with_function(
        self,
        name: str,
        description: Optional[str] = None,
        parameters: Optional[ChatFunctionArgs] = None,
    ) -> "ConversationBuilder":
        self._functions.append((name, description, parameters))
        return self

    def set(self, **parameters: Any) -> "ConversationBuilder":
        """Override request fields such as ``temperature`` or ``stop``."""
        self._parameters.update(parameters)
        return self

    def _request_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "model": self.llm_config.model,
            "temperature": self.llm_config.temperature,
            "max_tokens": self.llm_config.max_tokens,
            "user": self.llm_config.user,
        }
        fields.update(self._parameters)
        fields["messages"] = list(self._messages)
        return fields

    def build(self) -> ChatConversation:
        """Return a :class:`ChatConversation` snapshot of the current state."""
        conversation = ChatConversation(**self._request_fields())
        logger.debug(
            "Built conversation for model {} with {} message(s)",
            conversation.model,
            len(conversation.messages),
        )
        return conversation

    def build_with_functions(
        self, function_call: Union[str, FunctionCall] = "auto"
    ) -> ChatConversationFunction:
        """Return a :class:`ChatConversationFunction` offering the registered functions.

        The record is parametrised with the parameter type shared by every
        registered function, or :class:`ChatFunctionArgs` when they differ.
        """
        parameter_types = {type(params) for _, _, params in self._functions if params is not None}
        params_type = parameter_types.pop() if len(parameter_types) == 1 else ChatFunctionArgs

        functions = [
            ChatFunctions[params_type](name=name, description=description, parameters=params)
            for name, description, params in self._functions
        ]
        conversation = ChatConversationFunction[params_type](
            **self._request_fields(),
            functions=functions or None,
            function_call=function_call,
        )
        logger.debug(
            "Built function conversation for model {} offering {} function(s)",
            conversation.model,
            len(functions),
        )
        return conversation
