"""Request payloads sent to the chat-completion endpoint."""

from typing import Generic, Optional, Union

from pydantic import Field

from .base import WireModel
from .chat_functions import ChatFunctions, FunctionCall, T
from .chat_message import ChatMessage


class ChatConversation(WireModel):
    """Represents a chat-completion request.

    Only ``messages`` and ``model`` are required; every other field falls
    back to the server-side default when left as ``None`` and is then
    omitted from the encoded payload.  The documented numeric ranges
    (temperature 0 to 2, top_p 0 to 1, penalties -2 to 2, logit bias
    -100 to 100, at most four stop sequences) are not enforced on
    construction.
    """

    user: Optional[str] = Field(
        default=None,
        description="Identifier of the end user initiating the chat.",
    )
    messages: list[ChatMessage] = Field(
        ...,
        description="Messages to complete, ordered from oldest to newest.",
    )
    model: str = Field(..., description="ID of the model used to generate the reply.")
    temperature: Optional[float] = Field(
        default=None,
        description="Sampling temperature between 0 and 2.  Server default is 1.",
    )
    top_probability_mass: Optional[float] = Field(
        default=None,
        alias="top_p",
        description="Nucleus sampling mass between 0 and 1.  Server default is 1.",
    )
    choices: Optional[int] = Field(
        default=None,
        alias="n",
        description="How many completion choices to generate.  Server default is 1.",
    )
    stop: Optional[list[str]] = Field(
        default=None,
        description="Up to 4 sequences where generation stops.",
    )
    max_tokens: Optional[int] = Field(
        default=None,
        description="Maximum number of tokens to generate.",
    )
    presence_penalty: Optional[float] = Field(
        default=None,
        description="Penalty between -2 and 2 for tokens already present.  Server default is 0.",
    )
    frequency_penalty: Optional[float] = Field(
        default=None,
        description="Penalty between -2 and 2 scaled by token frequency.  Server default is 0.",
    )
    logit_bias: Optional[dict[int, float]] = Field(
        default=None,
        description="Token ID to bias value between -100 and 100.",
    )


class ChatConversationFunction(ChatConversation, Generic[T]):
    """A chat-completion request that offers functions to the model.

    ``function_call`` controls how the model responds to the offered
    functions: ``"auto"`` (the default) lets it decide, ``"none"`` forbids
    calls and a :class:`FunctionCall` forces the named function.
    """

    functions: Optional[list[ChatFunctions[T]]] = None
    function_call: Union[str, FunctionCall] = "auto"
