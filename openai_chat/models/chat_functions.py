"""Models describing client-side functions the model may call."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import ConfigDict, Field

from .base import WireModel


class ChatFunctionArgs(WireModel):
    """Base for parameter specifications attached to a function.

    The only requirement is a ``type`` tag.  Keys beyond the declared
    fields are kept so that arbitrary JSON-Schema documents survive a
    decode/encode cycle untouched.
    """

    model_config = ConfigDict(extra="allow")

    type: str


T = TypeVar("T", bound=ChatFunctionArgs)


class JSONSchemaProperty(WireModel):
    """A single property of a JSON-Schema object.

    Keywords beyond the declared fields (``minimum``, ``format``,
    ``default``, nested ``properties`` ...) are kept as extra keys.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    description: Optional[str] = None
    enum: Optional[list[Any]] = None
    items: Optional["JSONSchemaProperty"] = None


class JSONSchemaParameters(ChatFunctionArgs):
    """JSON-Schema object describing the arguments of a function.

    Example::

        JSONSchemaParameters(
            properties={
                "location": JSONSchemaProperty(type="string", description="City name"),
                "unit": JSONSchemaProperty(type="string", enum=["celsius", "fahrenheit"]),
            },
            required=["location"],
        )
    """

    type: str = "object"
    properties: dict[str, JSONSchemaProperty] = Field(default_factory=dict)
    required: Optional[list[str]] = None


class ChatFunctions(WireModel, Generic[T]):
    """A function definition offered to the model.

    ``parameters`` is generic over any :class:`ChatFunctionArgs` subclass
    so callers can plug in their own schema representation.
    """

    name: str
    description: Optional[str] = None
    parameters: Optional[T] = None


class FunctionCall(WireModel):
    """Reference to a function by name."""

    name: str
