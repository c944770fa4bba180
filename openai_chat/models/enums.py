"""Enumerations used across models."""

from enum import Enum


class ChatRole(str, Enum):
    """Enum for message roles in a chat conversation.

    The role field distinguishes between the sender of each message.
    ``SYSTEM`` carries instructions from the application managing the
    chat, ``USER`` denotes the human who initiates the chat,
    ``ASSISTANT`` is a reply generated by the model and ``FUNCTION``
    holds the result of a client-side function invocation.  Each member
    serialises to its lowercase name.
    """

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
