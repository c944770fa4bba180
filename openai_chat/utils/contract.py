"""Checks for constraints the chat API documents but records do not enforce.

Records accept any value that matches their shape so that payloads
received from the service always decode.  The helpers here report the
documented limits on names, content and sampling parameters when a
caller wants them checked before sending a request.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from pydantic import BaseModel

from ..models.chat_message import ChatMessage
from ..models.conversation import ChatConversation
from ..models.enums import ChatRole
from .error_handler import ContractViolationError

MAX_NAME_LENGTH = 64
MAX_STOP_SEQUENCES = 4
MAX_LOGIT_BIAS = 100.0

# Field name -> inclusive (low, high) bounds.
PARAMETER_RANGES: dict[str, tuple[float, float]] = {
    "temperature": (0.0, 2.0),
    "top_probability_mass": (0.0, 1.0),
    "presence_penalty": (-2.0, 2.0),
    "frequency_penalty": (-2.0, 2.0),
}


def _message_violations(message: ChatMessage, label: str) -> list[str]:
    problems: list[str] = []
    if message.name is not None and len(message.name) > MAX_NAME_LENGTH:
        problems.append(f"{label}: name exceeds {MAX_NAME_LENGTH} characters")
    if message.role == ChatRole.FUNCTION and not message.name:
        problems.append(f"{label}: name is required for function messages")
    if message.content is None:
        carries_call = message.role == ChatRole.ASSISTANT and message.function_call is not None
        if not carries_call:
            problems.append(
                f"{label}: content is required unless an assistant message carries a function_call"
            )
    return problems


def _in_range(value: Optional[float], bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return value is None or low <= value <= high


def find_violations(record: BaseModel) -> list[str]:
    """Return every documented constraint ``record`` breaks.

    Messages are checked for the name and content rules; conversations
    additionally for parameter ranges, the stop-sequence limit and logit
    bias values.  Other records have no documented constraints and yield
    an empty list.
    """
    if isinstance(record, ChatMessage):
        return _message_violations(record, "message")
    if not isinstance(record, ChatConversation):
        return []

    problems: list[str] = []
    for index, message in enumerate(record.messages):
        problems.extend(_message_violations(message, f"messages[{index}]"))

    for field_name, bounds in PARAMETER_RANGES.items():
        value = getattr(record, field_name)
        if not _in_range(value, bounds):
            problems.append(f"{field_name} must be between {bounds[0]} and {bounds[1]}, got {value}")

    if record.stop is not None and len(record.stop) > MAX_STOP_SEQUENCES:
        problems.append(f"stop accepts at most {MAX_STOP_SEQUENCES} sequences, got {len(record.stop)}")

    for token, bias in (record.logit_bias or {}).items():
        if not -MAX_LOGIT_BIAS <= bias <= MAX_LOGIT_BIAS:
            problems.append(f"logit_bias for token {token} must be between -100 and 100, got {bias}")

    return problems


def check_contract(record: BaseModel) -> None:
    """Raise :class:`ContractViolationError` if ``record`` breaks a documented constraint."""
    problems = find_violations(record)
    if problems:
        logger.warning("{} violates {} API constraint(s)", type(record).__name__, len(problems))
        raise ContractViolationError(problems)
