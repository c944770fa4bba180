"""Error handling utilities and custom exceptions."""

from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar

from loguru import logger
from pydantic import ValidationError

if TYPE_CHECKING:
    from ..models.chat_error import ChatErrorPayload

R = TypeVar("R")


class ChatModelError(Exception):
    """Base class for errors raised by this package."""

    pass


class DecodingError(ChatModelError):
    """Raised when a payload does not match the expected record shape.

    ``errors`` holds the structured error list reported by Pydantic.  It
    is empty when the failure was detected outside of model validation.
    """

    def __init__(self, message: str, errors: Iterable[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class ContractViolationError(ChatModelError):
    """Raised when a record breaks a documented API constraint."""

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))


class RemoteServiceError(ChatModelError):
    """A decoded error envelope from the remote service."""

    def __init__(self, payload: ChatErrorPayload) -> None:
        super().__init__(payload.message)
        self.payload = payload

    @property
    def type(self) -> str:
        return self.payload.type

    @property
    def code(self) -> str | None:
        return self.payload.code

    @property
    def param(self) -> str | None:
        return self.payload.param


def raise_decoding_error(func: Callable[..., R]) -> Callable[..., R]:
    """Decorator converting parse failures into :class:`DecodingError`.

    A Pydantic ``ValidationError`` raised by the wrapped function is
    logged and re-raised as :class:`DecodingError` with the original
    exception chained.  Nothing is retried or recovered.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> R:
        try:
            return func(*args, **kwargs)
        except ValidationError as exc:
            logger.error("Payload does not match {}: {}", exc.title, exc)
            raise DecodingError(
                f"Invalid {exc.title} payload: {exc.error_count()} error(s)",
                exc.errors(include_url=False),
            ) from exc

    return wrapper
