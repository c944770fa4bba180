"""Encode records to wire JSON and decode wire JSON into records.

Encoding always uses the JSON keys of the chat API (``top_p``, ``n``,
``max_tokens`` ...) and omits optional fields left as ``None`` so the
server applies its own defaults.  Decoding accepts raw text, bytes or an
already parsed mapping and surfaces any mismatch as
:class:`~openai_chat.utils.error_handler.DecodingError`.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, TypeVar, Union

from loguru import logger
from pydantic import BaseModel

from ..config.app_config import get_app_config
from .contract import check_contract
from .error_handler import raise_decoding_error

M = TypeVar("M", bound=BaseModel)

RawPayload = Union[str, bytes, bytearray, Mapping[str, Any]]


def _should_validate(validate: Optional[bool]) -> bool:
    if validate is not None:
        return validate
    return get_app_config().strict_validation


def encode_dict(record: BaseModel, *, validate: Optional[bool] = None) -> dict[str, Any]:
    """Return ``record`` as a JSON-compatible dictionary keyed by wire names.

    When ``validate`` is true (or unset and ``STRICT_VALIDATION`` is
    enabled) the documented API constraints are checked first and a
    :class:`ContractViolationError` is raised on failure.
    """
    if _should_validate(validate):
        check_contract(record)
    payload = record.model_dump(
        mode="json", by_alias=True, exclude_none=True, serialize_as_any=True
    )
    logger.debug("Encoded {} ({} keys)", type(record).__name__, len(payload))
    return payload


def encode(record: BaseModel, *, validate: Optional[bool] = None) -> str:
    """Serialise ``record`` to JSON text keyed by wire names."""
    if _should_validate(validate):
        check_contract(record)
    payload = record.model_dump_json(by_alias=True, exclude_none=True, serialize_as_any=True)
    logger.debug("Encoded {} ({} bytes)", type(record).__name__, len(payload))
    return payload


@raise_decoding_error
def decode(record_type: type[M], raw: RawPayload) -> M:
    """Parse ``raw`` into an instance of ``record_type``.

    Raises :class:`DecodingError` when a required key is missing, a value
    has the wrong type or an enumerated tag (such as the message role) is
    not recognised.
    """
    if isinstance(raw, (str, bytes, bytearray)):
        record = record_type.model_validate_json(raw)
    else:
        record = record_type.model_validate(raw)
    logger.debug("Decoded {}", record_type.__name__)
    return record
