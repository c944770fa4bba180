"""Shared base class for wire records."""

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """Immutable record mirroring a JSON object of the chat API.

    Attributes use Python names; fields whose JSON key differs declare it
    as an alias.  Both spellings are accepted when constructing or
    decoding a record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
