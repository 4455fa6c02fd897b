from __future__ import annotations

from pydantic import BaseModel


class KeyValuePair(BaseModel):
    """A single key/value entry, serialized as ``{"key": ..., "value": ...}``."""

    key: str
    value: str
