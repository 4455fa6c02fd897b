from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TagDTO(BaseModel):
    """A tag with the number of published posts carrying it.

    Serialized with camelCase keys (``tagId``, ``tagValue``, ``tagCount``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    tag_id: int
    tag_value: str = Field(min_length=1, max_length=50)
    tag_count: int = Field(default=0, ge=0)
