from __future__ import annotations

from blogstream.schemas.keyvalue import KeyValuePair  # noqa: F401
from blogstream.schemas.tags import TagDTO  # noqa: F401
