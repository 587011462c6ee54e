from typing import Any, List

from pydantic import BaseModel, ConfigDict


class Statement(BaseModel):
    """A rendered query and its bound values, index-aligned with `$1`, `$2`, ..."""
    model_config = ConfigDict(frozen=True)

    query: str
    params: List[Any] = []

    def as_args(self):
        """(query, *params), the calling shape of asyncpg's fetch/execute."""
        return (self.query, *self.params)

    def __str__(self):
        return self.query
