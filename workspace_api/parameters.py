from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CreateEntryParameters:
    database_id: str
    properties: Any


@dataclass(frozen=True)
class QueryParameters:
    database_id: str
    filter: Optional[Any] = None
    page_size: Optional[int] = None
    start_cursor: Optional[str] = None

    def __post_init__(self):
        if self.page_size is None:
            return
        if isinstance(self.page_size, bool) or not isinstance(self.page_size, int) or self.page_size <= 0:
            raise ValueError(f'page_size must be a positive integer, got {self.page_size!r}')


@dataclass(frozen=True)
class UpdateEntryParameters:
    entry_id: str
    properties: Any
