# sortcat/errors.py
from __future__ import annotations


class SorterNotFound(LookupError):
    """Raised when a catalog is asked for a sort order nobody registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"sorter '{name}' not found")
