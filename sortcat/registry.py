# sortcat/registry.py
from __future__ import annotations
from typing import Dict, List, Optional

from sortcat import logging as slog
from sortcat.sorters.builtin import default_sorters
from sortcat.sorters.interface import ProductSorter


class SorterRegistry:
    """
    Name -> sorter lookup table.
    Last registration for a name wins; there is no removal.
    Not synchronized: callers sharing one across threads must lock around it.
    """

    def __init__(self) -> None:
        self._sorters: Dict[str, ProductSorter] = {}

    @classmethod
    def with_defaults(cls) -> "SorterRegistry":
        registry = cls()
        for sorter in default_sorters():
            registry.register(sorter)
        return registry

    def register(self, sorter: ProductSorter) -> None:
        name = sorter.name
        if name in self._sorters:
            slog.log_debug(f"Replacing sorter '{name}'")
        else:
            slog.log_debug(f"Registering sorter '{name}'")
        self._sorters[name] = sorter

    def get(self, name: str) -> Optional[ProductSorter]:
        return self._sorters.get(name)

    def available(self) -> List[str]:
        # order is not part of the contract
        return list(self._sorters)

    def __contains__(self, name: object) -> bool:
        return name in self._sorters

    def __len__(self) -> int:
        return len(self._sorters)
