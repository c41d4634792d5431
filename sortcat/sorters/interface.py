# sortcat/sorters/interface.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, List, Sequence

from sortcat.models import Product

# True when the first product sorts before the second.
Before = Callable[[Product, Product], bool]


class ProductSorter(ABC):
    """
    Stable sorter interface.
    Implementations must not mutate their input and must not raise on odd record
    contents (zero views, bad dates); they degrade the sort key instead.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registration/display key, fixed at construction."""
        ...

    @abstractmethod
    def sort(self, products: Sequence[Product]) -> List[Product]:
        """
        Return a new list with the same products, stably reordered.
        Equal elements keep their relative input order.
        """
        ...
