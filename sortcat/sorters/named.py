# sortcat/sorters/named.py
from __future__ import annotations
from functools import cmp_to_key
from typing import List, Sequence

from sortcat.models import Product
from .interface import Before, ProductSorter


class NamedSorter(ProductSorter):
    """
    The one concrete sorter: a name plus a "sorts before" function.

    Built-ins and runtime-registered custom orders are all instances of this class;
    extending the catalog means supplying a new name and function, not a subclass.
    """

    def __init__(self, name: str, before: Before):
        self._name = name
        self._before = before

    @property
    def name(self) -> str:
        return self._name

    def _cmp(self, a: Product, b: Product) -> int:
        if self._before(a, b):
            return -1
        if self._before(b, a):
            return 1
        return 0

    def sort(self, products: Sequence[Product]) -> List[Product]:
        # sorted() is stable and always returns a fresh list
        return sorted(products, key=cmp_to_key(self._cmp))

    def __repr__(self) -> str:
        return f"NamedSorter({self._name!r})"
