# sortcat/catalog.py
from __future__ import annotations
from typing import List, Sequence

from sortcat import logging as slog
from sortcat.errors import SorterNotFound
from sortcat.models import Product
from sortcat.registry import SorterRegistry
from sortcat.sorters.interface import ProductSorter


class ProductCatalog:
    """
    A fixed product collection plus the sort orders that can be applied to it.

    The collection is held by reference and never modified; sorted views are new lists.
    Only the catalog's own registry grows, through add_sorting_logic().
    """

    def __init__(self, products: Sequence[Product]):
        self._products = products
        self._registry = SorterRegistry.with_defaults()

    @property
    def products(self) -> Sequence[Product]:
        return self._products

    @property
    def registry(self) -> SorterRegistry:
        return self._registry

    def available_sorters(self) -> List[str]:
        return self._registry.available()

    def get_sorted(self, name: str) -> List[Product]:
        sorter = self._registry.get(name)
        if sorter is None:
            slog.log_warn(f"Sorter '{name}' is not registered")
            raise SorterNotFound(name)
        slog.log_debug(f"Sorting {len(self._products)} product(s) by '{name}'")
        return sorter.sort(self._products)

    def add_sorting_logic(self, sorter: ProductSorter) -> None:
        self._registry.register(sorter)
