# sortcat/sorters/builtin.py
from __future__ import annotations
from typing import Callable, List, Tuple

from sortcat.models import Product
from .interface import ProductSorter
from .named import NamedSorter

# Well-known sort names. The registry accepts any other string as well.
BY_PRICE = "Price (Low to High)"
BY_POPULARITY = "Popularity (Sales per View)"
BY_NEWEST = "Newest First"
BY_ALPHABET_DESC = "Alphabetical (Z to A)"


def _popularity_key(p: Product) -> float:
    # zero views ranks below every real ratio
    ratio = p.popularity_ratio
    return float("-inf") if ratio is None else ratio


def price_ascending(a: Product, b: Product) -> bool:
    return a.price < b.price


def popularity_descending(a: Product, b: Product) -> bool:
    return _popularity_key(a) > _popularity_key(b)


def newest_first(a: Product, b: Product) -> bool:
    return a.created_date > b.created_date


def alphabetical_descending(a: Product, b: Product) -> bool:
    return b.name < a.name


def price_sorter() -> ProductSorter:
    return NamedSorter(BY_PRICE, price_ascending)


def popularity_sorter() -> ProductSorter:
    return NamedSorter(BY_POPULARITY, popularity_descending)


def newest_sorter() -> ProductSorter:
    return NamedSorter(BY_NEWEST, newest_first)


BUILTIN_SORTERS: Tuple[Callable[[], ProductSorter], ...] = (
    price_sorter,
    popularity_sorter,
    newest_sorter,
)


def default_sorters() -> List[ProductSorter]:
    """Fresh instances of the three built-in sorters."""
    return [factory() for factory in BUILTIN_SORTERS]
