# sortcat/tests/test_catalog.py
import pytest

from sortcat.catalog import ProductCatalog
from sortcat.errors import SorterNotFound
from sortcat.sorters.builtin import (
    BY_ALPHABET_DESC,
    BY_NEWEST,
    BY_POPULARITY,
    BY_PRICE,
    alphabetical_descending,
)
from sortcat.sorters.named import NamedSorter
from utility import names, sample_products


# Construction: three built-ins available, products kept by reference.
def test_catalog_starts_with_builtins():
    products = sample_products()
    catalog = ProductCatalog(products)
    assert catalog.products is products
    assert set(catalog.available_sorters()) == {BY_PRICE, BY_POPULARITY, BY_NEWEST}


# get_sorted: applies the named built-in without touching the stored collection.
@pytest.mark.parametrize("name,expected", [
    (BY_PRICE, ["Coffee Table", "Alabaster Table", "Zebra Table"]),
    (BY_POPULARITY, ["Zebra Table", "Coffee Table", "Alabaster Table"]),
    (BY_NEWEST, ["Alabaster Table", "Coffee Table", "Zebra Table"]),
])
def test_get_sorted_builtins(name, expected):
    products = sample_products()
    original = list(products)
    catalog = ProductCatalog(products)

    assert names(catalog.get_sorted(name)) == expected
    assert products == original


# get_sorted: unknown names raise SorterNotFound carrying the name, and change nothing.
def test_get_sorted_unknown_name():
    catalog = ProductCatalog(sample_products())
    before = set(catalog.available_sorters())

    with pytest.raises(SorterNotFound) as exc:
        catalog.get_sorted(BY_ALPHABET_DESC)

    assert exc.value.name == BY_ALPHABET_DESC
    assert str(exc.value) == f"sorter '{BY_ALPHABET_DESC}' not found"
    assert isinstance(exc.value, LookupError)
    assert set(catalog.available_sorters()) == before


# add_sorting_logic: a custom sorter becomes usable and listed.
def test_add_sorting_logic():
    catalog = ProductCatalog(sample_products())
    catalog.add_sorting_logic(NamedSorter(BY_ALPHABET_DESC, alphabetical_descending))

    assert BY_ALPHABET_DESC in catalog.available_sorters()
    assert BY_ALPHABET_DESC in catalog.registry
    assert names(catalog.get_sorted(BY_ALPHABET_DESC)) == ["Zebra Table", "Coffee Table", "Alabaster Table"]


# add_sorting_logic: re-registering a built-in name overrides it for this catalog only.
def test_add_sorting_logic_overrides_builtin():
    catalog = ProductCatalog(sample_products())
    other = ProductCatalog(sample_products())
    catalog.add_sorting_logic(NamedSorter(BY_PRICE, lambda a, b: a.price > b.price))

    assert names(catalog.get_sorted(BY_PRICE)) == ["Zebra Table", "Alabaster Table", "Coffee Table"]
    assert names(other.get_sorted(BY_PRICE)) == ["Coffee Table", "Alabaster Table", "Zebra Table"]


# An empty catalog sorts to an empty list for every built-in.
def test_empty_catalog():
    catalog = ProductCatalog([])
    for name in catalog.available_sorters():
        assert catalog.get_sorted(name) == []
