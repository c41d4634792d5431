# sortcat/demo.py
import os
import sys
from typing import Callable, Dict, Iterable, Optional

from sortcat import logging as slog
from sortcat.catalog import ProductCatalog
from sortcat.errors import SorterNotFound
from sortcat.ingest import ProductParser
from sortcat.models import Product
from sortcat.sorters.builtin import (
    BY_ALPHABET_DESC,
    BY_NEWEST,
    BY_POPULARITY,
    BY_PRICE,
    alphabetical_descending,
)
from sortcat.sorters.named import NamedSorter

VERBOSITY_ENV = "SORTCAT_VERBOSITY"

SAMPLE_PRODUCTS = """\
products:
  - id: 1
    name: Alabaster Table
    price: 12.99
    created: 2019-01-04
    sales_count: 32
    views_count: 730
  - id: 2
    name: Zebra Table
    price: 44.49
    created: 2012-01-04
    sales_count: 301
    views_count: 3279
  - id: 3
    name: Coffee Table
    price: 10.00
    created: 2014-05-28
    sales_count: 1048
    views_count: 20123
"""


def _fmt_price(p: Product) -> str:
    return f"- {p.name}: ${p.price:.2f}"


def _fmt_popularity(p: Product) -> str:
    ratio = p.popularity_ratio
    shown = "n/a" if ratio is None else f"{ratio:.5f}"
    return f"- {p.name}: {shown} (Sales: {p.sales_count}, Views: {p.views_count})"


def _fmt_created(p: Product) -> str:
    return f"- {p.name}: {p.created}"


def _fmt_name(p: Product) -> str:
    return f"- {p.name}"


# Display belongs to the caller; the catalog only hands back ordered products.
FORMATTERS: Dict[str, Callable[[Product], str]] = {
    BY_PRICE: _fmt_price,
    BY_POPULARITY: _fmt_popularity,
    BY_NEWEST: _fmt_created,
    BY_ALPHABET_DESC: _fmt_name,
}


def _verbosity(env: Optional[Dict[str, str]] = None) -> int:
    raw = (env if env is not None else os.environ).get(VERBOSITY_ENV, "")
    try:
        return max(0, int(raw))
    except ValueError:
        return 0


def _print_rows(name: str, products: Iterable[Product]) -> None:
    fmt = FORMATTERS.get(name, _fmt_name)
    for p in products:
        print(fmt(p))


def run(catalog: ProductCatalog) -> None:
    print("Available sorting methods:")
    for name in catalog.available_sorters():
        print(f"- {name}")
    print()

    for name in (BY_PRICE, BY_POPULARITY, BY_NEWEST):
        try:
            sorted_products = catalog.get_sorted(name)
        except SorterNotFound as e:
            print(f"Error: {e}")
            continue

        print(f"Products sorted by {name}:")
        _print_rows(name, sorted_products)
        print()

    # A new order plugs in without touching the catalog or the registry.
    print("Adding a custom sorter: Alphabetical...")
    catalog.add_sorting_logic(NamedSorter(BY_ALPHABET_DESC, alphabetical_descending))

    sorted_products = catalog.get_sorted(BY_ALPHABET_DESC)
    print(f"Products sorted using {BY_ALPHABET_DESC} method:")
    _print_rows(BY_ALPHABET_DESC, sorted_products)


def main():
    slog.setup_logging(_verbosity())

    try:
        slog.log_step("Loading sample products")
        products = ProductParser().parse_text(SAMPLE_PRODUCTS)
        slog.log_ok(f"Loaded {len(products)} product(s).")

        run(ProductCatalog(products))
    except Exception as e:
        slog.log_err(f"Error: {e}")
        sys.exit(1)

    slog.log_ok("Done.")


if __name__ == "__main__":
    main()
