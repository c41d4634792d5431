# sortcat/ingest.py
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Iterable, List, Tuple
import yaml

from sortcat import logging as slog
from sortcat.models import Product

REQUIRED_FIELDS: Tuple[str, ...] = ("id", "name", "price", "created", "sales_count", "views_count")


def _created_text(value: Any) -> str:
    # YAML decodes a bare 2019-01-04 into a date; keep the stored form as text
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class ProductParser:
    """
    Build Products from YAML text or already-decoded records.
    Required behavior:
      - Every field in REQUIRED_FIELDS must be present on each entry.
      - Extra keys are ignored.
      - No range checks: zero views and odd dates are left for the sorters to handle.
    """

    def parse_text(self, text: str) -> List[Product]:
        raw = yaml.safe_load(text)
        if isinstance(raw, dict):
            raw = raw.get("products")
        if not isinstance(raw, list):
            raise TypeError(f"Product document must be a list, got {type(raw).__name__}")
        return self.parse_records(raw)

    def parse_records(self, records: Iterable[Dict[str, Any]]) -> List[Product]:
        products: List[Product] = []
        for idx, entry in enumerate(records):
            if not isinstance(entry, dict):
                raise TypeError(f"Entry #{idx} is not an object")

            for fname in REQUIRED_FIELDS:
                if fname not in entry:
                    raise KeyError(f"Entry #{idx} missing required field '{fname}'")

            try:
                product = Product(
                    id=int(entry["id"]),
                    name=str(entry["name"]),
                    price=float(entry["price"]),
                    created=_created_text(entry["created"]),
                    sales_count=int(entry["sales_count"]),
                    views_count=int(entry["views_count"]),
                )
            except (TypeError, ValueError) as e:
                raise type(e)(f"Entry #{idx} has a bad value: {e}") from e

            products.append(product)

        slog.log_debug(f"Parsed {len(products)} product(s)")
        return products
