# sortcat/models.py
from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

DATE_FORMAT = "%Y-%m-%d"
# strptime alone would accept unpadded 2019-1-4
_STRICT_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_created(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string; anything else becomes date.min (sorts as oldest)."""
    text = str(value)
    if not _STRICT_DATE.fullmatch(text):
        return date.min
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return date.min


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    price: float
    created: str
    sales_count: int
    views_count: int

    @property
    def popularity_ratio(self) -> Optional[float]:
        # undefined without views
        if not self.views_count:
            return None
        return self.sales_count / self.views_count

    @property
    def created_date(self) -> date:
        return parse_created(self.created)
