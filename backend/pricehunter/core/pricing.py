from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

# Literal the scraper emits when it found a product page but no price
PRICE_UNAVAILABLE = "Price not available"

# First run of digits with optional "," grouping and an optional decimal part:
# "$1,299.50" -> "1,299.50", "From 499" -> "499"
_PRICE_TOKEN = re.compile(r"\d[\d,]*(?:\.\d+)?")


@dataclass(frozen=True)
class ParsedPrice:
    value: float


@dataclass(frozen=True)
class Unavailable:
    """No usable price. Compare against the UNAVAILABLE instance."""

    def __repr__(self) -> str:
        return "UNAVAILABLE"


UNAVAILABLE = Unavailable()

PriceValue = Union[ParsedPrice, Unavailable]


def parse_price(price: Optional[str]) -> PriceValue:
    """
    Converts strings like "$599.99", "From $499.99", "₹82,999" to ParsedPrice.
    Returns UNAVAILABLE for empty text, the unavailable marker, or text
    without a usable number.
    """
    if not price:
        return UNAVAILABLE
    s = str(price).strip()
    if not s or s == PRICE_UNAVAILABLE:
        return UNAVAILABLE

    m = _PRICE_TOKEN.search(s)
    if not m:
        return UNAVAILABLE
    try:
        value = float(m.group(0).replace(",", ""))
    except ValueError:
        return UNAVAILABLE
    if not math.isfinite(value):
        return UNAVAILABLE
    return ParsedPrice(value)


def is_available(price: PriceValue) -> bool:
    return isinstance(price, ParsedPrice)


def price_sort_value(price: PriceValue) -> float:
    """UNAVAILABLE sorts as +inf, after every parsed value."""
    if isinstance(price, ParsedPrice):
        return price.value
    return math.inf
