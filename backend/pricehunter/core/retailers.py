from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple
from urllib.parse import urlsplit

GENERIC_RETAILER = "Retailer"
NEUTRAL_COLOR = "gray"


class RetailerFallback(str, Enum):
    """How to label a host that is not in RETAILER_RULES."""

    GENERIC = "generic"
    HOST = "host"


HostPredicate = Callable[[str], bool]


def _host_contains(fragment: str) -> HostPredicate:
    return lambda host: fragment in host


# Ordered (predicate, canonical name) pairs, evaluated on the lower-cased host.
# First match wins.
RETAILER_RULES: List[Tuple[HostPredicate, str]] = [
    (_host_contains("amazon."), "Amazon"),
    (_host_contains("apple.com"), "Apple"),
    (_host_contains("walmart."), "Walmart"),
    (_host_contains("bestbuy."), "Best Buy"),
    (_host_contains("target.com"), "Target"),
    (_host_contains("ebay."), "eBay"),
    (_host_contains("flipkart.com"), "Flipkart"),
    (_host_contains("myntra.com"), "Myntra"),
    (_host_contains("currys.co.uk"), "Currys"),
    (_host_contains("argos.co.uk"), "Argos"),
    (_host_contains("jbhifi.com.au"), "JB Hi-Fi"),
    (_host_contains("snapdeal.com"), "Snapdeal"),
    (_host_contains("paytmmall.com"), "Paytm Mall"),
    (_host_contains("very.co.uk"), "Very"),
    (_host_contains("johnlewis.com"), "John Lewis"),
    (_host_contains("canadiantire.ca"), "Canadian Tire"),
    (_host_contains("officeworks.com.au"), "Officeworks"),
    (_host_contains("bigw.com.au"), "Big W"),
    (_host_contains("bhphotovideo.com"), "B&H Photo"),
]

# Canonical name -> badge color tag
RETAILER_COLORS: Dict[str, str] = {
    "Amazon": "orange",
    "Apple": "gray",
    "Walmart": "blue",
    "Best Buy": "yellow",
    "Target": "red",
    "eBay": "purple",
    "Flipkart": "blue",
    "Myntra": "pink",
    "Currys": "green",
    "Argos": "indigo",
    "JB Hi-Fi": "red",
    "Snapdeal": "red",
    "Paytm Mall": "blue",
    "Very": "pink",
    "John Lewis": "green",
    "Canadian Tire": "red",
    "Officeworks": "blue",
    "Big W": "blue",
    "B&H Photo": "gray",
}


def extract_host(link: Optional[str]) -> Optional[str]:
    """
    Lower-cased host of a link, or None when there is none.
      - "https://www.amazon.com/dp/X" => "www.amazon.com"
      - "amazon.co.uk/dp/X"           => "amazon.co.uk"
    """
    if not link:
        return None

    s = link.strip()
    if not s:
        return None

    try:
        parts = urlsplit(s)
        if not parts.netloc and "://" not in s:
            parts = urlsplit("//" + s)
        host = parts.hostname
    except ValueError:
        return None

    return host or None


def _host_label(host: str) -> str:
    """
    First label of the host:
      - "www.bhphotovideo.com" => "bhphotovideo"
      - "shop.example.co.uk"   => "shop"
    """
    h = re.sub(r"^www\.", "", host)
    label = h.split(".", 1)[0]
    return label or GENERIC_RETAILER


def classify_retailer(
    link: Optional[str],
    fallback: RetailerFallback = RetailerFallback.GENERIC,
) -> str:
    """Canonical retailer name for an offer link. Never raises."""
    host = extract_host(link)
    if not host:
        return GENERIC_RETAILER

    for matches, name in RETAILER_RULES:
        if matches(host):
            return name

    if fallback is RetailerFallback.HOST:
        return _host_label(host)
    return GENERIC_RETAILER


def retailer_color(name: Optional[str]) -> str:
    if not name:
        return NEUTRAL_COLOR
    return RETAILER_COLORS.get(name, NEUTRAL_COLOR)


def known_retailers() -> List[str]:
    """Canonical names in table order, without duplicates."""
    seen: List[str] = []
    for _, name in RETAILER_RULES:
        if name not in seen:
            seen.append(name)
    return seen
