from __future__ import annotations

from typing import Dict, List, Optional, Tuple

DEFAULT_CURRENCY = "USD"

# Region code -> currency the shopper expects to pay in
REGION_CURRENCY: Dict[str, str] = {
    "US": "USD",
    "CA": "CAD",
    "UK": "GBP",
    "AU": "AUD",
    "IN": "INR",
}

# Retailer domain -> currency its prices are listed in.
# Longer, more specific domains come first ("amazon.com.au" before "amazon.com").
DOMAIN_CURRENCY: List[Tuple[str, str]] = [
    # Australian retailers
    ("amazon.com.au", "AUD"),
    ("ebay.com.au", "AUD"),
    ("target.com.au", "AUD"),
    ("jbhifi.com.au", "AUD"),
    ("harveynorman.com.au", "AUD"),
    ("bunnings.com.au", "AUD"),
    ("woolworths.com.au", "AUD"),
    ("coles.com.au", "AUD"),
    ("kmart.com.au", "AUD"),
    ("officeworks.com.au", "AUD"),
    ("bigw.com.au", "AUD"),
    # UK retailers
    ("amazon.co.uk", "GBP"),
    ("argos.co.uk", "GBP"),
    ("currys.co.uk", "GBP"),
    ("very.co.uk", "GBP"),
    ("johnlewis.com", "GBP"),
    ("tesco.com", "GBP"),
    ("asda.com", "GBP"),
    ("screwfix.com", "GBP"),
    ("ao.com", "GBP"),
    # Canadian retailers
    ("amazon.ca", "CAD"),
    ("walmart.ca", "CAD"),
    ("bestbuy.ca", "CAD"),
    ("canadiantire.ca", "CAD"),
    ("costco.ca", "CAD"),
    ("homedepot.ca", "CAD"),
    ("loblaws.ca", "CAD"),
    ("thebay.com", "CAD"),
    # Indian retailers
    ("amazon.in", "INR"),
    ("flipkart.com", "INR"),
    ("myntra.com", "INR"),
    ("snapdeal.com", "INR"),
    ("paytmmall.com", "INR"),
    ("tatacliq.com", "INR"),
    ("shopclues.com", "INR"),
    ("croma.com", "INR"),
    ("reliance.com", "INR"),
    # US retailers
    ("amazon.com", "USD"),
    ("walmart.com", "USD"),
    ("target.com", "USD"),
    ("bestbuy.com", "USD"),
    ("ebay.com", "USD"),
    ("newegg.com", "USD"),
    ("costco.com", "USD"),
    ("homedepot.com", "USD"),
    ("lowes.com", "USD"),
    ("macys.com", "USD"),
]


def normalize_region(region: Optional[str]) -> str:
    return (region or "").strip().upper()


def expected_currency(region: Optional[str]) -> str:
    """
    Currency offers should be listed in for a region.
    Unknown or missing regions fall back to USD.
    """
    return REGION_CURRENCY.get(normalize_region(region), DEFAULT_CURRENCY)


def is_supported_region(region: Optional[str]) -> bool:
    return normalize_region(region) in REGION_CURRENCY


def detect_currency(region: Optional[str], link: Optional[str]) -> str:
    """
    Best-effort currency for an offer that arrived without one:
    the retailer's domain wins, then the region, then USD.
    """
    low = (link or "").lower()
    for domain, currency in DOMAIN_CURRENCY:
        if domain in low:
            return currency
    return expected_currency(region)
