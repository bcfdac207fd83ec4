"""
Ranking of scraped offers for one search request.

Pipeline:
    raw offers -> partition (valid / blocked / dropped)
               -> derive retailer, price and currency match per offer
               -> sort valid offers (local currency first, then cheapest)
               -> pick the best offer

Nothing here raises on bad input: unreadable prices sort last in their
currency tier, unknown hosts get a generic retailer label.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from pricehunter.core.availability import (
    DEFAULT_NAME_PLACEHOLDERS,
    DEFAULT_VERIFICATION_MARKERS,
    IncompleteOfferPolicy,
    partition_offers,
)
from pricehunter.core.currency import detect_currency, expected_currency, normalize_region
from pricehunter.core.pricing import PriceValue, is_available, parse_price, price_sort_value
from pricehunter.core.retailers import RetailerFallback, classify_retailer, retailer_color
from pricehunter.schemas.offers import Offer

logger = logging.getLogger("pricehunter.ranking")


@dataclass(frozen=True)
class RankingOptions:
    incomplete_policy: IncompleteOfferPolicy = IncompleteOfferPolicy.DROP
    retailer_fallback: RetailerFallback = RetailerFallback.GENERIC
    verification_markers: Tuple[str, ...] = DEFAULT_VERIFICATION_MARKERS
    name_placeholders: Tuple[str, ...] = DEFAULT_NAME_PLACEHOLDERS
    # Fill an empty `currency` from the retailer domain / region before matching
    infer_missing_currency: bool = False

    @classmethod
    def from_settings(cls, settings: Any) -> "RankingOptions":
        return cls(
            incomplete_policy=IncompleteOfferPolicy(settings.INCOMPLETE_OFFER_POLICY),
            retailer_fallback=RetailerFallback(settings.RETAILER_FALLBACK),
            verification_markers=tuple(settings.VERIFICATION_MARKERS),
            name_placeholders=tuple(settings.NAME_PLACEHOLDERS),
            infer_missing_currency=bool(settings.INFER_MISSING_CURRENCY),
        )


@dataclass(frozen=True)
class RankedOffer:
    """An input offer plus the values derived from it. The offer itself is untouched."""

    offer: Offer
    price: PriceValue
    currency: str
    retailer_name: str
    retailer_color: str
    currency_matches: bool
    is_blocked: bool = False


@dataclass(frozen=True)
class RankedResults:
    region: str
    expected_currency: str
    valid: List[RankedOffer] = field(default_factory=list)    # sorted
    blocked: List[RankedOffer] = field(default_factory=list)  # input order
    dropped: List[Offer] = field(default_factory=list)        # input order
    best: Optional[RankedOffer] = None

    @property
    def local_count(self) -> int:
        return sum(1 for r in self.valid if r.currency_matches)

    def is_best(self, ranked: RankedOffer) -> bool:
        return self.best is not None and ranked is self.best


def derive_offer(
    offer: Offer,
    region: Optional[str],
    currency: str,
    options: RankingOptions = RankingOptions(),
    is_blocked: bool = False,
) -> RankedOffer:
    """Derive the display/sort values for one offer against `currency`."""
    offer_currency = offer.currency
    if not offer_currency and options.infer_missing_currency:
        offer_currency = detect_currency(region, offer.link)

    name = classify_retailer(offer.link, options.retailer_fallback)
    return RankedOffer(
        offer=offer,
        price=parse_price(offer.price),
        currency=offer_currency,
        retailer_name=name,
        retailer_color=retailer_color(name),
        currency_matches=offer_currency == currency,
        is_blocked=is_blocked,
    )


def offer_sort_key(ranked: RankedOffer) -> Tuple[bool, float]:
    # False sorts before True: matching currency first
    return (not ranked.currency_matches, price_sort_value(ranked.price))


def compare_offers(a: RankedOffer, b: RankedOffer) -> int:
    """Three-way comparison (-1 / 0 / 1) consistent with offer_sort_key."""
    ka, kb = offer_sort_key(a), offer_sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def sort_offers(ranked: Iterable[RankedOffer]) -> List[RankedOffer]:
    """New list, local currency first, then cheapest. Ties keep input order."""
    return sorted(ranked, key=offer_sort_key)


def select_best_offer(sorted_valid: Sequence[RankedOffer]) -> Optional[RankedOffer]:
    """First offer with a usable price, or None."""
    for r in sorted_valid:
        if is_available(r.price):
            return r
    return None


def rank_offers(
    offers: Sequence[Offer],
    region: Optional[str],
    options: RankingOptions = RankingOptions(),
) -> RankedResults:
    """Partition, sort and pick the best offer for one request."""
    code = normalize_region(region)
    currency = expected_currency(code)

    parts = partition_offers(
        offers,
        policy=options.incomplete_policy,
        markers=options.verification_markers,
        placeholders=options.name_placeholders,
    )

    valid = sort_offers(derive_offer(o, code, currency, options) for o in parts.valid)
    blocked = [derive_offer(o, code, currency, options, is_blocked=True) for o in parts.blocked]
    best = select_best_offer(valid)

    if logger.isEnabledFor(logging.DEBUG):
        for r in valid:
            logger.debug(
                "valid offer %s [%s %s] at %s",
                r.offer.link, r.offer.price, r.currency, r.retailer_name,
            )
        for r in blocked:
            logger.debug("blocked offer %s at %s", r.offer.link, r.retailer_name)

    logger.info(
        "Ranked %d offers for region %s (%s): %d valid, %d blocked, %d dropped, best=%s",
        len(offers),
        code or "-",
        currency,
        len(valid),
        len(blocked),
        len(parts.dropped),
        best.offer.link if best else None,
    )

    return RankedResults(
        region=code,
        expected_currency=currency,
        valid=valid,
        blocked=blocked,
        dropped=list(parts.dropped),
        best=best,
    )
