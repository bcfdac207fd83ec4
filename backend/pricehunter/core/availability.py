from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence

from pricehunter.schemas.offers import Offer

DEFAULT_VERIFICATION_MARKERS = ("Robot or human?",)
DEFAULT_NAME_PLACEHOLDERS = ("Product name not available",)


class IncompleteOfferPolicy(str, Enum):
    """Where offers with an empty or placeholder product name end up."""

    DROP = "drop"
    BLOCK = "block"


@dataclass(frozen=True)
class Partition:
    """Input offers split by availability, each list in input order."""

    valid: List[Offer] = field(default_factory=list)
    blocked: List[Offer] = field(default_factory=list)
    dropped: List[Offer] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.valid) + len(self.blocked) + len(self.dropped)


def is_verification_page(
    offer: Offer,
    markers: Iterable[str] = DEFAULT_VERIFICATION_MARKERS,
) -> bool:
    name = offer.product_name or ""
    return any(m in name for m in markers if m)


def is_incomplete(
    offer: Offer,
    placeholders: Iterable[str] = DEFAULT_NAME_PLACEHOLDERS,
) -> bool:
    name = (offer.product_name or "").strip()
    if not name:
        return True
    return name in set(placeholders)


def partition_offers(
    offers: Sequence[Offer],
    policy: IncompleteOfferPolicy = IncompleteOfferPolicy.DROP,
    markers: Sequence[str] = DEFAULT_VERIFICATION_MARKERS,
    placeholders: Sequence[str] = DEFAULT_NAME_PLACEHOLDERS,
) -> Partition:
    """
    Split offers into valid / blocked / dropped.

    A verification page is always blocked, even if its name is otherwise
    incomplete. Incomplete offers follow `policy`.
    """
    valid: List[Offer] = []
    blocked: List[Offer] = []
    dropped: List[Offer] = []

    for o in offers:
        if is_verification_page(o, markers):
            blocked.append(o)
        elif is_incomplete(o, placeholders):
            if policy is IncompleteOfferPolicy.BLOCK:
                blocked.append(o)
            else:
                dropped.append(o)
        else:
            valid.append(o)

    return Partition(valid=valid, blocked=blocked, dropped=dropped)
