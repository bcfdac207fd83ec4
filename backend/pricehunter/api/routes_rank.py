import logging
from typing import List, Optional

from fastapi import APIRouter, Body, HTTPException

from pricehunter.core.config import settings
from pricehunter.core.pricing import ParsedPrice
from pricehunter.core.ranking import RankedOffer, RankedResults, RankingOptions, rank_offers
from pricehunter.schemas.offers import Offer, OfferView, RankRequest, RankResponse

logger = logging.getLogger("pricehunter.api.rank")

router = APIRouter(prefix="/v1", tags=["rank"])


def _to_view(r: RankedOffer, results: RankedResults) -> OfferView:
    return OfferView(
        product_name=r.offer.product_name,
        price=r.offer.price,
        currency=r.currency,
        link=r.offer.link,
        retailer_name=r.retailer_name,
        retailer_color=r.retailer_color,
        price_value=r.price.value if isinstance(r.price, ParsedPrice) else None,
        price_available=isinstance(r.price, ParsedPrice),
        currency_matches=r.currency_matches,
        is_blocked=r.is_blocked,
        is_best_price=results.is_best(r),
    )


def _rank(offers: List[Offer], country: Optional[str], query: Optional[str]) -> RankResponse:
    region = (country or "").strip() or settings.DEFAULT_REGION
    results = rank_offers(offers, region, RankingOptions.from_settings(settings))

    views = [_to_view(r, results) for r in results.valid]
    best = next((v for v in views if v.is_best_price), None)

    return RankResponse(
        query=query,
        region=results.region,
        expected_currency=results.expected_currency,
        best_offer=best,
        offers=views,
        blocked=[_to_view(r, results) for r in results.blocked],
        dropped_count=len(results.dropped),
        local_count=results.local_count,
    )


@router.post("/rank", response_model=RankResponse)
def rank(payload: RankRequest):
    """
    Orders offers for display: local-currency offers first, cheapest first,
    unavailable prices last in their group. Verification pages come back in
    `blocked`; the first priced offer is the best offer.
    """
    try:
        return _rank(payload.offers, payload.country, payload.query)
    except Exception as e:
        logger.exception("Ranking failed")
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/rank/raw", response_model=RankResponse)
def rank_raw(
    offers: List[Offer] = Body(...),
    country: Optional[str] = None,
    query: Optional[str] = None,
):
    """
    Same as /v1/rank but takes the search backend's bare JSON array;
    region and query go in the query string.
    """
    try:
        return _rank(offers, country, query)
    except Exception as e:
        logger.exception("Ranking failed")
        raise HTTPException(status_code=422, detail=str(e))
