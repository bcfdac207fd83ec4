from fastapi import APIRouter

from pricehunter.core.config import settings
from pricehunter.core.currency import DEFAULT_CURRENCY, REGION_CURRENCY
from pricehunter.core.retailers import known_retailers, retailer_color
from pricehunter.schemas.offers import RegionsResponse, RetailerInfo, RetailersResponse

router = APIRouter(prefix="/v1", tags=["meta"])


@router.get("/regions", response_model=RegionsResponse)
def regions():
    return RegionsResponse(
        default_region=settings.DEFAULT_REGION,
        default_currency=DEFAULT_CURRENCY,
        regions=dict(REGION_CURRENCY),
    )


@router.get("/retailers", response_model=RetailersResponse)
def retailers():
    return RetailersResponse(
        retailers=[RetailerInfo(name=n, color=retailer_color(n)) for n in known_retailers()]
    )
