from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional


class Offer(BaseModel):
    """One scraped offer as the search backend returns it (camelCase keys)."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    product_name: str = ""   # may be a placeholder or a challenge page title
    price: str = ""          # e.g. "$599.99" or "Price not available"
    currency: str = ""       # e.g. "USD"
    link: str = ""

    @field_validator("product_name", "price", "currency", "link", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


class OfferView(Offer):
    retailer_name: str
    retailer_color: str
    price_value: Optional[float] = None  # None when the price is unavailable
    price_available: bool = False
    currency_matches: bool = False
    is_blocked: bool = False
    is_best_price: bool = False


class RankRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    query: Optional[str] = None
    country: Optional[str] = None  # region code, e.g. "US"
    offers: List[Offer] = Field(default_factory=list)


class RankResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    query: Optional[str] = None
    region: str
    expected_currency: str
    best_offer: Optional[OfferView] = None
    offers: List[OfferView]
    blocked: List[OfferView]
    dropped_count: int = 0
    local_count: int = 0


class RegionsResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    default_region: str
    default_currency: str
    regions: Dict[str, str]


class RetailerInfo(BaseModel):
    name: str
    color: str


class RetailersResponse(BaseModel):
    retailers: List[RetailerInfo]
