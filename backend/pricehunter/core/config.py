from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central settings object.
    Values come from the environment; locally you can use backend/.env.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Versioning
    APP_VERSION: str = "0.1.0"
    BUILD_ID: str = "dev"

    LOG_LEVEL: str = "INFO"

    # Region used when a request does not name one
    DEFAULT_REGION: str = "US"

    # What happens to offers with an empty / placeholder product name:
    #   drop  -> reported only as a count, listed nowhere
    #   block -> listed together with the verification pages
    INCOMPLETE_OFFER_POLICY: Literal["drop", "block"] = "drop"

    # Label for hosts missing from the retailer table:
    #   generic -> "Retailer"
    #   host    -> first label of the host ("www.bhphotovideo.com" -> "bhphotovideo")
    RETAILER_FALLBACK: Literal["generic", "host"] = "generic"

    # Phrases that mark an anti-bot challenge page instead of a product
    VERIFICATION_MARKERS: List[str] = ["Robot or human?"]

    # Product names the scraper emits when it found a price but no title
    NAME_PLACEHOLDERS: List[str] = ["Product name not available"]

    # Offers that arrive without a currency get one from their retailer domain
    INFER_MISSING_CURRENCY: bool = False

    CORS_ALLOW_ORIGINS: List[str] = ["*"]


# other modules import this
settings = Settings()
