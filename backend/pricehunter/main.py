"""
PriceHunter Ranking API - FastAPI Main Entry

Takes the offers the search backend scraped for a query and returns them
ranked for display: local currency first, cheapest first, verification
pages split out, best offer marked.

✅ LOCAL:
    cd backend
    python -m uvicorn pricehunter.main:app --reload --host 0.0.0.0 --port 8000

✅ TEST:
    curl -i http://127.0.0.1:8000/
    curl -i http://127.0.0.1:8000/docs
    curl -i http://127.0.0.1:8000/health
    curl -i http://127.0.0.1:8000/version
    curl -i http://127.0.0.1:8000/v1/regions
    curl -i -X POST http://127.0.0.1:8000/v1/rank \\
        -H "Content-Type: application/json" \\
        -d '{"country": "US", "offers": [{"productName": "iPhone 16 Pro", "price": "$999", "currency": "USD", "link": "https://www.apple.com/shop/buy-iphone"}]}'

✅ CONFIG (env or backend/.env):
    DEFAULT_REGION=US
    INCOMPLETE_OFFER_POLICY=drop      # or block
    RETAILER_FALLBACK=generic         # or host
    LOG_LEVEL=INFO
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pricehunter.core.config import settings
from pricehunter.core.logging_config import get_logger

# ✅ Routers
from pricehunter.api.routes_meta import router as meta_router
from pricehunter.api.routes_rank import router as rank_router

logger = get_logger("pricehunter")


def create_app() -> FastAPI:
    app = FastAPI(
        title="PriceHunter Ranking API",
        version=settings.APP_VERSION,
        description="Ranks scraped shopping offers by region currency and price",
    )

    # ✅ CORS
    # The price comparison UI calls this service from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ Root (GET /)
    @app.get("/")
    def root():
        return {
            "name": "PriceHunter Ranking API",
            "status": "ok",
            "docs": "/docs",
            "health": "/health",
            "version": "/version",
            "rank": "/v1/rank",
            "regions": "/v1/regions",
        }

    # ✅ Health Check (GET /health)
    @app.get("/health")
    def health():
        return {"ok": True}

    # ✅ Version endpoint (GET /version)
    @app.get("/version")
    def version():
        return {"version": settings.APP_VERSION, "build": settings.BUILD_ID}

    # ✅ Mount routers
    app.include_router(rank_router)
    app.include_router(meta_router)

    logger.info(
        "PriceHunter %s (%s) ready: default region %s, incomplete offers -> %s",
        settings.APP_VERSION,
        settings.BUILD_ID,
        settings.DEFAULT_REGION,
        settings.INCOMPLETE_OFFER_POLICY,
    )
    return app


app = create_app()
