import pytest

from pricehunter.core.retailers import (
    GENERIC_RETAILER,
    NEUTRAL_COLOR,
    RetailerFallback,
    classify_retailer,
    extract_host,
    known_retailers,
    retailer_color,
)


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("https://www.amazon.com/dp/B0D", "Amazon"),
        ("https://www.amazon.co.uk/dp/B0D", "Amazon"),
        ("https://WWW.AMAZON.IN/dp/B0D", "Amazon"),
        ("https://www.apple.com/shop/buy-iphone", "Apple"),
        ("https://www.walmart.ca/en/ip/123", "Walmart"),
        ("https://www.bestbuy.com/site/x.p", "Best Buy"),
        ("https://www.target.com/p/-/A-1", "Target"),
        ("https://www.ebay.com/itm/1", "eBay"),
        ("https://www.flipkart.com/x/p/itm", "Flipkart"),
        ("https://www.myntra.com/x", "Myntra"),
        ("https://www.currys.co.uk/products/x", "Currys"),
        ("https://www.argos.co.uk/product/1", "Argos"),
        ("https://www.jbhifi.com.au/products/x", "JB Hi-Fi"),
        ("https://www.bhphotovideo.com/c/product/1", "B&H Photo"),
        ("amazon.com/dp/B0D", "Amazon"),
    ],
)
def test_classify_retailer_table(link: str, expected: str) -> None:
    assert classify_retailer(link) == expected


def test_first_matching_rule_wins() -> None:
    # "target.com" would also match, Amazon comes first in the table
    assert classify_retailer("https://amazon.target.com/x") == "Amazon"


def test_rules_match_on_host_not_path() -> None:
    assert classify_retailer("https://shop.example.org/compare/amazon.com") == GENERIC_RETAILER


@pytest.mark.parametrize("link", ["", None, "   ", "http://[::1", "not a url"])
def test_unparseable_links_get_generic_label(link) -> None:
    assert classify_retailer(link) == GENERIC_RETAILER


@pytest.mark.parametrize("link", ["", None, "http://[::1", "https://www."])
def test_host_fallback_without_usable_host(link) -> None:
    assert classify_retailer(link, RetailerFallback.HOST) == GENERIC_RETAILER


def test_unknown_host_fallbacks() -> None:
    link = "https://www.officedepot.com/a/products/1"
    assert classify_retailer(link) == GENERIC_RETAILER
    assert classify_retailer(link, RetailerFallback.HOST) == "officedepot"
    assert classify_retailer("https://shop.example.co.uk/x", RetailerFallback.HOST) == "shop"


def test_extract_host() -> None:
    assert extract_host("https://www.Amazon.com:443/dp/1") == "www.amazon.com"
    assert extract_host("amazon.co.uk/dp/1") == "amazon.co.uk"
    assert extract_host("") is None


def test_retailer_color_defaults_to_neutral() -> None:
    assert retailer_color("Amazon") == "orange"
    assert retailer_color("Myntra") == "pink"
    assert retailer_color(GENERIC_RETAILER) == NEUTRAL_COLOR
    assert retailer_color("officedepot") == NEUTRAL_COLOR
    assert retailer_color(None) == NEUTRAL_COLOR


def test_known_retailers_in_table_order() -> None:
    names = known_retailers()
    assert names[:3] == ["Amazon", "Apple", "Walmart"]
    assert len(names) == len(set(names))
