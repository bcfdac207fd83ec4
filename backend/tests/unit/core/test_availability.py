import pytest

from pricehunter.core.availability import (
    IncompleteOfferPolicy,
    is_incomplete,
    is_verification_page,
    partition_offers,
)
from pricehunter.schemas.offers import Offer


def _offer(name: str, link: str) -> Offer:
    return Offer(productName=name, price="$10", currency="USD", link=link)


@pytest.fixture()
def mixed_offers():
    return [
        _offer("iPhone 16 Pro 128GB", "https://www.amazon.com/a"),
        _offer("Robot or human?", "https://www.walmart.com/b"),
        _offer("", "https://www.target.com/c"),
        _offer("Apple iPhone 16 Pro", "https://www.apple.com/d"),
        _offer("Product name not available", "https://www.bestbuy.com/e"),
        _offer("Walmart.com | Robot or human?", "https://www.walmart.com/f"),
    ]


def test_partition_drop_policy(mixed_offers) -> None:
    parts = partition_offers(mixed_offers)
    assert [o.link[-1] for o in parts.valid] == ["a", "d"]
    assert [o.link[-1] for o in parts.blocked] == ["b", "f"]
    assert [o.link[-1] for o in parts.dropped] == ["c", "e"]


def test_partition_block_policy_keeps_input_order(mixed_offers) -> None:
    parts = partition_offers(mixed_offers, policy=IncompleteOfferPolicy.BLOCK)
    assert [o.link[-1] for o in parts.valid] == ["a", "d"]
    assert [o.link[-1] for o in parts.blocked] == ["b", "c", "e", "f"]
    assert parts.dropped == []


@pytest.mark.parametrize("policy", list(IncompleteOfferPolicy))
def test_partition_is_total_and_disjoint(mixed_offers, policy) -> None:
    parts = partition_offers(mixed_offers, policy=policy)
    assert len(parts) == len(mixed_offers)

    links = [o.link for o in parts.valid + parts.blocked + parts.dropped]
    assert sorted(links) == sorted(o.link for o in mixed_offers)
    assert len(set(links)) == len(links)


def test_all_blocked() -> None:
    offers = [_offer("Robot or human?", f"https://www.walmart.com/{i}") for i in range(3)]
    parts = partition_offers(offers)
    assert parts.valid == []
    assert parts.blocked == offers


def test_custom_markers_and_placeholders() -> None:
    offers = [
        _offer("Access Denied", "https://www.bestbuy.com/a"),
        _offer("Untitled", "https://www.ebay.com/b"),
        _offer("Robot or human?", "https://www.walmart.com/c"),
    ]
    parts = partition_offers(offers, markers=("Access Denied",), placeholders=("Untitled",))
    assert [o.link[-1] for o in parts.blocked] == ["a"]
    assert [o.link[-1] for o in parts.dropped] == ["b"]
    assert [o.link[-1] for o in parts.valid] == ["c"]


def test_predicates() -> None:
    assert is_verification_page(_offer("Robot or human?", "x"))
    assert not is_verification_page(_offer("robot or human", "x"))
    assert is_incomplete(_offer("   ", "x"))
    assert is_incomplete(_offer("Product name not available", "x"))
    assert not is_incomplete(_offer("Pixel 9", "x"))


def test_partition_does_not_touch_input(mixed_offers) -> None:
    before = [o.model_dump() for o in mixed_offers]
    partition_offers(mixed_offers)
    assert [o.model_dump() for o in mixed_offers] == before
