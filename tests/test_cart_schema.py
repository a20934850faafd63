"""장바구니 응답 -> 후보 장소 변환 테스트."""

from __future__ import annotations

import pytest

from app.schemas.cart import CartDetailResponse, to_candidate_items
from app.schemas.enums import PlaceCategory


def _cart_payload() -> dict:
    return {
        "cartId": "3f2a9c4e-0d1b-4f6a-8e7c-5b4a3d2c1e0f",
        "region": "서울",
        "tours": [
            {
                "tourId": "9b8a7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d",
                "contentId": "126508",
                "contentTypeId": "12",
                "title": "경복궁",
                "latitude": "37.5796170",
                "longitude": "126.9770410",
                "address": "서울특별시 종로구 사직로 161",
                "category": "tourist_spot",
                "price": 3000,
            },
            {
                "tourId": "1a2b3c4d-5e6f-4a7b-8c9d-0e1f2a3b4c5d",
                "contentId": "126508",
                "title": "경복궁 (중복)",
                "latitude": "37.5796170",
                "longitude": "126.9770410",
                "category": "TOURIST_SPOT",
            },
            {
                "contentId": "2789012",
                "title": "서울 호텔",
                "latitude": "37.5650000",
                "longitude": "126.9810000",
                "category": "ACCOMMODATION",
            },
        ],
    }


def test_to_candidate_items_converts_and_deduplicates() -> None:
    cart = CartDetailResponse.model_validate(_cart_payload())

    items = to_candidate_items(cart.tours)

    assert [item.content_id for item in items] == ["126508", "2789012"]
    assert items[0].title == "경복궁"
    assert items[0].latitude == pytest.approx(37.579617)
    assert items[0].category == PlaceCategory.TOURIST_SPOT
    assert items[1].category == PlaceCategory.ACCOMMODATION


def test_to_candidate_item_rejects_unknown_category() -> None:
    payload = _cart_payload()
    payload["tours"] = [dict(payload["tours"][0], category="SHOPPING")]
    cart = CartDetailResponse.model_validate(payload)

    with pytest.raises(ValueError, match="SHOPPING"):
        to_candidate_items(cart.tours)


def test_candidate_item_serializes_with_camel_case_keys() -> None:
    cart = CartDetailResponse.model_validate(_cart_payload())

    dumped = to_candidate_items(cart.tours)[0].model_dump(mode="json", by_alias=True)

    assert dumped == {
        "contentId": "126508",
        "title": "경복궁",
        "latitude": 37.579617,
        "longitude": 126.977041,
        "category": "TOURIST_SPOT",
    }
