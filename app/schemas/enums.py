"""공통 Enum 정의."""

from enum import StrEnum


class PlaceCategory(StrEnum):
    """장바구니 장소 카테고리. AI 응답의 category도 이 값 중 하나여야 한다."""

    ACCOMMODATION = "ACCOMMODATION"
    RESTAURANT = "RESTAURANT"
    TOURIST_SPOT = "TOURIST_SPOT"
    LEISURE = "LEISURE"
    HEALING = "HEALING"
