"""장바구니(투어) 응답 스키마와 후보 장소 변환."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.enums import PlaceCategory
from app.schemas.schedule import CandidateItem


class TourInfo(BaseModel):
    """장바구니에 담긴 관광 콘텐츠 한 건."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tour_id: UUID | None = Field(default=None, alias="tourId", description="투어 ID")
    content_id: str = Field(..., alias="contentId", description="관광 콘텐츠 ID")
    content_type_id: str | None = Field(default=None, alias="contentTypeId", description="콘텐츠 타입 ID")
    title: str = Field(..., description="장소 이름")
    latitude: Decimal = Field(..., description="위도")
    longitude: Decimal = Field(..., description="경도")
    address: str | None = Field(default=None, description="주소")
    first_image: str | None = Field(default=None, alias="firstImage", description="대표 이미지 URL")
    category: str = Field(..., description="장소 카테고리")
    price: int | None = Field(default=None, description="가격")

    def to_candidate_item(self) -> CandidateItem:
        """AI 일정 배분 입력으로 변환한다.

        Raises:
            ValueError: category가 지원하지 않는 값인 경우.
        """
        category = self.category.strip().upper()
        if category not in PlaceCategory.__members__:
            raise ValueError(f"지원하지 않는 카테고리입니다: {self.category}")
        return CandidateItem(
            content_id=self.content_id,
            title=self.title,
            latitude=float(self.latitude),
            longitude=float(self.longitude),
            category=PlaceCategory(category),
        )


class CartDetailResponse(BaseModel):
    """장바구니 상세 응답."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    cart_id: UUID | None = Field(default=None, alias="cartId", description="장바구니 ID")
    region: str = Field(default="", description="여행 지역")
    tours: List[TourInfo] = Field(default_factory=list, description="담긴 투어 목록")


def to_candidate_items(tours: Iterable[TourInfo]) -> list[CandidateItem]:
    """투어 목록을 후보 장소 목록으로 변환한다. 중복 `contentId`는 처음 것만 남긴다."""
    seen: set[str] = set()
    items: list[CandidateItem] = []
    for tour in tours:
        if tour.content_id in seen:
            continue
        seen.add(tour.content_id)
        items.append(tour.to_candidate_item())
    return items
