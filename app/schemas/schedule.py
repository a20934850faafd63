"""AI 일정 배분 요청/응답 스키마."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.enums import PlaceCategory


class CandidateItem(BaseModel):
    """일정에 배정될 후보 장소.

    `contentId` 기준으로 한 요청 안에서 유일하다. 프롬프트에는 alias 키로 직렬화된다.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content_id: str = Field(..., alias="contentId", min_length=1, description="관광 콘텐츠 ID")
    title: str = Field(..., description="장소 이름")
    latitude: float = Field(..., description="위도")
    longitude: float = Field(..., description="경도")
    category: PlaceCategory = Field(..., description="장소 카테고리")


class PlanningRequest(BaseModel):
    """일정 배분 요청 모델.

    Fields:
        `schedule_id`: 스케줄 식별자
        `start_date`: 여행 시작일
        `end_date`: 여행 종료일 (시작일보다 빠르면 1일 일정으로 처리)
        `start_time`: 첫날 출발 시각
        `items`: 배분할 후보 장소 목록 (순서 유지)
    """

    model_config = ConfigDict(frozen=True)

    schedule_id: UUID = Field(..., description="스케줄 ID")
    start_date: date = Field(..., description="여행 시작일 (YYYY-MM-DD)")
    end_date: date = Field(..., description="여행 종료일 (YYYY-MM-DD)")
    start_time: time = Field(..., description="여행 시작 시각 (HH:MM)")
    items: tuple[CandidateItem, ...] = Field(default=(), description="후보 장소 목록")


@dataclass(frozen=True, slots=True)
class DayTarget:
    """일차별 배정 목표 개수."""

    day_number: int
    target_count: int


class PlannedItem(BaseModel):
    """AI가 특정 일차에 배정한 장소."""

    model_config = ConfigDict(populate_by_name=True)

    content_id: str = Field(..., alias="contentId", description="관광 콘텐츠 ID")
    title: str = Field(..., description="장소 이름")
    latitude: float = Field(..., description="위도")
    longitude: float = Field(..., description="경도")
    category: PlaceCategory = Field(..., description="장소 카테고리")


class DailyPlan(BaseModel):
    """일차별 배정 결과."""

    model_config = ConfigDict(populate_by_name=True)

    day_number: int = Field(..., alias="dayNumber", ge=1, description="1부터 시작하는 일차 번호")
    items: List[PlannedItem] = Field(default_factory=list, description="방문 순서대로 정렬된 장소 목록")


class DailyPlanResponse(BaseModel):
    """AI가 생성하는 '중간 계획 JSON'의 논리 스키마."""

    model_config = ConfigDict(populate_by_name=True)

    schedule_id: str = Field(..., alias="scheduleId", description="스케줄 ID")
    daily_plans: List[DailyPlan] = Field(..., alias="dailyPlans", description="일차별 배정 결과")
