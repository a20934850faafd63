"""일자별 계획 JSON 파싱/검증 테스트."""

from __future__ import annotations

import json
from datetime import date, time
from uuid import UUID

import pytest

from app.core.exceptions import MalformedResponseError
from app.schemas.schedule import PlanningRequest
from app.services.daily_plan_parser import parse_daily_plan, strip_code_fence, validate_daily_plan
from app.services.day_partition import partition_items

SCHEDULE_ID = UUID("7a1b2c3d-4e5f-4a6b-8c7d-9e0f1a2b3c4d")

_ITEMS = [
    {"contentId": "A", "title": "경복궁", "latitude": 37.58, "longitude": 126.97, "category": "TOURIST_SPOT"},
    {"contentId": "B", "title": "식당", "latitude": 37.57, "longitude": 126.99, "category": "RESTAURANT"},
    {"contentId": "C", "title": "호텔", "latitude": 37.56, "longitude": 126.98, "category": "ACCOMMODATION"},
]


def _request() -> PlanningRequest:
    return PlanningRequest(
        schedule_id=SCHEDULE_ID,
        start_date=date(2025, 5, 1),
        end_date=date(2025, 5, 2),
        start_time=time(9, 0),
        items=tuple(_ITEMS),
    )


def _plan_json(daily_plans: list[dict], schedule_id: str = str(SCHEDULE_ID)) -> str:
    return json.dumps({"scheduleId": schedule_id, "dailyPlans": daily_plans}, ensure_ascii=False)


def test_strip_code_fence_removes_json_fence() -> None:
    assert strip_code_fence('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert strip_code_fence('  {"a": 1} ') == '{"a": 1}'


def test_parse_daily_plan_accepts_fenced_content() -> None:
    content = "```json\n" + _plan_json([{"dayNumber": 1, "items": [_ITEMS[0]]}]) + "\n```"

    plan = parse_daily_plan(content)

    assert plan.daily_plans[0].items[0].content_id == "A"


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"dailyPlans": []}',
        _plan_json([{"dayNumber": 0, "items": []}]),
        _plan_json([{"dayNumber": 1, "items": [dict(_ITEMS[0], category="SHOPPING")]}]),
    ],
)
def test_parse_daily_plan_rejects_invalid_content(content: str) -> None:
    with pytest.raises(MalformedResponseError):
        parse_daily_plan(content)


def test_validate_daily_plan_accepts_valid_plan() -> None:
    plan = parse_daily_plan(
        _plan_json(
            [
                {"dayNumber": 1, "items": [_ITEMS[0], _ITEMS[2]]},
                {"dayNumber": 2, "items": [_ITEMS[1]]},
            ]
        )
    )

    assert validate_daily_plan(plan, _request(), partition_items(3, 2)) == []


def test_validate_daily_plan_reports_violations() -> None:
    unknown = dict(_ITEMS[0], contentId="Z")
    plan = parse_daily_plan(
        _plan_json(
            [
                {"dayNumber": 1, "items": [_ITEMS[2], _ITEMS[0], _ITEMS[0]]},
                {"dayNumber": 3, "items": [unknown]},
            ],
            schedule_id="other",
        )
    )

    errors = validate_daily_plan(plan, _request(), partition_items(3, 2))

    assert any("scheduleId" in error for error in errors)
    assert any("dayNumber" in error for error in errors)
    assert any("1일차 장소 수는 2개" in error for error in errors)
    assert any("마지막 장소는 숙소" in error for error in errors)
    assert any("중복된 contentId" in error and "A" in error for error in errors)
    assert any("요청에 없는 contentId" in error and "Z" in error for error in errors)
