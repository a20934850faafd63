"""AI 일정 배분 프롬프트 생성.

규칙 문구와 출력 형식 예시는 하나의 템플릿으로 관리한다. 출력 형식을 바꿀 때는
`DAILY_PLAN_PROMPT_VERSION`을 올리고, 예시가 `DailyPlanResponse`로 파싱되는지 함께 확인한다.
"""

from __future__ import annotations

import json
from typing import Any, Sequence
from uuid import UUID

from app.core.exceptions import PromptConstructionError
from app.schemas.enums import PlaceCategory
from app.schemas.schedule import DayTarget, PlanningRequest

DAILY_PLAN_PROMPT_VERSION = "2"

_CATEGORY_VALUES = ", ".join(category.value for category in PlaceCategory)

DAILY_PLAN_PROMPT_TEMPLATE = """너는 여행 일정 계획 전문가 AI다.
주어진 장소 목록을 **날짜별로 균등하게 배분**하고, 각 날짜의 `items` 배열 안에서는 **이동 경로가 자연스럽도록 순서**를 지정해야 한다.

### **규칙**
1. 각 날짜의 `items` 개수는 [일자별 목표]와 반드시 일치해야 한다.
2. 중복된 장소(`contentId`)는 전체 일정에서 절대 허용되지 않는다.
3. category는 반드시 입력된 값 중 하나여야 한다. ({categories})
4. 하루 일정의 순서는 다음 원칙을 따른다:
   - 첫 번째 장소는 그날의 출발지(전날 숙소 또는 첫날 시작점).
   - 마지막 장소는 숙소(`ACCOMMODATION`, 있으면).
   - 나머지는 지리적으로 가까운 순서로 배치한다.
5. 하루 총 소요시간이 무리되지 않도록, 기본적으로 체류시간은 1~2시간이라고 가정한다.

### **[일자별 목표]**
{distribution}

### **출력 형식**
```json
{output_example}
```

### **입력 정보**
* 여행 기간: {start_date} ~ {end_date}
* 여행 시작 시각: {start_time}
* 스케줄 ID: {schedule_id}
* 장소 목록:
{items_json}

이제 규칙에 맞게 JSON을 생성하라.
"""


def build_output_example(schedule_id: UUID | str) -> dict[str, Any]:
    """프롬프트에 포함할 출력 형식 예시를 생성한다."""
    return {
        "scheduleId": str(schedule_id),
        "dailyPlans": [
            {
                "dayNumber": 1,
                "items": [
                    {
                        "contentId": "CONTENT_ID",
                        "title": "장소 이름",
                        "latitude": 37.579617,
                        "longitude": 126.977041,
                        "category": PlaceCategory.TOURIST_SPOT.value,
                    }
                ],
            }
        ],
    }


def format_distribution(day_targets: Sequence[DayTarget]) -> str:
    """일자별 목표 개수 지시문을 만든다."""
    return "\n".join(f"* {target.day_number}일차: 총 {target.target_count}개" for target in day_targets)


def _serialize_items(request: PlanningRequest) -> str:
    try:
        payload = [item.model_dump(mode="json", by_alias=True) for item in request.items]
        return json.dumps(payload, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise PromptConstructionError(f"장소 목록 JSON 직렬화 실패: {exc}") from exc


def build_daily_plan_prompt(request: PlanningRequest, day_targets: Sequence[DayTarget]) -> str:
    """일정 배분 요청으로부터 LLM 프롬프트를 생성한다.

    Raises:
        PromptConstructionError: 장소 목록을 JSON으로 직렬화할 수 없는 경우.
    """
    items_json = _serialize_items(request)
    output_example = json.dumps(build_output_example(request.schedule_id), ensure_ascii=False, indent=2)

    return DAILY_PLAN_PROMPT_TEMPLATE.format(
        categories=_CATEGORY_VALUES,
        distribution=format_distribution(day_targets),
        output_example=output_example,
        start_date=request.start_date.isoformat(),
        end_date=request.end_date.isoformat(),
        start_time=request.start_time.strftime("%H:%M"),
        schedule_id=request.schedule_id,
        items_json=items_json,
    )
