"""AI가 생성한 일자별 계획 JSON 파싱 및 검증.

`AiService`는 계획 JSON을 가공하지 않고 반환한다. 결과를 저장하는 쪽에서
이 모듈로 파싱하고, `validate_daily_plan`으로 규칙 위반 여부를 확인한다.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from pydantic import ValidationError

from app.core.exceptions import MalformedResponseError
from app.schemas.enums import PlaceCategory
from app.schemas.schedule import DailyPlanResponse, DayTarget, PlanningRequest


def strip_code_fence(text: str) -> str:
    """코드 펜스를 제거합니다."""
    content = (text or "").strip()
    if content.startswith("```"):
        parts = content.split("```")
        if len(parts) > 1:
            content = parts[1].strip()
            if content.startswith("json"):
                content = content[4:].strip()
    return content.strip()


def parse_daily_plan(content: str) -> DailyPlanResponse:
    """계획 JSON 문자열을 `DailyPlanResponse`로 파싱한다.

    Raises:
        MalformedResponseError: JSON이 아니거나 스키마와 맞지 않는 경우.
    """
    try:
        return DailyPlanResponse.model_validate_json(strip_code_fence(content))
    except ValidationError as exc:
        raise MalformedResponseError(f"일자별 계획 JSON 형식이 올바르지 않습니다: {exc.errors()[0]['msg']}") from exc


def validate_daily_plan(
    plan: DailyPlanResponse,
    request: PlanningRequest,
    day_targets: Sequence[DayTarget],
) -> list[str]:
    """계획이 배분 규칙을 지키는지 검사하고 위반 사항 목록을 반환한다."""
    errors: list[str] = []

    if plan.schedule_id != str(request.schedule_id):
        errors.append(f"scheduleId가 일치하지 않습니다: {plan.schedule_id}")

    expected_days = {target.day_number for target in day_targets}
    actual_days = [day.day_number for day in plan.daily_plans]
    if set(actual_days) != expected_days or len(actual_days) != len(expected_days):
        errors.append(f"dayNumber는 1부터 {len(expected_days)}까지 한 번씩만 있어야 합니다.")

    targets = {target.day_number: target.target_count for target in day_targets}
    for day in plan.daily_plans:
        target_count = targets.get(day.day_number)
        if target_count is not None and len(day.items) != target_count:
            errors.append(f"{day.day_number}일차 장소 수는 {target_count}개여야 하지만 {len(day.items)}개입니다.")

        categories = [item.category for item in day.items]
        if PlaceCategory.ACCOMMODATION in categories and categories[-1] != PlaceCategory.ACCOMMODATION:
            errors.append(f"{day.day_number}일차 마지막 장소는 숙소여야 합니다.")

    planned_ids = [item.content_id for day in plan.daily_plans for item in day.items]
    duplicated = sorted(content_id for content_id, count in Counter(planned_ids).items() if count > 1)
    if duplicated:
        errors.append(f"중복된 contentId가 있습니다: {', '.join(duplicated)}")

    requested_ids = {item.content_id for item in request.items}
    unknown = sorted(set(planned_ids) - requested_ids)
    if unknown:
        errors.append(f"요청에 없는 contentId가 있습니다: {', '.join(unknown)}")

    return errors
