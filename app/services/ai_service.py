"""AI 일정 배분 서비스.

장바구니 장소 목록을 여행 일수에 맞게 나누도록 LLM에 요청하고,
날짜별로 장소가 배정된 '중간 계획 JSON' 문자열을 반환한다.
"""

from __future__ import annotations

from datetime import date, time
from enum import StrEnum
from functools import lru_cache
from time import perf_counter
from typing import Any, Mapping, Sequence
from uuid import UUID

from app.core.exceptions import PlanningError
from app.core.logger import get_logger
from app.schemas.schedule import CandidateItem, PlanningRequest
from app.services.completion_client import CompletionClient, get_completion_client
from app.services.completion_extractor import extract_completion_content
from app.services.daily_plan_prompt import build_daily_plan_prompt
from app.services.day_partition import count_travel_days, partition_items

logger = get_logger(__name__)


class PlanningStage(StrEnum):
    """일정 배분 파이프라인 단계."""

    REQUEST = "REQUEST"
    PROMPT = "PROMPT"
    COMPLETION = "COMPLETION"
    EXTRACTION = "EXTRACTION"


class AiService:
    """AI 일정 배분 오케스트레이터. 내부 상태가 없어 동시 호출에 안전하다."""

    def __init__(self, completion_client: CompletionClient | None = None) -> None:
        self._completion_client = completion_client

    @property
    def completion_client(self) -> CompletionClient:
        return self._completion_client or get_completion_client()

    async def create_daily_plan(
        self,
        schedule_id: UUID,
        start_date: date,
        end_date: date,
        start_time: time,
        items: Sequence[CandidateItem | Mapping[str, Any]],
    ) -> str:
        """주어진 장소 목록을 날짜별로 균등 배분한 계획 JSON을 생성한다.

        Returns:
            LLM이 생성한 일자별 계획 JSON 문자열 (파싱하지 않은 원문).

        Raises:
            PlanningError: 어느 단계에서든 실패한 경우. 원인 예외가 체이닝된다.
        """
        logger.info("AI 일정 배분 시작 - Schedule ID: %s", schedule_id)
        started = perf_counter()
        stage = PlanningStage.REQUEST

        try:
            request = PlanningRequest(
                schedule_id=schedule_id,
                start_date=start_date,
                end_date=end_date,
                start_time=start_time,
                items=tuple(items),
            )

            stage = PlanningStage.PROMPT
            travel_days = count_travel_days(request.start_date, request.end_date)
            day_targets = partition_items(len(request.items), travel_days)
            prompt = build_daily_plan_prompt(request, day_targets)

            stage = PlanningStage.COMPLETION
            raw_response = await self.completion_client.complete(prompt)

            stage = PlanningStage.EXTRACTION
            daily_plan_json = extract_completion_content(raw_response)
        except Exception as exc:
            logger.error(
                "AI 일정 배분 실패 - Schedule ID: %s, stage: %s, cause: %s",
                schedule_id,
                stage.value,
                exc,
                extra={"schedule_id": str(schedule_id), "stage": stage.value},
                exc_info=exc,
            )
            raise PlanningError(schedule_id, str(exc), stage=stage.value) from exc

        logger.info(
            "AI 일정 배분 성공 - Schedule ID: %s (days=%d, items=%d, latency_ms=%.1f)",
            schedule_id,
            travel_days,
            len(request.items),
            (perf_counter() - started) * 1000,
        )
        logger.debug("생성된 일자별 계획 JSON: %s", daily_plan_json)
        return daily_plan_json


@lru_cache
def get_ai_service() -> AiService:
    """AiService 인스턴스를 반환합니다."""
    return AiService()
