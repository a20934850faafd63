"""AI 일정 배분 파이프라인의 예외 정의."""

from __future__ import annotations

from uuid import UUID


class ItineraryError(Exception):
    """일정 배분 파이프라인 예외의 기반 클래스."""


class PromptConstructionError(ItineraryError):
    """프롬프트 구성(장소 목록 직렬화 등) 실패."""


class CompletionServiceError(ItineraryError):
    """원격 LLM 호출 실패 (전송 오류, 비정상 상태 코드, 원격 오류 응답, 타임아웃)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(ItineraryError):
    """LLM 응답 봉투(envelope)가 예상한 형태가 아니거나 content가 비어 있음."""


class PlanningError(ItineraryError):
    """오케스트레이터가 호출자에게 노출하는 단일 실패 유형."""

    def __init__(self, schedule_id: UUID | str, message: str, *, stage: str | None = None) -> None:
        super().__init__(f"AI 일정 배분 실패 (scheduleId={schedule_id}): {message}")
        self.schedule_id = schedule_id
        self.stage = stage
        self.cause_message = message
