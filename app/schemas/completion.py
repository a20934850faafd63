"""Chat Completions 응답 봉투(envelope) 스키마.

원격 응답 중 이 서비스가 의존하는 경로(`choices[].message.content`)만 정의한다.
나머지 필드(usage, id 등)는 무시한다.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CompletionMessage(BaseModel):
    """모델이 생성한 메시지."""

    model_config = ConfigDict(extra="ignore")

    role: str | None = Field(default=None, description="메시지 역할")
    content: str | None = Field(default=None, description="모델 응답 텍스트")


class CompletionChoice(BaseModel):
    """응답 후보."""

    model_config = ConfigDict(extra="ignore")

    index: int | None = Field(default=None, description="후보 순번")
    message: CompletionMessage | None = Field(default=None, description="후보 메시지")
    finish_reason: str | None = Field(default=None, description="생성 종료 사유")


class ChatCompletionEnvelope(BaseModel):
    """Chat Completions 응답 최상위 구조."""

    model_config = ConfigDict(extra="ignore")

    choices: List[CompletionChoice] | None = Field(default=None, description="응답 후보 목록")
