"""OpenAI Chat Completions 비동기 호출 클라이언트."""

from __future__ import annotations

import asyncio
import json
from functools import lru_cache

import httpx
import openai
from openai import AsyncOpenAI

from app.core.config import Settings, get_settings
from app.core.exceptions import CompletionServiceError
from app.core.logger import get_logger
from app.core.timeout_policy import get_timeout_policy, to_httpx_timeout

logger = get_logger(__name__)

DAILY_PLAN_MODEL = "gpt-4o"
JSON_RESPONSE_FORMAT = {"type": "json_object"}


def _raise_for_error_payload(body: str) -> None:
    """2xx 응답 본문에 원격 오류 객체가 담겨 있으면 예외로 바꾼다."""
    try:
        parsed = json.loads(body)
    except ValueError:
        return

    if not isinstance(parsed, dict) or not parsed.get("error"):
        return

    error = parsed["error"]
    message = error.get("message") if isinstance(error, dict) else str(error)
    raise CompletionServiceError(f"OpenAI 오류 응답: {message or error}")


class CompletionClient:
    """단일 요청/응답으로 LLM 응답 원문을 가져온다.

    재시도는 하지 않는다. 실패는 모두 `CompletionServiceError`로 변환된다.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        api_key: str | None = None,
        timeout_seconds: int | None = None,
        http_client: httpx.AsyncClient | None = None,
        model: str = DAILY_PLAN_MODEL,
    ) -> None:
        resolved_settings = settings or get_settings()
        self.model = model
        self.timeout_seconds = (
            max(1, int(timeout_seconds))
            if timeout_seconds is not None
            else get_timeout_policy(resolved_settings).llm_timeout_seconds
        )
        self._client = AsyncOpenAI(
            api_key=api_key or resolved_settings.OPENAI_API_KEY,
            timeout=to_httpx_timeout(self.timeout_seconds),
            max_retries=0,
            http_client=http_client,
        )

    async def complete(self, prompt: str) -> str:
        """프롬프트를 전송하고 응답 본문(JSON 문자열)을 그대로 반환한다.

        Raises:
            CompletionServiceError: 전송 실패, 비정상 상태 코드, 원격 오류 응답, 타임아웃.
        """
        logger.debug("생성된 프롬프트:\n%s", prompt)

        try:
            raw_response = await asyncio.wait_for(
                self._client.chat.completions.with_raw_response.create(
                    model=self.model,
                    messages=[{"role": "user", "content": prompt}],
                    response_format=JSON_RESPONSE_FORMAT,
                ),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise CompletionServiceError(f"OpenAI 응답 시간이 초과되었습니다. ({self.timeout_seconds}s)") from exc
        except openai.APITimeoutError as exc:
            raise CompletionServiceError(f"OpenAI 요청 타임아웃: {exc}") from exc
        except openai.APIStatusError as exc:
            raise CompletionServiceError(
                f"OpenAI 응답 상태 오류 ({exc.status_code}): {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except openai.APIError as exc:
            raise CompletionServiceError(f"OpenAI 호출 실패: {exc}") from exc

        body = raw_response.http_response.text
        _raise_for_error_payload(body)
        return body

    async def aclose(self) -> None:
        """내부 HTTP 커넥션 풀을 닫는다."""
        await self._client.close()


@lru_cache
def get_completion_client() -> CompletionClient:
    """프로세스 전역에서 공유하는 CompletionClient를 반환한다.

    내부 httpx 커넥션 풀은 처음 사용한 이벤트 루프에 묶인다. 서버의 단일 루프에서만 쓰고,
    `asyncio.run`을 여러 번 호출하는 스크립트에서는 `CompletionClient`를 직접 만들어 닫는다.
    """
    return CompletionClient()
