"""LLM 응답 봉투에서 content를 추출하고 검증한다."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from app.core.exceptions import MalformedResponseError
from app.core.logger import get_logger
from app.schemas.completion import ChatCompletionEnvelope

logger = get_logger(__name__)


def _decode_envelope(raw: str | bytes | Mapping[str, Any]) -> ChatCompletionEnvelope:
    try:
        if isinstance(raw, (str, bytes)):
            return ChatCompletionEnvelope.model_validate_json(raw)
        return ChatCompletionEnvelope.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"OpenAI 응답 형식이 올바르지 않습니다: {exc.errors()[0]['msg']}") from exc


def extract_completion_content(raw: str | bytes | Mapping[str, Any]) -> str:
    """`choices[0].message.content`를 반환한다. content는 가공하지 않는다.

    Raises:
        MalformedResponseError: choices/message가 없거나 content가 비어 있는 경우.
    """
    envelope = _decode_envelope(raw)

    if not envelope.choices:
        raise MalformedResponseError("OpenAI 응답에 'choices'가 없습니다.")

    message = envelope.choices[0].message
    if message is None:
        raise MalformedResponseError("OpenAI 응답에 'message'가 없습니다.")

    content = message.content
    if content is None or not content.strip():
        raise MalformedResponseError("OpenAI 응답에 'content'가 비어있습니다.")

    logger.debug("추출된 content: %s", content)
    return content
