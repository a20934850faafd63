"""로그인 실패 횟수 기반 차단 저장소."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from app.core.config import Settings, get_settings
from app.core.logger import get_logger

logger = get_logger(__name__)


class LoginAttemptStore(Protocol):
    """로그인 실패 기록 저장소 인터페이스. 분산 저장소로 교체할 수 있다."""

    def record_failure(self, key: str) -> None: ...

    def is_blocked(self, key: str) -> bool: ...

    def reset(self, key: str) -> None: ...


def mask_key(key: str) -> str:
    """로그용으로 키(이메일)를 가린다. 예: user@example.com -> u***@example.com"""
    local, sep, domain = key.partition("@")
    if not local:
        return "***"
    return f"{local[0]}***{sep}{domain}"


@dataclass(slots=True)
class _LoginAttempt:
    count: int
    last_attempt_at: float


class InMemoryLoginAttemptStore:
    """프로세스 메모리에 실패 기록을 보관하는 스레드 안전 저장소.

    마지막 실패 이후 `block_seconds`가 지나면 `is_blocked` 조회 시 기록이 제거된다.
    """

    def __init__(
        self,
        max_attempts: int = 5,
        block_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_attempts = max(1, int(max_attempts))
        self.block_seconds = max(0.0, float(block_seconds))
        self._clock = clock
        self._attempts: dict[str, _LoginAttempt] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> InMemoryLoginAttemptStore:
        resolved_settings = settings or get_settings()
        return cls(
            max_attempts=resolved_settings.LOGIN_MAX_ATTEMPTS,
            block_seconds=resolved_settings.LOGIN_BLOCK_SECONDS,
        )

    def record_failure(self, key: str) -> None:
        now = self._clock()
        with self._lock:
            attempt = self._attempts.get(key)
            if attempt is None:
                attempt = _LoginAttempt(count=0, last_attempt_at=now)
                self._attempts[key] = attempt
            attempt.count += 1
            attempt.last_attempt_at = now
            count = attempt.count

        if count >= self.max_attempts:
            logger.warning("로그인 실패 횟수 초과로 차단합니다: %s (count=%d)", mask_key(key), count)

    def is_blocked(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            attempt = self._attempts.get(key)
            if attempt is None:
                return False
            if now - attempt.last_attempt_at > self.block_seconds:
                del self._attempts[key]
                return False
            return attempt.count >= self.max_attempts

    def reset(self, key: str) -> None:
        with self._lock:
            self._attempts.pop(key, None)

    def failure_count(self, key: str) -> int:
        with self._lock:
            attempt = self._attempts.get(key)
            return attempt.count if attempt else 0
