"""표준화된 로거 모듈.

프로젝트 전체에서 일관된 로깅 형식을 제공합니다.
로그 레벨은 `LOG_LEVEL` 환경 변수로 조정합니다 (기본값: INFO).
"""

import logging
import os
import sys

_LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_log_level(level: str | None = None) -> int:
    """인자 또는 환경변수에서 로그 레벨을 결정합니다."""
    name = (level or os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """표준화된 로거를 반환합니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용).
        level: 로그 레벨 이름. 생략하면 `LOG_LEVEL` 환경 변수를 따릅니다.

    Returns:
        설정된 로거 인스턴스.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        log_level = _resolve_log_level(level)
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
