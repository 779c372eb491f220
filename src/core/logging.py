"""
Logging setup.

default.yaml의 logging 섹션을 읽어 루트 로거를 구성한다.
각 모듈은 logging.getLogger(__name__)만 사용한다.
"""

import logging
from typing import Any

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def resolve_log_level(config: dict[str, Any]) -> int:
    """
    설정에서 로그 레벨 결정.

    Args:
        config: load_config() 결과

    Returns:
        logging 레벨 값 (알 수 없는 이름이면 INFO)
    """
    section = config.get("logging") or {}
    name = str(section.get("level", DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(config: dict[str, Any]) -> None:
    """루트 로거 구성."""
    logging.basicConfig(level=resolve_log_level(config), format=LOG_FORMAT)
