"""
Core layer: 응답 셰이핑 핵심 모듈.

역할:
- htmx 요청 컨텍스트 추출 (헤더 → HtmxContext)
- 로깅 구성

순수 함수만 둔다. 요청 간 공유 상태 없음.
"""

from .htmx import HtmxContext, extract_htmx_context, try_extract_htmx_context
from .logging import configure_logging

__all__ = [
    # htmx
    "HtmxContext",
    "extract_htmx_context",
    "try_extract_htmx_context",
    # logging
    "configure_logging",
]
