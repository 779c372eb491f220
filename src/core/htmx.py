"""
htmx 요청 컨텍스트 추출.

요청 헤더(타입 없는 텍스트)를 검증하여 HtmxContext로 변환한다.
- HX-Request 없음 → NOT_HTMX_REQUEST (일반 내비게이션)
- 잘못된 값 → INVALID_HEADER_ENCODING / INVALID_URL (컨텍스트 전체 폐기)

부수효과 없음. 헤더 입력에 대한 순수 함수.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from src.domain.constants import (
    HX_BOOSTED,
    HX_CURRENT_URL,
    HX_REQUEST,
    HX_TARGET,
    HX_TRIGGER,
    HX_TRIGGER_NAME,
)
from src.domain.errors import ErrorCodes, HtmxContextError

logger = logging.getLogger(__name__)

HeaderValue = str | bytes

HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


@dataclass(frozen=True)
class HtmxContext:
    """
    htmx 요청 컨텍스트 (요청 단위, 불변).

    Attributes:
        is_boosted: hx-boost로 가로챈 요청인지
        target: 클라이언트가 선언한 swap 대상 (HX-Target)
        trigger: 요청을 발생시킨 요소 id (해석하지 않음)
        trigger_name: 요청을 발생시킨 요소 name (해석하지 않음)
        current_url: 요청 시점 클라이언트 페이지의 절대 URL
    """

    is_boosted: bool = False
    target: str | None = None
    trigger: str | None = None
    trigger_name: str | None = None
    current_url: httpx.URL | None = None


# =============================================================================
# Header Decoding
# =============================================================================


def _is_header_char(ch: str) -> bool:
    # visible ASCII + tab
    return ch == "\t" or " " <= ch <= "~"


def header_text(name: str, value: HeaderValue) -> str:
    """
    헤더 값을 텍스트로 변환.

    Raises:
        HtmxContextError: visible ASCII(+tab)가 아닌 문자가 포함된 경우
    """
    if isinstance(value, bytes):
        try:
            value = value.decode("ascii")
        except UnicodeDecodeError:
            raise HtmxContextError(
                ErrorCodes.INVALID_HEADER_ENCODING, header=name
            ) from None

    if not all(_is_header_char(ch) for ch in value):
        raise HtmxContextError(ErrorCodes.INVALID_HEADER_ENCODING, header=name)
    return value


def _optional_text(headers: Mapping[str, HeaderValue], name: str) -> str | None:
    raw = headers.get(name)
    if raw is None:
        return None
    return header_text(name, raw)


def _parse_current_url(raw: str) -> httpx.URL:
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise HtmxContextError(
            ErrorCodes.INVALID_URL, header=HX_CURRENT_URL, value=raw
        ) from e

    # scheme 있으면 절대 URL (about:blank, mailto:, file:///...)
    # 단 http(s)/ws(s)/ftp는 host 필수
    if not url.scheme or (url.scheme in HOST_REQUIRED_SCHEMES and not url.host):
        raise HtmxContextError(ErrorCodes.INVALID_URL, header=HX_CURRENT_URL, value=raw)
    return url


# =============================================================================
# Extraction
# =============================================================================


def extract_htmx_context(headers: Mapping[str, HeaderValue]) -> HtmxContext:
    """
    요청 헤더에서 HtmxContext 추출.

    Args:
        headers: 요청 헤더 (Starlette Headers 또는 dict)

    Returns:
        검증된 HtmxContext

    Raises:
        HtmxContextError: NOT_HTMX_REQUEST / INVALID_HEADER_ENCODING / INVALID_URL
    """
    if headers.get(HX_REQUEST) is None:
        raise HtmxContextError(ErrorCodes.NOT_HTMX_REQUEST)

    # 정확히 "true"만 인정 (대소문자 구분)
    is_boosted = headers.get(HX_BOOSTED) in ("true", b"true")

    target = _optional_text(headers, HX_TARGET)
    trigger = _optional_text(headers, HX_TRIGGER)
    trigger_name = _optional_text(headers, HX_TRIGGER_NAME)

    current_url = None
    raw_url = _optional_text(headers, HX_CURRENT_URL)
    if raw_url is not None:
        current_url = _parse_current_url(raw_url)

    return HtmxContext(
        is_boosted=is_boosted,
        target=target,
        trigger=trigger,
        trigger_name=trigger_name,
        current_url=current_url,
    )


def try_extract_htmx_context(headers: Mapping[str, HeaderValue]) -> HtmxContext | None:
    """
    Best-effort 추출: 실패 시 None (일반 내비게이션으로 강등).

    잘못된 헤더를 보낸 클라이언트도 응답은 받아야 하므로 예외를 올리지 않는다.
    """
    try:
        return extract_htmx_context(headers)
    except HtmxContextError as e:
        if not e.is_not_htmx:
            logger.warning(f"Ignoring malformed htmx headers: {e}")
        return None
