"""
Error definitions for the response-shaping core.

규칙:
- HX-Request 없음 → 정상 흐름 (전체 페이지 렌더링), 장애 아님
- 잘못된 htmx 헤더 → 컨텍스트 전체 폐기 (부분 채움 금지)
- 폼 검증 실패 → 400 + 인라인 메시지 (internal error 아님)
"""

from typing import Any


class HtmxContextError(Exception):
    """
    htmx 요청 컨텍스트 추출 실패.

    NOT_HTMX_REQUEST는 일반 브라우저 내비게이션에서 항상 발생하는
    예상된 결과이며, 호출 측은 이를 "전체 페이지 모드"로 해석한다.

    Usage:
        raise HtmxContextError("INVALID_URL", header="HX-Current-URL", value=raw)
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    @property
    def is_not_htmx(self) -> bool:
        return self.code == ErrorCodes.NOT_HTMX_REQUEST

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class FormValidationError(Exception):
    """폼 입력 검증 실패. 메시지는 사용자에게 그대로 노출된다."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === htmx context ===
    NOT_HTMX_REQUEST = "NOT_HTMX_REQUEST"  # expected, not a fault
    INVALID_HEADER_ENCODING = "INVALID_HEADER_ENCODING"
    INVALID_URL = "INVALID_URL"

    # === Form example ===
    CONTENT_EMPTY = "CONTENT_EMPTY"
    CONTENT_NOT_ASCII = "CONTENT_NOT_ASCII"
