"""
Error → Response 어댑터.

핸들러에서 발생한 모든 실패는 ResponseError로 모아서
shape_response()를 통해 동일한 "Internal error" 조각/페이지로 렌더링한다.

htmx 컨텍스트는 실패 지점에서 캡처한 값을 사용한다 (나중에 재추출하지 않음).
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.rendering import render_template
from src.app.shaping import DEFAULT_LAYOUT, PageLayout, get_layout, shape_response
from src.core.htmx import HtmxContext, header_text, try_extract_htmx_context
from src.domain.constants import HTML_MEDIA_TYPE
from src.domain.errors import HtmxContextError

logger = logging.getLogger(__name__)


# =============================================================================
# ResponseError
# =============================================================================


class ResponseError(Exception):
    """
    htmx 컨텍스트 + 내부 에러.

    실패 지점에서 생성되어 exception handler에서 한 번 응답으로 변환된다.

    Usage:
        raise ResponseError(htmx_context, e) from e
    """

    status_code = 500
    title = "Internal Error"

    def __init__(self, htmx_context: HtmxContext | None, error: BaseException) -> None:
        self.htmx_context = htmx_context
        self.error = error
        super().__init__(self.description)

    @property
    def description(self) -> str:
        return str(self.error) or type(self.error).__name__

    def render_fragment(self) -> str:
        """에러 조각 렌더링 (description은 escape됨)."""
        return render_template("error.html", description=self.description)

    def to_response(self, layout: PageLayout = DEFAULT_LAYOUT) -> HTMLResponse:
        logger.error(
            f"Request failed: {self.description}",
            exc_info=(type(self.error), self.error, self.error.__traceback__),
        )
        return shape_response(
            self.status_code,
            self.title,
            self.render_fragment(),
            self.htmx_context,
            layout,
        )


def wrap_error(htmx_context: HtmxContext | None, error: BaseException) -> ResponseError:
    """임의의 에러를 ResponseError로 감싸기."""
    if isinstance(error, ResponseError):
        return error
    return ResponseError(htmx_context, error)


@contextmanager
def capture_errors(htmx_context: HtmxContext | None) -> Iterator[None]:
    """
    블록 안에서 발생한 예외를 ResponseError로 변환.

    Usage:
        with capture_errors(htmx_context):
            fragment = build_fragment()
    """
    try:
        yield
    except ResponseError:
        raise
    except Exception as e:
        raise wrap_error(htmx_context, e) from e


# =============================================================================
# Not Found / Method Not Allowed
# =============================================================================


def accepts_html(request: Request) -> bool:
    """
    Accept 헤더가 HTML을 허용하는지.

    헤더 없음 / 잘못된 인코딩 → 허용으로 간주.
    """
    raw = request.headers.get("Accept")
    if raw is None:
        return True
    try:
        accept = header_text("Accept", raw)
    except HtmxContextError:
        return True
    return HTML_MEDIA_TYPE in accept or "*/*" in accept


def not_found_response(
    request: Request,
    status_code: int = 404,
    headers: Mapping[str, str] | None = None,
) -> Response:
    """
    매칭되는 라우트/메서드가 없는 요청 응답.

    HTML을 받지 않는 클라이언트에는 셰이핑 없이 빈 본문만 반환한다.
    headers (405의 Allow 등)는 두 경우 모두 유지된다.
    """
    logger.info(f"{request.method} {request.url.path} not found ({status_code})")

    if not accepts_html(request):
        return Response(status_code=status_code, headers=headers)

    fragment = render_template(
        "not_found.html", method=request.method, path=request.url.path
    )
    return shape_response(
        status_code,
        "Not found",
        fragment,
        try_extract_htmx_context(request.headers),
        get_layout(request),
        headers,
    )


# =============================================================================
# Exception Handlers
# =============================================================================


async def response_error_handler(request: Request, exc: ResponseError) -> Response:
    return exc.to_response(get_layout(request))


async def routing_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """404/405는 not-found 경로로, 그 외 HTTPException은 FastAPI 기본 처리."""
    if exc.status_code in (404, 405):
        return not_found_response(request, exc.status_code, exc.headers)
    return await http_exception_handler(request, exc)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """ResponseError로 감싸지 않은 예외도 같은 에러 페이지로."""
    error = wrap_error(try_extract_htmx_context(request.headers), exc)
    return error.to_response(get_layout(request))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResponseError, response_error_handler)
    app.add_exception_handler(StarletteHTTPException, routing_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
