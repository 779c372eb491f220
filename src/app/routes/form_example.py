"""
Form Example Routes: 점진적 향상(progressive enhancement) 폼 데모.

GET/POST 모두 같은 경로 사용 → htmx 없이도, htmx boost로도 동작.
- GET/HEAD /form-example → 빈 폼
- POST /form-example → 검증 후 같은 폼을 성공/에러 메시지와 함께 재렌더링
"""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from src.app.rendering import render_template
from src.app.shaping import get_layout, shape_response
from src.core.htmx import try_extract_htmx_context
from src.domain.errors import ErrorCodes, FormValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

PAGE_TITLE = "Example form"


def validate_content(content: str) -> None:
    """
    content 필드 검증.

    Raises:
        FormValidationError: 빈 값 또는 ASCII가 아닌 문자 포함
    """
    if not content:
        raise FormValidationError(ErrorCodes.CONTENT_EMPTY, "Content is empty")
    if not content.isascii():
        raise FormValidationError(ErrorCodes.CONTENT_NOT_ASCII, "Content is not ascii")


def render_form_body(
    success_message: str | None = None,
    error_message: str | None = None,
    content: str = "",
) -> str:
    """폼 페이지 본문 조각."""
    return render_template(
        "form_example.html",
        success_message=success_message,
        error_message=error_message,
        content=content,
    )


@router.api_route(
    "/form-example", methods=["GET", "HEAD"], response_class=HTMLResponse
)
async def form_example_page(request: Request) -> HTMLResponse:
    """빈 폼 화면."""
    return shape_response(
        200,
        PAGE_TITLE,
        render_form_body(),
        try_extract_htmx_context(request.headers),
        get_layout(request),
    )


@router.post("/form-example", response_class=HTMLResponse)
async def form_example_submit(
    request: Request,
    content: str = Form(""),
) -> HTMLResponse:
    """
    폼 제출.

    검증 실패는 internal error가 아니므로 입력값을 유지한 채 400으로 재렌더링.
    (htmx 요청이면 shape_response에서 200으로 전달됨)
    """
    htmx_context = try_extract_htmx_context(request.headers)
    layout = get_layout(request)

    try:
        validate_content(content)
    except FormValidationError as e:
        logger.info(f"Form rejected: [{e.code}] {e.message}")
        return shape_response(
            400,
            PAGE_TITLE,
            render_form_body(error_message=e.message, content=content),
            htmx_context,
            layout,
        )

    return shape_response(
        200,
        PAGE_TITLE,
        render_form_body(success_message="Content was valid"),
        htmx_context,
        layout,
    )
