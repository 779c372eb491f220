"""
Pages Routes: 홈 / fallible 데모 페이지.

- GET/HEAD / → 홈
- GET/HEAD /fallible → 50% 확률로 internal error (에러 경로 데모)
"""

import random

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.app.errors import capture_errors
from src.app.rendering import render_template
from src.app.shaping import get_layout, shape_response
from src.core.htmx import try_extract_htmx_context

router = APIRouter()


def is_lucky() -> bool:
    """동전 던지기."""
    return random.random() < 0.5


@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def home_page(request: Request) -> HTMLResponse:
    """홈 화면."""
    return shape_response(
        200,
        "Home page",
        render_template("home.html"),
        try_extract_htmx_context(request.headers),
        get_layout(request),
    )


@router.api_route("/fallible", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def fallible_page(request: Request) -> HTMLResponse:
    """
    가끔 실패하는 페이지.

    조각 생성 중 발생한 예외는 현재 htmx 컨텍스트와 함께 ResponseError가 된다.
    """
    htmx_context = try_extract_htmx_context(request.headers)

    with capture_errors(htmx_context):
        if not is_lucky():
            raise RuntimeError("request was unlucky")
        fragment = render_template("lucky.html")

    return shape_response(200, "Lucky!", fragment, htmx_context, get_layout(request))
