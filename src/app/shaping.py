"""
Response Shaping: 전체 문서 vs htmx 조각 결정.

모든 HTML 라우트는 shape_response()를 정확히 한 번 호출한다.
- 일반 내비게이션 → layout.html 문서 셸 + 호출자 status 유지
- htmx 요청 → <title> + 조각만, status는 항상 200
  (htmx는 200이 아니면 swap하지 않음 → 에러도 조각 내용으로 전달)
- swap 대상이 #body가 아니면 HX-Retarget/HX-Reswap으로 강제 교정
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse

from src.app.rendering import render_template
from src.core.htmx import HtmxContext
from src.domain.constants import (
    BODY_ELEMENT_ID,
    DEFAULT_SWAP_STYLE,
    DEFAULT_SWAP_TARGET,
    HX_REQUEST,
    HX_RESWAP,
    HX_RETARGET,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Page Layout
# =============================================================================


@dataclass(frozen=True)
class StaticAsset:
    """문서 셸에 포함되는 외부 리소스 (CSS/JS)."""

    url: str
    integrity: str | None = None

    @classmethod
    def from_config(cls, value: str | dict[str, Any]) -> "StaticAsset":
        if isinstance(value, str):
            return cls(url=value)
        return cls(url=str(value["url"]), integrity=value.get("integrity"))


@dataclass(frozen=True)
class PageLayout:
    """
    전체 문서 셸 설정.

    default.yaml의 layout 섹션에서 로드된다.
    """

    lang: str = "en"
    stylesheets: tuple[StaticAsset, ...] = field(default_factory=tuple)
    scripts: tuple[StaticAsset, ...] = field(default_factory=tuple)
    favicon: str | None = None

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "PageLayout":
        """
        설정 dict에서 PageLayout 생성.

        Args:
            config: load_config() 결과 (layout 섹션 없으면 DEFAULT_LAYOUT 값 사용)

        Returns:
            PageLayout
        """
        section = config.get("layout") or {}
        stylesheets = section.get("stylesheets")
        scripts = section.get("scripts")
        return cls(
            lang=section.get("lang", DEFAULT_LAYOUT.lang),
            stylesheets=(
                tuple(StaticAsset.from_config(s) for s in stylesheets)
                if stylesheets is not None
                else DEFAULT_LAYOUT.stylesheets
            ),
            scripts=(
                tuple(StaticAsset.from_config(s) for s in scripts)
                if scripts is not None
                else DEFAULT_LAYOUT.scripts
            ),
            favicon=section.get("favicon", DEFAULT_LAYOUT.favicon),
        )


DEFAULT_LAYOUT = PageLayout(
    lang="en",
    stylesheets=(
        StaticAsset(url="/static/css/modern-normalize.min.css"),
        StaticAsset(
            url="https://cdnjs.cloudflare.com/ajax/libs/milligram/1.4.1/milligram.min.css",
            integrity=(
                "sha512-xiunq9hpKsIcz42zt0o2vCo34xV0j6Ny8hgEylN3XBglZDtTZ2nwnqF/"
                "Z/TTCc18sGdvCjbFInNd++6q3J0N6g=="
            ),
        ),
    ),
    scripts=(
        StaticAsset(
            url="https://cdnjs.cloudflare.com/ajax/libs/htmx/2.0.4/htmx.min.js",
            integrity=(
                "sha512-2kIcAizYXhIn8TzUvqzEDZNuDZ+aW7yE/+f1HJHXFjQcGNfv1kqzJSTBRBSlOgp6B/"
                "KZsz1K0a3ZTqP9dnxioQ=="
            ),
        ),
    ),
    favicon="/favicon.svg",
)


def get_layout(request: Request) -> PageLayout:
    """Request에서 PageLayout 가져오기 (lifespan 미실행 시 기본값)."""
    return getattr(request.app.state, "layout", DEFAULT_LAYOUT)


# =============================================================================
# Shaping
# =============================================================================


def needs_retarget(htmx_context: HtmxContext) -> bool:
    """클라이언트가 선언한 swap 대상이 기본 컨테이너가 아닌지."""
    return htmx_context.target is not None and htmx_context.target != DEFAULT_SWAP_TARGET


def shape_response(
    status_code: int,
    title: str,
    fragment: str,
    htmx_context: HtmxContext | None,
    layout: PageLayout = DEFAULT_LAYOUT,
    extra_headers: Mapping[str, str] | None = None,
) -> HTMLResponse:
    """
    HTML 조각을 요청 모드에 맞는 응답으로 변환.

    Args:
        status_code: 일반 내비게이션에서 사용할 HTTP status
        title: 문서 제목 (escape됨)
        fragment: 이미 렌더링된 본문 조각 (신뢰된 마크업)
        htmx_context: htmx 요청 컨텍스트 (None이면 일반 내비게이션)
        layout: 문서 셸 설정
        extra_headers: 함께 보낼 헤더 (예: 405의 Allow). Vary/HX-* 는 덮어쓰지 않음

    Returns:
        HTMLResponse (Content-Type, Vary 항상 포함)
    """
    headers = dict(extra_headers or {})
    headers["Vary"] = HX_REQUEST

    if htmx_context is None:
        content = render_template(
            "layout.html",
            title=title,
            fragment=fragment,
            layout=layout,
            body_id=BODY_ELEMENT_ID,
        )
        return HTMLResponse(content=content, status_code=status_code, headers=headers)

    if needs_retarget(htmx_context):
        headers[HX_RETARGET] = DEFAULT_SWAP_TARGET
        headers[HX_RESWAP] = DEFAULT_SWAP_STYLE

    if status_code != 200:
        logger.debug(f"htmx response: status {status_code} delivered as 200")

    content = render_template("htmx_fragment.html", title=title, fragment=fragment)
    return HTMLResponse(content=content, status_code=200, headers=headers)
