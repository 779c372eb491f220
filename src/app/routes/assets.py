"""
Asset Routes: 셰이핑 대상이 아닌 정적 응답.

- GET/HEAD /favicon.svg
"""

from fastapi import APIRouter
from fastapi.responses import Response

from src.domain.constants import SVG_MEDIA_TYPE

router = APIRouter()

FAVICON_SVG = """
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <rect width="100" height="100" fill="black"/>
</svg>
"""


@router.api_route("/favicon.svg", methods=["GET", "HEAD"])
async def favicon_svg() -> Response:
    """파비콘 (검은 사각형)."""
    return Response(content=FAVICON_SVG, media_type=SVG_MEDIA_TYPE)
