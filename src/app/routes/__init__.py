"""
FastAPI Routes.

페이지 라우트 (HTML, shape_response 경유) + 정적 응답
"""

from . import assets, form_example, pages

__all__ = ["assets", "form_example", "pages"]
