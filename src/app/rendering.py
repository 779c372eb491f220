"""
Jinja2 렌더링.

src/app/templates/ 의 HTML 템플릿을 문자열로 렌더링한다.
autoescape 활성화 → 변수는 항상 escape, 신뢰된 마크업만 `| safe`.
"""

from pathlib import Path
from typing import Any

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"
jinja_templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_template(name: str, **context: Any) -> str:
    """
    템플릿을 HTML 문자열로 렌더링.

    Args:
        name: 템플릿 파일명 (예: "home.html")
        **context: 템플릿 변수

    Returns:
        렌더링된 HTML
    """
    return jinja_templates.get_template(name).render(**context)
