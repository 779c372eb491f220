"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run python -m src.app.main
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from src.app.errors import register_exception_handlers
from src.app.routes import assets, form_example, pages
from src.app.shaping import PageLayout
from src.core.logging import configure_logging

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9000

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 프로젝트 루트의 default.yaml
        config_path = Path(__file__).parent.parent.parent / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드, 로깅 구성, 문서 셸 레이아웃 준비
    """
    config = load_config()
    configure_logging(config)
    app.state.config = config
    app.state.layout = PageLayout.from_config(config)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="HTMX Response Shaping",
    description="같은 라우트로 전체 페이지와 htmx 조각을 모두 제공",
    version="0.1.0",
    lifespan=lifespan,
)

# Static files (CSS)
static_dir = Path(__file__).parent / "static"
if static_dir.exists():
    app.mount("/static", StaticFiles(directory=static_dir), name="static")

register_exception_handlers(app)


# =============================================================================
# Routes
# =============================================================================

# GET/POST 같은 경로 공유 → progressive enhancement
app.include_router(pages.router, tags=["Pages"])
app.include_router(form_example.router, tags=["Form Example"])
app.include_router(assets.router, tags=["Assets"])


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    server = load_config().get("server") or {}
    uvicorn.run(
        "src.app.main:app",
        host=server.get("host", DEFAULT_HOST),
        port=int(server.get("port", DEFAULT_PORT)),
    )
