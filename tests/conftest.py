"""
Pytest fixtures for the response-shaping tests.

구성:
- 경로/설정 fixture
- htmx 헤더 세트 (일반 내비게이션 / htmx / boost / 잘못된 target)
- TestClient
"""

from collections.abc import Generator
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


# =============================================================================
# Header Fixtures
# =============================================================================

@pytest.fixture
def htmx_headers() -> dict[str, str]:
    """htmx 요청 헤더 (target 없음)."""
    return {"HX-Request": "true"}


@pytest.fixture
def boosted_headers() -> dict[str, str]:
    """hx-boost 링크 클릭 시 헤더."""
    return {
        "HX-Request": "true",
        "HX-Boosted": "true",
        "HX-Target": "#body",
        "HX-Current-URL": "http://localhost:9000/",
    }


@pytest.fixture
def wrong_target_headers() -> dict[str, str]:
    """기본 컨테이너가 아닌 swap 대상을 선언한 htmx 요청."""
    return {"HX-Request": "true", "HX-Target": "#wrong"}


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """FastAPI TestClient (lifespan 실행)."""
    from src.app.main import app

    with TestClient(app) as client:
        yield client
