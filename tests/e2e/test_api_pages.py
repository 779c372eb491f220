"""
test_api_pages.py - 페이지 라우트 E2E 테스트

엔드포인트:
- GET/HEAD /
- GET/HEAD /fallible
- GET/HEAD /form-example
- POST /form-example
- GET/HEAD /favicon.svg
- 그 외 (404 / 405)

같은 라우트가 일반 내비게이션과 htmx 요청을 모두 처리하는지 검증.
"""

import pytest
from fastapi.testclient import TestClient

from src.app.main import app
from src.app.routes import pages

# =============================================================================
# GET /
# =============================================================================


class TestHomePage:
    """홈 화면."""

    def test_plain_navigation_full_document(self, client):
        """HX-Request 없음 → 전체 문서, 200, 내비게이션 + Home."""
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<html" in response.text
        assert "<title>Home page</title>" in response.text
        assert "<h1>Home</h1>" in response.text
        assert 'href="/fallible"' in response.text
        assert 'href="/form-example"' in response.text

    def test_htmx_fragment(self, client, htmx_headers):
        """HX-Request → 조각만 + title 갱신."""
        response = client.get("/", headers=htmx_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert response.text.startswith("<title>Home page</title>")
        assert "<h1>Home</h1>" in response.text

    def test_vary_header(self, client, htmx_headers):
        assert client.get("/").headers["vary"] == "HX-Request"
        assert client.get("/", headers=htmx_headers).headers["vary"] == "HX-Request"

    def test_boosted_request(self, client, boosted_headers):
        """hx-boost 요청 (target=#body) → retarget 없음."""
        response = client.get("/", headers=boosted_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert "hx-retarget" not in response.headers

    def test_malformed_htmx_headers_degrade_to_full_page(self, client):
        """잘못된 HX-Current-URL → 일반 내비게이션으로 강등."""
        headers = {"HX-Request": "true", "HX-Current-URL": "not a url"}

        response = client.get("/", headers=headers)

        assert response.status_code == 200
        assert "<html" in response.text


# =============================================================================
# Retarget
# =============================================================================


class TestRetarget:
    """잘못된 swap 대상 → #body로 교정."""

    @pytest.mark.parametrize("path", ["/", "/form-example", "/does-not-exist"])
    def test_wrong_target_any_route(self, client, wrong_target_headers, path):
        response = client.get(path, headers=wrong_target_headers)

        assert response.status_code == 200
        assert response.headers["hx-retarget"] == "#body"
        assert response.headers["hx-reswap"] == "innerHTML"

    def test_wrong_target_on_form_submit(self, client, wrong_target_headers):
        response = client.post(
            "/form-example", data={"content": ""}, headers=wrong_target_headers
        )

        assert response.headers["hx-retarget"] == "#body"


# =============================================================================
# GET /fallible
# =============================================================================


class TestFalliblePage:
    """가끔 실패하는 페이지."""

    def test_lucky(self, client, monkeypatch):
        monkeypatch.setattr(pages, "is_lucky", lambda: True)

        response = client.get("/fallible")

        assert response.status_code == 200
        assert "<title>Lucky!</title>" in response.text
        assert "You were lucky!" in response.text

    def test_unlucky_plain_navigation(self, client, monkeypatch):
        """실패 + 일반 내비게이션 → 500 전체 문서."""
        monkeypatch.setattr(pages, "is_lucky", lambda: False)

        response = client.get("/fallible")

        assert response.status_code == 500
        assert "<html" in response.text
        assert "Internal error" in response.text
        assert "request was unlucky" in response.text

    def test_unlucky_htmx(self, client, monkeypatch, htmx_headers):
        """실패 + htmx → 200 에러 조각."""
        monkeypatch.setattr(pages, "is_lucky", lambda: False)

        response = client.get("/fallible", headers=htmx_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert "<title>Internal Error</title>" in response.text
        assert "request was unlucky" in response.text

    def test_unexpected_error_captured(self, client, monkeypatch):
        """조각 생성 중 예상 못한 예외도 ResponseError로 감싸짐."""
        def explode() -> bool:
            raise ZeroDivisionError("division by zero")

        monkeypatch.setattr(pages, "is_lucky", explode)

        response = client.get("/fallible")

        assert response.status_code == 500
        assert "Internal error" in response.text
        assert "division by zero" in response.text

    def test_unlucky_keeps_captured_context(self, client, monkeypatch, wrong_target_headers):
        """실패 시점의 컨텍스트로 retarget."""
        monkeypatch.setattr(pages, "is_lucky", lambda: False)

        response = client.get("/fallible", headers=wrong_target_headers)

        assert response.headers["hx-retarget"] == "#body"


# =============================================================================
# /form-example
# =============================================================================


class TestFormExample:
    """점진적 향상 폼."""

    def test_form_page(self, client):
        response = client.get("/form-example")

        assert response.status_code == 200
        assert "<title>Example form</title>" in response.text
        assert 'action="/form-example"' in response.text
        assert 'name="content"' in response.text

    def test_empty_content_htmx(self, client, htmx_headers):
        """빈 content + htmx → 200 + "Content is empty"."""
        response = client.post("/form-example", data={"content": ""}, headers=htmx_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert "Content is empty" in response.text

    def test_missing_content_field(self, client):
        """content 필드 없음 → 빈 값으로 처리."""
        response = client.post("/form-example", data={})

        assert response.status_code == 400
        assert "Content is empty" in response.text

    def test_non_ascii_content_plain(self, client):
        """비 ASCII content + 일반 내비게이션 → 400 전체 문서."""
        response = client.post("/form-example", data={"content": "héllo"})

        assert response.status_code == 400
        assert "<html" in response.text
        assert "Content is not ascii" in response.text
        assert 'value="héllo"' in response.text

    def test_previous_value_escaped(self, client):
        response = client.post("/form-example", data={"content": '"><script>ü'})

        assert "<script>ü" not in response.text
        assert "&#34;&gt;&lt;script&gt;ü" in response.text

    def test_valid_content(self, client):
        response = client.post("/form-example", data={"content": "hello"})

        assert response.status_code == 200
        assert "Success" in response.text
        assert "Content was valid" in response.text
        assert 'value=""' in response.text


# =============================================================================
# GET /favicon.svg
# =============================================================================


class TestFavicon:
    """셰이핑 없는 정적 응답."""

    def test_svg(self, client, htmx_headers):
        response = client.get("/favicon.svg", headers=htmx_headers)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert "<svg" in response.text
        assert "vary" not in response.headers


class TestStaticFiles:
    """번들 CSS."""

    def test_normalize_css(self, client):
        response = client.get("/static/css/modern-normalize.min.css")

        assert response.status_code == 200
        assert "modern-normalize" in response.text


# =============================================================================
# Not Found / Method Not Allowed
# =============================================================================


class TestNotFound:
    """매칭되는 라우트/메서드 없음."""

    def test_plain_navigation(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert "<html" in response.text
        assert "Not Found" in response.text
        assert "<code>GET</code> <code>/does-not-exist</code> not found" in response.text

    def test_htmx(self, client, htmx_headers):
        response = client.get("/does-not-exist", headers=htmx_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert "<title>Not found</title>" in response.text

    def test_json_client_gets_empty_body(self, client):
        """Accept: application/json → 빈 본문 404, 셰이핑 없음."""
        response = client.get("/does-not-exist", headers={"Accept": "application/json"})

        assert response.status_code == 404
        assert response.content == b""
        assert "vary" not in response.headers

    @pytest.mark.parametrize("accept", ["text/html", "application/json, */*;q=0.1"])
    def test_html_accepted(self, client, accept):
        response = client.get("/nope", headers={"Accept": accept})

        assert "Not Found" in response.text

    def test_path_escaped(self, client):
        response = client.get("/<b>x</b>")

        assert "<b>x</b>" not in response.text
        assert "&lt;b&gt;x&lt;/b&gt;" in response.text

    def test_method_not_allowed(self, client):
        """등록되지 않은 메서드 → 같은 not-found 페이지 (405)."""
        response = client.put("/form-example")

        assert response.status_code == 405
        assert "<code>PUT</code> <code>/form-example</code> not found" in response.text

    def test_method_not_allowed_htmx(self, client, htmx_headers):
        response = client.delete("/", headers=htmx_headers)

        assert response.status_code == 200
        assert "<html" not in response.text
        assert "Not Found" in response.text

    def test_method_not_allowed_keeps_allow(self, client):
        """405 → Allow 헤더 유지."""
        response = client.put("/form-example")

        assert response.status_code == 405
        assert "GET" in response.headers["allow"]
        assert response.headers["vary"] == "HX-Request"

    def test_method_not_allowed_json_keeps_allow(self, client):
        """HTML 미허용 클라이언트도 Allow 헤더는 받음."""
        response = client.put("/form-example", headers={"Accept": "application/json"})

        assert response.status_code == 405
        assert response.content == b""
        assert "GET" in response.headers["allow"]

    def test_method_not_allowed_htmx_keeps_allow(self, client, htmx_headers):
        response = client.delete("/", headers=htmx_headers)

        assert response.status_code == 200
        assert "GET" in response.headers["allow"]


# =============================================================================
# HEAD
# =============================================================================


class TestHeadRequests:
    """GET 라우트는 HEAD도 처리."""

    @pytest.mark.parametrize("path", ["/", "/form-example"])
    def test_html_routes(self, client, path):
        response = client.head(path)

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert response.headers["vary"] == "HX-Request"

    def test_fallible(self, client, monkeypatch):
        monkeypatch.setattr(pages, "is_lucky", lambda: True)

        assert client.head("/fallible").status_code == 200

    def test_favicon(self, client):
        response = client.head("/favicon.svg")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")


# =============================================================================
# Unhandled Exceptions
# =============================================================================


class TestUnhandledException:
    """ResponseError로 감싸지 않은 예외도 에러 페이지로."""

    def test_unexpected_error_rendered(self, monkeypatch, htmx_headers):
        def explode(name: str, **context) -> str:
            raise ZeroDivisionError("division by zero")

        monkeypatch.setattr(pages, "render_template", explode)

        with TestClient(app, raise_server_exceptions=False) as client:
            plain = client.get("/")
            htmx = client.get("/", headers=htmx_headers)

        assert plain.status_code == 500
        assert "division by zero" in plain.text
        assert "<html" in plain.text
        assert htmx.status_code == 200
        assert "<html" not in htmx.text
        assert "division by zero" in htmx.text
