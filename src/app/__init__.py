"""
App layer: UI 서버 (FastAPI + HTMX).

역할:
- 같은 라우트로 일반 내비게이션(전체 문서)과 htmx 요청(조각) 모두 처리
- 응답 셰이핑 (shaping.py), 에러 → 응답 변환 (errors.py)
- 데모 라우트 (routes/)

주의: 폴더 구분
- src/app/templates/ → Jinja2 HTML (문서 셸 + 페이지 조각)
- src/app/static/ → CSS
"""
