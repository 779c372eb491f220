"""
Domain Constants: htmx 헤더 및 응답 셰이핑 상수.

헤더 이름과 기본 swap 대상은 클라이언트(htmx)와의 계약이므로
한 곳에서만 정의한다.
"""

# =============================================================================
# Request Headers (htmx → server)
# =============================================================================

HX_REQUEST = "HX-Request"
HX_BOOSTED = "HX-Boosted"
HX_TARGET = "HX-Target"
HX_TRIGGER = "HX-Trigger"
HX_TRIGGER_NAME = "HX-Trigger-Name"
HX_CURRENT_URL = "HX-Current-URL"

# =============================================================================
# Response Headers (server → htmx)
# =============================================================================

HX_RETARGET = "HX-Retarget"
HX_RESWAP = "HX-Reswap"

# =============================================================================
# Swap Target (기본 swap 컨테이너)
# =============================================================================
# layout.html: <body hx-boost="true" id="body">
# 클라이언트가 다른 대상을 선언하면 이 컨테이너의 innerHTML로 강제한다.

BODY_ELEMENT_ID = "body"
DEFAULT_SWAP_TARGET = f"#{BODY_ELEMENT_ID}"
DEFAULT_SWAP_STYLE = "innerHTML"

# =============================================================================
# MIME Types
# =============================================================================

HTML_MEDIA_TYPE = "text/html"
SVG_MEDIA_TYPE = "image/svg+xml"
