"""OpenAI 공통 설정.

타임아웃, 연결 제한, 재시도 설정 등.
"""

import httpx

# ==========================================
# HTTP 타임아웃 설정
# ==========================================

OPENAI_TIMEOUT = httpx.Timeout(
    connect=5.0,
    read=60.0,
    write=10.0,
    pool=5.0,
)

# ==========================================
# HTTP 연결 제한 설정
# ==========================================

OPENAI_LIMITS = httpx.Limits(
    max_connections=20,
    max_keepalive_connections=5,
    keepalive_expiry=30.0,
)

# ==========================================
# OpenAI 클라이언트 공통 설정
# ==========================================

# 실패는 즉시 호출 측에 전달 (사용자가 재시도)
MAX_RETRIES = 0
