"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.
Tokens are issued by the accounts service; this API only verifies them.
``create_access_token`` exists for tooling and tests.

JWT Payload Structure:
    {
        "username": "alice",   # 사용자 이름 (Username)
        "is_admin": true,      # 관리자 여부 (Admin flag)
        "exp": 1234567890      # 만료 시간, 선택 (Optional expiration)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from app.config import settings


def create_access_token(
    username: str,
    is_admin: bool = False,
    expires_in: timedelta | None = None,
) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Sign a token carrying ``username`` and ``is_admin``.

    Args:
        username: 사용자 이름 (Username claim)
        is_admin: 관리자 여부 (Admin claim)
        expires_in: 유효 기간, None이면 만료 없음 (Lifetime; no ``exp`` when None)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    payload: dict[str, Any] = {"username": username, "is_admin": is_admin}
    if expires_in is not None:
        payload["exp"] = datetime.now(timezone.utc) + expires_in
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a token. Raises ``jwt.ExpiredSignatureError`` for an
    expired token and ``jwt.InvalidTokenError`` for any other failure.
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
