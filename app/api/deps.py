"""FastAPI 의존성 주입 모듈: 인증 및 권한 검사.

FastAPI dependency injection module: Authentication and authorization.
Write endpoints require an admin bearer token; reads are public.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출, 없으면 401 (HTTPBearer extracts the token; 401 when missing)
    3. decode_token()이 서명/만료를 검증 (decode_token verifies signature and expiry)
    4. require_admin이 is_admin 클레임을 확인, 아니면 403
       (require_admin checks the is_admin claim; 403 otherwise)
"""

from typing import Annotated, Any

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.utils.exceptions import ForbiddenError, UnauthorizedError
from app.utils.jwt import decode_token

# auto_error=False: 토큰 누락 시 403 대신 401을 직접 반환
# (Missing token is reported as 401 by get_token_payload instead of HTTPBearer's 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_token_payload(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict[str, Any]:
    """Bearer 토큰을 검증하고 페이로드를 반환합니다.

    Verify the bearer token and return its payload.

    Raises:
        UnauthorizedError: 토큰 누락, 만료, 위조 (Missing, expired or invalid token)
    """
    if credentials is None:
        raise UnauthorizedError()
    try:
        payload: dict[str, Any] = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Invalid or expired token")
    if not payload.get("username"):
        raise UnauthorizedError("Invalid token")
    return payload


async def require_admin(
    payload: Annotated[dict[str, Any], Depends(get_token_payload)],
) -> dict[str, Any]:
    """관리자 토큰만 통과시킵니다: Allow only tokens with ``is_admin`` set."""
    if payload.get("is_admin") is not True:
        raise ForbiddenError()
    return payload
