"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Sends one structured event per request to Axiom: method, path, filter
criteria (query string), masked request body, status code, duration and,
for error responses, the ``detail`` the API returned.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 필드 패턴: Fields to mask in logged bodies
_SENSITIVE_KEYS = re.compile(r"(password|secret|token|authorization|api_key)", re.IGNORECASE)

# 로깅 제외 경로: Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_DETAIL: int = 500


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹: Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if _SENSITIVE_KEYS.search(str(key)) else mask_sensitive(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def extract_error_detail(body: bytes) -> str:
    """에러 응답 본문에서 detail 추출: Pull ``detail`` out of an error response body."""
    try:
        payload: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:_MAX_DETAIL]
    detail: Any = payload.get("detail", payload) if isinstance(payload, dict) else payload
    text: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    return text if len(text) <= _MAX_DETAIL else text[:_MAX_DETAIL] + "..."


def build_log_event(
    request: Request,
    status_code: int,
    duration_ms: float,
    body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트 구성: Build the event sent to Axiom for one request."""
    event: dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if request.query_params:
        event["criteria"] = mask_sensitive(dict(request.query_params))
    if request.path_params:
        event["path_params"] = dict(request.path_params)
    if body is not None:
        event["request_body"] = body
    if error:
        event["error"] = error
    return event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every API request to Axiom. Passes requests through
    untouched when Axiom is not configured.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def _read_body(self, request: Request) -> Any:
        if request.method not in ("POST", "PUT", "PATCH"):
            return None
        raw: bytes = await request.body()
        if not raw:
            return None
        try:
            return mask_sensitive(json.loads(raw))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return "(non-json body)"

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in _SKIP_PATHS or self._client is None:
            return await call_next(request)

        start: float = time.perf_counter()
        body: Any = await self._read_body(request)
        status_code: int = 500
        error: str | None = None
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            # 에러 응답은 body를 소비한 뒤 다시 감싸서 반환: Re-wrap consumed error body
            if status_code >= 400:
                content: bytes = b""
                async for chunk in response.body_iterator:
                    content += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error = extract_error_detail(content)
                response = Response(
                    content=content,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms: float = round((time.perf_counter() - start) * 1000, 2)
            event = build_log_event(request, status_code, duration_ms, body, error)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록: Never break a request on log failure

        return response
