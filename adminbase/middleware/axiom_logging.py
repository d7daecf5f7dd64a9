"""API 요청 로깅 미들웨어.

API request logging middleware.
Builds one structured event per request (method, path, params, masked
body, status code, duration, error reason) and ships it to Axiom when
``AXIOM_API_TOKEN`` and ``AXIOM_DATASET`` are configured. Without Axiom
the event is written to the ``adminbase.access`` logger instead.
Sensitive fields (password, token, secret) are masked before logging.
"""

import json
import logging
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from adminbase.config import settings

logger = logging.getLogger("adminbase.access")

# 마스킹 대상 필드 패턴 — Fields to mask in request bodies and params
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 본문을 읽는 메서드 — Methods whose JSON body is captured
_BODY_METHODS = ("POST", "PUT", "PATCH")


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive keys in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(str(k)) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 — Truncate long strings to keep events small."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def build_log_event(
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    query_params: dict[str, Any] | None = None,
    request_body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """요청 로그 이벤트를 구성합니다 (Assemble the structured event for one request)."""
    event: dict[str, Any] = {
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if query_params:
        event["query_params"] = mask_sensitive(query_params)
    if request_body is not None:
        event["request_body"] = request_body
    if error:
        event["error"] = error
    return event


def _error_detail(body: bytes) -> str:
    # 에러 응답 본문에서 사유 추출 — FastAPI errors carry {"detail": ...}
    try:
        data = json.loads(body)
        detail = data.get("detail", data) if isinstance(data, dict) else data
        text = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    except (json.JSONDecodeError, UnicodeDecodeError):
        text = body.decode("utf-8", errors="replace")
    return text[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 로깅하는 미들웨어.

    Middleware that logs every API request. Events go to Axiom when
    configured, otherwise to the ``adminbase.access`` logger.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    def _emit(self, event: dict[str, Any]) -> None:
        if self._client is None:
            logger.info(
                "%s %s %s %.2fms",
                event["method"],
                event["path"],
                event["status_code"],
                event["duration_ms"],
                extra={"event": event},
            )
            return
        try:
            self._client.ingest_events(self._dataset, [event])
        except Exception:
            # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure
            logger.warning("Axiom ingest failed for %s %s", event["method"], event["path"], exc_info=True)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        request_body: Any = None
        if method in _BODY_METHODS:
            body_bytes = await request.body()
            if body_bytes:
                try:
                    request_body = truncate(mask_sensitive(json.loads(body_bytes)))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    request_body = "(non-json body)"

        error_detail: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error_detail = _error_detail(resp_body)

                # 소비한 body를 다시 응답으로 반환 — Re-wrap the consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)
            self._emit(
                build_log_event(
                    method,
                    path,
                    status_code,
                    duration_ms,
                    query_params=query_params,
                    request_body=request_body,
                    error=error_detail,
                )
            )

        return response
