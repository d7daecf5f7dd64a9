"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures request logging, CORS, health check, and the admin routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from adminbase.api.admin import admin_router
from adminbase.config import settings
from adminbase.middleware.axiom_logging import AxiomLoggingMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# API 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


app.include_router(admin_router, prefix="/api/v1/admin")
