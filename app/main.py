"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리기 및 라우터 등록.

FastAPI application entry point — Middleware, exception handler and
router registration. Configures logging, CORS, the health check, the
EntityNotFoundError → 404 envelope, and mounts every resource under /api.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import EntityNotFoundError

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

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
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """엔티티 미발견 → 404 오류 envelope.

    Render EntityNotFoundError as {"type": ..., "message": ...} with 404.
    """
    return JSONResponse(
        status_code=404,
        content={"type": exc.error_type, "message": exc.message},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


from app.api import api_router  # noqa: E402

app.include_router(api_router, prefix="/api")
