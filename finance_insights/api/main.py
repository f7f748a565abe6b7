"""
Finance insights HTTP service.

Wraps the analytics engine in a small FastAPI app:
- POST /v1/insights builds the monthly report from posted transactions
- GET /v1/classify shows how a category name is bucketed
- GET /health and GET /metrics serve liveness and Prometheus scraping
"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finance_insights.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finance_insights.api.v1 import insights
from finance_insights.infrastructure.observability.logging import setup_logging
from finance_insights.config import settings

setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Build the insights app; thresholds and currency come from settings per request"""
    app = FastAPI(
        title="Finance Insights",
        description="Savings, spending-balance and financial health analytics over transactions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # RequestIDMiddleware is added last so it runs first and the latency
    # observation already sees a request id
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(insights.router, prefix="/v1", tags=["insights"])

    return app


app = create_app()
