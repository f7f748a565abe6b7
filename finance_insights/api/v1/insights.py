"""POST /v1/insights - financial insights report endpoint"""

import time
import logging
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from finance_insights.api.v1.schemas import ClassificationResponse, InsightsRequest
from finance_insights.api.dependencies import get_request_id, get_thresholds
from finance_insights.config import settings
from finance_insights.domain.classifier import classify_category
from finance_insights.domain.models import InsightsReport
from finance_insights.domain.report import generate_financial_insights
from finance_insights.domain.thresholds import Thresholds
from finance_insights.infrastructure.observability.logging import log_report
from finance_insights.infrastructure.observability.metrics import record_report, record_report_failure

router = APIRouter()


@router.post("/insights")
def create_insights(
    request_body: InsightsRequest,
    request: Request,
    thresholds: Thresholds = Depends(get_thresholds),
):
    """
    Build the insights report for the supplied transactions.

    Flow:
    1. Hand the raw transaction records to the engine
    2. Record metrics and logs for the outcome
    3. Return the report (200) or the structured failure (500)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    result = generate_financial_insights(
        [txn.model_dump(by_alias=True) for txn in request_body.transactions],
        reference_date=request_body.reference_date,
        user_id=request_body.user_id,
        thresholds=thresholds,
        currency=settings.currency_symbol,
    )
    duration_ms = (time.time() - start_time) * 1000

    if not isinstance(result, InsightsReport):
        record_report_failure()
        log_report(request_id, request_body.user_id, False, None, 0, 0, duration_ms)
        logging.error(f"Insights generation failed: {result.error}", extra={"request_id": request_id})
        return JSONResponse(status_code=500, content=result.to_dict())

    record_report(
        result.health_score.score,
        result.health_score.rating,
        [insight.priority.value for insight in result.insights],
    )
    log_report(
        request_id,
        request_body.user_id,
        True,
        result.health_score.score,
        len(result.insights),
        len(result.suggestions),
        duration_ms,
    )

    body = result.to_dict()
    body["generatedAt"] = datetime.now(timezone.utc).isoformat()
    return JSONResponse(content=body)


@router.get("/classify", response_model=ClassificationResponse)
def classify(category: Optional[str] = None):
    """Needs/wants/savings bucket of a category label"""
    return ClassificationResponse(category=category, type=classify_category(category).value)
