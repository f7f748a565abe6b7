"""Insights report assembly - main entry point of the analytics engine"""

import logging
from datetime import date
from typing import Any, Iterable, Optional, Union

from finance_insights.domain.aggregation import aggregate_period, partition_by_month
from finance_insights.domain.classifier import CategoryClassifier, default_classifier
from finance_insights.domain.exceptions import InsightsGenerationError
from finance_insights.domain.health import calculate_health_score
from finance_insights.domain.insights import generate_insights, sort_insights
from finance_insights.domain.models import (
    InsightsFailure,
    InsightsReport,
    MoMChanges,
    PeriodLabels,
    PeriodStats,
    TopCategory,
    Transaction,
)
from finance_insights.domain.suggestions import generate_suggestions, sort_suggestions
from finance_insights.domain.thresholds import DEFAULT_THRESHOLDS, Thresholds
from finance_insights.domain.trends import calculate_mom_changes, calculate_three_month_average
from finance_insights.utils.date_utils import month_label, month_range_label, parse_date, shift_month
from finance_insights.utils.numbers import percent_of

logger = logging.getLogger(__name__)

TOP_CATEGORY_LIMIT = 5
FAILURE_MESSAGE = "Failed to generate financial insights"


def build_period_labels(reference_date: date) -> PeriodLabels:
    """Human-readable labels for the current month, last month and the trailing window"""
    current = (reference_date.year, reference_date.month)
    last = shift_month(*current, -1)
    three_ago = shift_month(*current, -3)
    return PeriodLabels(
        current=month_label(*current),
        last_month=month_label(*last),
        last_3_months=month_range_label(three_ago, last),
    )


def rank_top_categories(current: PeriodStats, mom_changes: MoMChanges, limit: int = TOP_CATEGORY_LIMIT):
    """Largest categories of the month with their income share and MoM change"""
    return [
        TopCategory(
            category=category,
            amount=stats.total,
            count=stats.count,
            type=stats.type,
            percentage_of_income=percent_of(stats.total, current.total_income),
            month_over_month_change=mom_changes.category_changes.get(category, 0.0),
        )
        for category, stats in current.ranked_categories()[:limit]
    ]


def build_insights_report(
    transactions: Iterable[Any],
    reference_date: date,
    user_id: Optional[str] = None,
    thresholds: Optional[Thresholds] = None,
    classifier: CategoryClassifier = default_classifier,
    currency: str = "₹",
) -> InsightsReport:
    """
    Run the full pipeline. Raises on unexpected errors; callers wanting the
    fail-closed behaviour use generate_financial_insights.

    Flow:
    1. Partition transactions into the reference month and the 3 before it
    2. Aggregate each month
    3. Month-over-month changes and trailing 3-month average
    4. Insights, suggestions and health score
    5. Top categories and period labels
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    records = [Transaction.from_record(record) for record in transactions]
    buckets = partition_by_month(records, reference_date)

    current = aggregate_period(buckets.current, classifier)
    last = aggregate_period(buckets.last_month, classifier)
    two_ago = aggregate_period(buckets.two_months_ago, classifier)
    three_ago = aggregate_period(buckets.three_months_ago, classifier)
    logger.debug(
        "Periods aggregated",
        extra={
            "user_id": user_id,
            "current_transactions": current.transaction_count,
            "last_month_transactions": last.transaction_count,
        },
    )

    mom_changes = calculate_mom_changes(last, current)
    three_month_avg = calculate_three_month_average(three_ago, two_ago, last)

    insights = generate_insights(current, last, three_month_avg, mom_changes, thresholds)
    suggestions = generate_suggestions(current, last, mom_changes, insights, thresholds, classifier, currency)
    health_score = calculate_health_score(current, last, three_month_avg, mom_changes, thresholds)

    return InsightsReport(
        period=build_period_labels(reference_date),
        current_month=current,
        last_month=last,
        three_month_average=three_month_avg,
        mom_changes=mom_changes,
        top_categories=rank_top_categories(current, mom_changes),
        insights=sort_insights(insights),
        suggestions=sort_suggestions(suggestions),
        health_score=health_score,
        user_id=user_id,
    )


def generate_financial_insights(
    transactions: Iterable[Any],
    reference_date: Union[date, str, None] = None,
    user_id: Optional[str] = None,
    thresholds: Optional[Thresholds] = None,
    classifier: CategoryClassifier = default_classifier,
    currency: str = "₹",
) -> Union[InsightsReport, InsightsFailure]:
    """
    Main entry point: analyze transactions and build the insights report.

    reference_date defaults to today. Any error is caught here and returned
    as an InsightsFailure, so no exception crosses this boundary and no
    partial report is produced.
    """
    try:
        if reference_date is None:
            reference = date.today()
        else:
            reference = parse_date(reference_date)
            if reference is None:
                raise InsightsGenerationError(f"Invalid reference date: {reference_date!r}")

        return build_insights_report(transactions, reference, user_id, thresholds, classifier, currency)

    except Exception as e:
        logger.exception("Error generating financial insights", extra={"user_id": user_id})
        return InsightsFailure(message=FAILURE_MESSAGE, error=str(e))
