"""Prometheus metrics for monitoring report outcomes, health scores and request latency"""

from typing import Iterable
from prometheus_client import Counter, Histogram

# Report metrics
report_counter = Counter(
    "finance_insights_report_total",
    "Total insights reports generated",
    ["outcome"],  # success | failure
)

health_score_histogram = Histogram(
    "finance_insights_health_score",
    "Financial health scores issued",
    buckets=[20, 40, 60, 80, 100],
)

health_rating_counter = Counter(
    "finance_insights_health_rating_total",
    "Health ratings issued",
    ["rating"],  # Excellent | Good | Fair | Needs Improvement
)

insight_counter = Counter(
    "finance_insights_insight_total",
    "Behavioral insights emitted",
    ["priority"],  # critical | high | medium | low
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(health_score: int, rating: str, insight_priorities: Iterable[str]) -> None:
    """Record metrics for a successful report"""
    report_counter.labels(outcome="success").inc()
    health_score_histogram.observe(health_score)
    health_rating_counter.labels(rating=rating).inc()

    for priority in insight_priorities:
        insight_counter.labels(priority=priority).inc()


def record_report_failure() -> None:
    """Record a report that failed closed"""
    report_counter.labels(outcome="failure").inc()
