"""Financial health scoring - composite 0-100 score from four components"""

from typing import Optional

from finance_insights.domain.models import HealthBreakdown, HealthScore, MoMChanges, PeriodStats, ThreeMonthAverage
from finance_insights.domain.thresholds import DEFAULT_THRESHOLDS, Thresholds
from finance_insights.utils.numbers import round_half_up

SAVINGS_RATE_MAX = 40
SPENDING_BALANCE_MAX = 30
CONSISTENCY_MAX = 20
ANOMALY_CONTROL_MAX = 10


def _clamp(value: int, upper: int) -> int:
    return max(0, min(upper, value))


def savings_rate_points(savings_rate: float, t: Thresholds = DEFAULT_THRESHOLDS) -> int:
    """
    Savings-rate component (max 40).

    - rate >= excellent (35%): full 40 points
    - target (20%) <= rate < excellent: proportional to the excellent rate
    - rate < target: proportional to the target, on a 20 point scale

    The under-target branch steps down to at most 20 points, so a 19.9% saver
    scores 20 and a 20% saver scores 23.
    """
    if savings_rate >= t.excellent_savings_rate:
        points = SAVINGS_RATE_MAX
    elif savings_rate >= t.target_savings_rate:
        points = int(round_half_up(savings_rate / t.excellent_savings_rate * SAVINGS_RATE_MAX, 0))
    else:
        points = int(round_half_up(savings_rate / t.target_savings_rate * 20, 0))
    return _clamp(points, SAVINGS_RATE_MAX)


def spending_balance_points(current: PeriodStats, t: Thresholds = DEFAULT_THRESHOLDS) -> int:
    """Spending-balance component (max 30): 50/30/20 alignment"""
    points = SPENDING_BALANCE_MAX
    if current.needs_percentage > t.balance_needs_max:
        points -= t.balance_penalty
    if current.wants_percentage > t.balance_wants_max:
        points -= t.balance_penalty
    if current.savings_rate < t.balance_min_savings_rate:
        points -= t.balance_penalty
    return _clamp(points, SPENDING_BALANCE_MAX)


def consistency_points(mom_changes: MoMChanges, t: Thresholds = DEFAULT_THRESHOLDS) -> int:
    """Consistency component (max 20): stable income and expenses"""
    points = CONSISTENCY_MAX
    if abs(mom_changes.income_change) > t.income_volatility_max:
        points -= t.consistency_penalty
    if abs(mom_changes.expense_change) > t.expense_volatility_max:
        points -= t.consistency_penalty
    return _clamp(points, CONSISTENCY_MAX)


def anomaly_control_points(mom_changes: MoMChanges, t: Thresholds = DEFAULT_THRESHOLDS) -> int:
    """Anomaly-control component (max 10): penalty per category spike"""
    spikes = sum(1 for change in mom_changes.category_changes.values() if abs(change) > t.category_spike)
    return _clamp(ANOMALY_CONTROL_MAX - spikes * t.anomaly_penalty, ANOMALY_CONTROL_MAX)


def determine_rating(score: int) -> str:
    """
    Map health score to a rating band.

    - 80+:   Excellent
    - 60-79: Good
    - 40-59: Fair
    - <40:   Needs Improvement
    """
    if score >= 80:
        return "Excellent"
    elif score >= 60:
        return "Good"
    elif score >= 40:
        return "Fair"
    else:
        return "Needs Improvement"


def calculate_health_score(
    current: PeriodStats,
    last: PeriodStats,
    three_month_avg: ThreeMonthAverage,
    mom_changes: MoMChanges,
    thresholds: Optional[Thresholds] = None,
) -> HealthScore:
    """
    Calculate financial health score from 0 (poor) to 100 (excellent).

    Scoring weights:
    - 40 points: Savings rate
    - 30 points: Spending balance (needs/wants/savings)
    - 20 points: Month-over-month consistency of income and expenses
    - 10 points: Absence of category spending spikes
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    breakdown = HealthBreakdown(
        savings_rate=savings_rate_points(current.savings_rate, thresholds),
        spending_balance=spending_balance_points(current, thresholds),
        consistency=consistency_points(mom_changes, thresholds),
        anomaly_control=anomaly_control_points(mom_changes, thresholds),
    )
    score = _clamp(breakdown.total, 100)

    return HealthScore(score=score, breakdown=breakdown, rating=determine_rating(score))
