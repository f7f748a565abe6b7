"""Month-over-month deltas and trailing averages"""

from finance_insights.domain.models import MoMChanges, PeriodStats, ThreeMonthAverage
from finance_insights.utils.numbers import round_half_up

NEW_CATEGORY_CHANGE = 100.0


def percent_change(prior: float, current: float) -> float:
    """(current - prior) / prior * 100 to 2 decimals; 0 when prior is not positive"""
    if prior <= 0:
        return 0.0
    return round_half_up((current - prior) / prior * 100, 2)


def calculate_mom_changes(prior: PeriodStats, current: PeriodStats) -> MoMChanges:
    """
    Compare the current month against the previous one.

    Top-level deltas report 0 when the prior value is 0, even if the current
    value is positive. Category deltas instead report a flat 100 for a
    category that had no spend last month, so a new category always shows up
    as growth.
    """
    category_changes = {}
    for category, stats in current.category_breakdown.items():
        prior_stats = prior.category_breakdown.get(category)
        prior_amount = prior_stats.total if prior_stats else 0.0

        if prior_amount > 0:
            category_changes[category] = percent_change(prior_amount, stats.total)
        elif stats.total > 0:
            category_changes[category] = NEW_CATEGORY_CHANGE

    return MoMChanges(
        income_change=percent_change(prior.total_income, current.total_income),
        expense_change=percent_change(prior.total_expense, current.total_expense),
        savings_change=percent_change(prior.net_savings, current.net_savings),
        category_changes=category_changes,
    )


def calculate_three_month_average(
    three_months_ago: PeriodStats,
    two_months_ago: PeriodStats,
    last_month: PeriodStats,
) -> ThreeMonthAverage:
    """Unweighted mean of the three months before the current one"""
    months = (three_months_ago, two_months_ago, last_month)

    def mean(values) -> float:
        return round_half_up(sum(values) / len(months), 2)

    return ThreeMonthAverage(
        avg_income=mean(m.total_income for m in months),
        avg_expense=mean(m.total_expense for m in months),
        avg_savings=mean(m.net_savings for m in months),
        avg_savings_rate=mean(m.savings_rate for m in months),
    )
