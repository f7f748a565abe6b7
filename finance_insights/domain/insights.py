"""Behavioral insight rules over aggregated monthly statistics"""

from typing import List, Optional

from finance_insights.domain.models import Insight, MoMChanges, PeriodStats, Priority, ThreeMonthAverage
from finance_insights.domain.thresholds import DEFAULT_THRESHOLDS, Thresholds
from finance_insights.utils.numbers import format_fixed, format_number, percent_of, round_half_up

PRIORITY_ORDER = {Priority.CRITICAL: 0, Priority.HIGH: 1, Priority.MEDIUM: 2, Priority.LOW: 3}


def _savings_rate_insight(current: PeriodStats, t: Thresholds) -> Insight:
    rate = current.savings_rate
    shown = format_number(rate)

    if rate >= t.excellent_savings_rate:
        return Insight(
            "positive",
            "Savings",
            f"Excellent! You're saving {shown}% of your income. "
            "Consider investing a portion into SIP, emergency fund, or retirement corpus.",
            Priority.HIGH,
        )
    if rate >= t.target_savings_rate:
        return Insight(
            "positive",
            "Savings",
            f"Great job! Your {shown}% savings rate meets the healthy "
            f"{format_number(t.target_savings_rate)}% target. Keep up the consistency.",
            Priority.MEDIUM,
        )
    if rate >= t.poor_savings_rate:
        return Insight(
            "warning",
            "Savings",
            f"Your savings rate is {shown}%, below the {format_number(t.target_savings_rate)}% healthy target. "
            "Consider automating transfers to improve consistency.",
            Priority.HIGH,
        )
    return Insight(
        "critical",
        "Savings",
        f"Critical: Your savings rate is only {shown}%. "
        "Focus on reducing variable expenses and building an emergency fund.",
        Priority.CRITICAL,
    )


def _lifestyle_inflation_insights(mom: MoMChanges) -> List[Insight]:
    expense_growth, income_growth = mom.expense_change, mom.income_change
    if expense_growth > income_growth and expense_growth > 0:
        return [
            Insight(
                "warning",
                "Lifestyle",
                f"Lifestyle inflation detected: Expenses grew {format_number(expense_growth)}% "
                f"while income grew {format_number(income_growth)}%. Review variable costs.",
                Priority.HIGH,
            )
        ]
    return []


def emergency_fund_months(current: PeriodStats, average: ThreeMonthAverage) -> float:
    """Months of average expenses covered by this month's net savings"""
    if average.avg_expense <= 0:
        return 0.0
    return round_half_up(current.net_savings / average.avg_expense, 1)


def _emergency_fund_insights(current: PeriodStats, average: ThreeMonthAverage, t: Thresholds) -> List[Insight]:
    months = emergency_fund_months(current, average)
    # no expense history shows a bare 0
    shown = format_fixed(months) if average.avg_expense > 0 else "0"

    if months < t.emergency_fund_min:
        return [
            Insight(
                "warning",
                "Emergency Fund",
                f"Your current balance covers only {shown} months of expenses. Build an emergency fund of "
                f"{format_number(t.emergency_fund_min)}-{format_number(t.emergency_fund_ideal)} months.",
                Priority.HIGH,
            )
        ]
    if months >= t.emergency_fund_ideal:
        return [
            Insight(
                "positive",
                "Emergency Fund",
                f"Excellent! You have {shown} months of expenses saved. Your emergency fund is well-established.",
                Priority.LOW,
            )
        ]
    return []


def _spending_balance_insights(current: PeriodStats, t: Thresholds) -> List[Insight]:
    insights = []
    needs_pct = percent_of(current.needs_total, current.total_income)
    wants_pct = percent_of(current.wants_total, current.total_income)

    if wants_pct > t.wants_max_percentage:
        insights.append(
            Insight(
                "warning",
                "Spending Balance",
                f'Your "Wants" spending is {format_fixed(wants_pct)}% of income '
                f"(recommended: <{format_number(t.wants_max_percentage)}%). Consider reducing discretionary expenses.",
                Priority.MEDIUM,
            )
        )
    if needs_pct > t.needs_max_percentage:
        insights.append(
            Insight(
                "info",
                "Spending Balance",
                f'Your "Needs" are {format_fixed(needs_pct)}% of income '
                f"(recommended: ~{format_number(t.needs_max_percentage)}%). Look for ways to optimize essential costs.",
                Priority.LOW,
            )
        )
    return insights


def _category_insights(current: PeriodStats, mom: MoMChanges, t: Thresholds) -> List[Insight]:
    insights = []
    for category, stats in current.category_breakdown.items():
        share = percent_of(stats.total, current.total_income)
        if share > t.category_warning_threshold:
            insights.append(
                Insight(
                    "warning",
                    category,
                    f"{category} spending is {format_fixed(share)}% of your income "
                    f"({stats.count} transactions). This may need attention.",
                    Priority.MEDIUM,
                )
            )

        growth = mom.category_changes.get(category, 0.0)
        if growth > t.mom_growth_warning:
            insights.append(
                Insight(
                    "warning",
                    category,
                    f"Your {category} expenses grew {format_number(growth)}% last month. "
                    "Consider limiting these purchases.",
                    Priority.MEDIUM,
                )
            )
    return insights


CONSCIOUS_SPENDING = Insight(
    "info",
    "Conscious Spending",
    'Review your top 3 expense categories and ask: "Do these align with my values?" '
    "Cut ruthlessly on low-value items, spend freely on high-value ones.",
    Priority.LOW,
)


def generate_insights(
    current: PeriodStats,
    last: PeriodStats,
    three_month_avg: ThreeMonthAverage,
    mom_changes: MoMChanges,
    thresholds: Optional[Thresholds] = None,
) -> List[Insight]:
    """
    Evaluate every insight rule and collect the ones that fire, in rule order:

    1. Savings-rate tier (exactly one)
    2. Lifestyle inflation: expenses growing faster than income
    3. Emergency fund coverage against the 3-month average expense
    4. 50/30/20 balance of needs and wants
    5. Per-category concentration and rapid growth
    6. Conscious spending reminder (always)
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    insights = [_savings_rate_insight(current, thresholds)]
    insights += _lifestyle_inflation_insights(mom_changes)
    insights += _emergency_fund_insights(current, three_month_avg, thresholds)
    insights += _spending_balance_insights(current, thresholds)
    insights += _category_insights(current, mom_changes, thresholds)
    insights.append(CONSCIOUS_SPENDING)
    return insights


def sort_insights(insights: List[Insight]) -> List[Insight]:
    """Most severe first; sorted() is stable so ties keep rule order"""
    return sorted(insights, key=lambda insight: PRIORITY_ORDER[insight.priority])
