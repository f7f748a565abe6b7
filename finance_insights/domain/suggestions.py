"""Actionable suggestion rules"""

from typing import List, Optional

from finance_insights.domain.classifier import CategoryClassifier, default_classifier
from finance_insights.domain.models import Impact, Insight, MoMChanges, PeriodStats, SpendingType, Suggestion
from finance_insights.domain.thresholds import DEFAULT_THRESHOLDS, Thresholds
from finance_insights.utils.numbers import format_number, percent_of

IMPACT_ORDER = {Impact.HIGH: 0, Impact.MEDIUM: 1, Impact.LOW: 2}


def generate_suggestions(
    current: PeriodStats,
    last: PeriodStats,
    mom_changes: MoMChanges,
    insights: List[Insight],
    thresholds: Optional[Thresholds] = None,
    classifier: CategoryClassifier = default_classifier,
    currency: str = "₹",
) -> List[Suggestion]:
    """
    Collect every suggestion whose rule fires, in rule order.

    Rules:
    - Stable income (|income change| < 10%): automate a 20%-of-income transfer
    - Net savings above 10% of income: allocate idle cash (zero-based budgeting)
    - Largest category is a WANTS category: cap and track it
    - Always: audit recurring subscriptions
    - Wants above 30% of income: cut wants by 20%
    - Savings rate above 35%: start index-fund SIP investing
    """
    t = thresholds or DEFAULT_THRESHOLDS
    suggestions = []
    income = current.total_income

    if abs(mom_changes.income_change) < t.stable_income_change and income > 0:
        transfer = format_number(income * t.auto_transfer_share, 0)
        suggestions.append(
            Suggestion(
                "Automate Savings",
                f"Your income is stable. Set up auto-transfer of {currency}{transfer} "
                f"({format_number(t.auto_transfer_share * 100)}%) to savings account on payday.",
                Impact.HIGH,
            )
        )

    if current.net_savings > income * t.idle_cash_share:
        suggestions.append(
            Suggestion(
                "Allocate Idle Cash",
                f"You have {currency}{format_number(current.net_savings, 0)} unallocated. "
                "Apply zero-based budgeting: assign purpose to every rupee (emergency fund, investments, goals).",
                Impact.MEDIUM,
            )
        )

    ranked = current.ranked_categories()
    if ranked:
        top_category, top_stats = ranked[0]
        if classifier.classify(top_category) is SpendingType.WANTS:
            suggestions.append(
                Suggestion(
                    "Optimize Top Expense",
                    f"{top_category} is your #1 expense ({currency}{format_number(top_stats.total, 0)}). "
                    "Set a monthly cap and track weekly to stay within budget.",
                    Impact.HIGH,
                )
            )

    suggestions.append(
        Suggestion(
            "Audit Subscriptions",
            "Review all recurring expenses (subscriptions, memberships). "
            "Cancel unused services to save 5-10% monthly.",
            Impact.MEDIUM,
        )
    )

    if percent_of(current.wants_total, income) > t.wants_max_percentage:
        reduction = format_number(current.wants_total * t.wants_reduction_share, 0)
        suggestions.append(
            Suggestion(
                "Reduce Discretionary Spending",
                f'Cut "Wants" by {format_number(t.wants_reduction_share * 100)}% ({currency}{reduction}) '
                "to align with 50/30/20 rule. Focus on high-impact cuts.",
                Impact.HIGH,
            )
        )

    if current.savings_rate > t.excellent_savings_rate:
        suggestions.append(
            Suggestion(
                "Start Investing",
                "You have strong savings habits. Consider starting SIP in index funds "
                "(Nifty 50/Sensex) for long-term wealth building.",
                Impact.HIGH,
            )
        )

    return suggestions


def sort_suggestions(suggestions: List[Suggestion]) -> List[Suggestion]:
    """Highest impact first, ties keep rule order"""
    return sorted(suggestions, key=lambda suggestion: IMPACT_ORDER[suggestion.impact])
