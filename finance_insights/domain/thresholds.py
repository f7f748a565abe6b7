"""Tunable thresholds for the insight, suggestion and health-score rules"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Thresholds:
    """
    Named limits used by the rule engines. All percentages are % of income
    unless stated otherwise.

    Insight rules:
    - target_savings_rate: healthy savings target (20%)
    - excellent_savings_rate: excellent savings performance (35%)
    - poor_savings_rate: below this the savings rate is critical (10%)
    - category_warning_threshold: single category share of income worth a warning (25%)
    - mom_growth_warning: category month-over-month growth worth a warning (30%)
    - emergency_fund_min / emergency_fund_ideal: months of expenses saved (3-6)
    - wants_max_percentage / needs_max_percentage: 50/30/20 rule limits

    Suggestion rules:
    - stable_income_change: |income change| below this counts as stable income
    - auto_transfer_share: share of income suggested for automated savings
    - idle_cash_share: net savings above this share of income counts as idle cash
    - wants_reduction_share: suggested cut of the current wants total

    Health score rules:
    - balance_needs_max / balance_wants_max / balance_min_savings_rate: each
      breach costs balance_penalty points of the spending-balance component
    - income_volatility_max / expense_volatility_max: each breach costs
      consistency_penalty points of the consistency component
    - category_spike: |category change| above this costs anomaly_penalty points
    """

    target_savings_rate: float = 20.0
    excellent_savings_rate: float = 35.0
    poor_savings_rate: float = 10.0
    category_warning_threshold: float = 25.0
    mom_growth_warning: float = 30.0
    emergency_fund_min: float = 3.0
    emergency_fund_ideal: float = 6.0
    wants_max_percentage: float = 30.0
    needs_max_percentage: float = 50.0

    stable_income_change: float = 10.0
    auto_transfer_share: float = 0.20
    idle_cash_share: float = 0.10
    wants_reduction_share: float = 0.20

    balance_needs_max: float = 50.0
    balance_wants_max: float = 30.0
    balance_min_savings_rate: float = 15.0
    balance_penalty: int = 10
    income_volatility_max: float = 20.0
    expense_volatility_max: float = 30.0
    consistency_penalty: int = 8
    category_spike: float = 50.0
    anomaly_penalty: int = 2

    def override(self, **changes: float) -> "Thresholds":
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)


DEFAULT_THRESHOLDS = Thresholds()
