"""Unit tests for actionable suggestion rules"""

from finance_insights.domain.aggregation import aggregate_period
from finance_insights.domain.models import Impact, MoMChanges, PeriodStats
from finance_insights.domain.suggestions import IMPACT_ORDER, generate_suggestions, sort_suggestions
from finance_insights.domain.thresholds import Thresholds


def _actions(suggestions):
    return [s.action for s in suggestions]


def test_empty_month_only_audits_subscriptions():
    suggestions = generate_suggestions(PeriodStats(), PeriodStats(), MoMChanges(), [])

    assert _actions(suggestions) == ["Audit Subscriptions"]
    assert suggestions[0].impact is Impact.MEDIUM


def test_income_only_month(make_transaction):
    current = aggregate_period([make_transaction("income", 100000)])

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(), [])

    assert _actions(suggestions) == ["Automate Savings", "Allocate Idle Cash", "Audit Subscriptions", "Start Investing"]
    assert "₹20000 (20%)" in suggestions[0].description
    assert "₹100000 unallocated" in suggestions[1].description


def test_none_thresholds_fall_back_to_defaults(make_transaction):
    current = aggregate_period([make_transaction("income", 100000)])

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(), [], thresholds=None)

    assert _actions(suggestions) == _actions(generate_suggestions(current, PeriodStats(), MoMChanges(), []))


def test_unstable_income_skips_automation(make_transaction):
    current = aggregate_period([make_transaction("income", 100000)])

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(income_change=-10.0), [])

    assert "Automate Savings" not in _actions(suggestions)


def test_top_wants_category(make_transaction):
    current = aggregate_period(
        [
            make_transaction("income", 100000),
            make_transaction("expense", 40000, "Shopping"),
            make_transaction("expense", 30000, "Rent"),
        ]
    )

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(income_change=50.0), [])

    assert _actions(suggestions) == [
        "Allocate Idle Cash",
        "Optimize Top Expense",
        "Audit Subscriptions",
        "Reduce Discretionary Spending",
    ]
    assert suggestions[1].description.startswith("Shopping is your #1 expense (₹40000)")
    assert "(₹8000)" in suggestions[3].description


def test_top_needs_category_not_flagged(make_transaction):
    current = aggregate_period(
        [
            make_transaction("income", 100000),
            make_transaction("expense", 40000, "Rent"),
            make_transaction("expense", 30000, "Shopping"),
        ]
    )

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(), [])

    assert "Optimize Top Expense" not in _actions(suggestions)


def test_idle_cash_threshold():
    at_limit = PeriodStats(total_income=100000, net_savings=10000)
    above = PeriodStats(total_income=100000, net_savings=10001)

    assert "Allocate Idle Cash" not in _actions(generate_suggestions(at_limit, PeriodStats(), MoMChanges(), []))
    assert "Allocate Idle Cash" in _actions(generate_suggestions(above, PeriodStats(), MoMChanges(), []))


def test_investing_needs_rate_above_excellent():
    at_limit = PeriodStats(savings_rate=35.0)
    assert "Start Investing" not in _actions(generate_suggestions(at_limit, PeriodStats(), MoMChanges(), []))

    relaxed = Thresholds().override(excellent_savings_rate=30)
    assert "Start Investing" in _actions(generate_suggestions(at_limit, PeriodStats(), MoMChanges(), [], relaxed))


def test_currency_symbol(make_transaction):
    current = aggregate_period([make_transaction("income", 5000)])

    suggestions = generate_suggestions(current, PeriodStats(), MoMChanges(), [], currency="$")

    assert "$1000 (20%)" in suggestions[0].description


def test_sort_suggestions_by_impact(make_transaction):
    current = aggregate_period([make_transaction("income", 100000)])
    ordered = sort_suggestions(generate_suggestions(current, PeriodStats(), MoMChanges(), []))

    assert _actions(ordered) == ["Automate Savings", "Start Investing", "Allocate Idle Cash", "Audit Subscriptions"]
    ranks = [IMPACT_ORDER[s.impact] for s in ordered]
    assert ranks == sorted(ranks)
