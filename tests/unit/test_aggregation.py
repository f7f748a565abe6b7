"""Unit tests for monthly partitioning and period aggregation"""

import pytest
from datetime import date
from finance_insights.domain.aggregation import aggregate_period, partition_by_month
from finance_insights.domain.models import SpendingType, Transaction
from finance_insights.utils.date_utils import parse_date


def test_aggregate_income_and_expense(make_transaction):
    """Scenario B: needs/wants split and savings rate"""
    stats = aggregate_period(
        [
            make_transaction("expense", 30000, "Rent"),
            make_transaction("expense", 20000, "Movies"),
            make_transaction("income", 100000),
        ]
    )

    assert stats.total_income == 100000
    assert stats.total_expense == 50000
    assert stats.net_savings == 50000
    assert stats.savings_rate == 50.00
    assert stats.needs_total == 30000
    assert stats.wants_total == 20000
    assert stats.savings_total == 0
    assert stats.transaction_count == 3


def test_aggregate_income_only(make_transaction):
    """Scenario A: a single income transaction"""
    stats = aggregate_period([make_transaction("income", 100000)])

    assert stats.total_income == 100000
    assert stats.total_expense == 0
    assert stats.net_savings == 100000
    assert stats.savings_rate == 100.00


def test_aggregate_empty_period():
    stats = aggregate_period([])

    assert stats.total_income == 0
    assert stats.total_expense == 0
    assert stats.net_savings == 0
    assert stats.savings_rate == 0
    assert stats.transaction_count == 0
    assert stats.category_breakdown == {}


def test_savings_rate_zero_without_income(make_transaction):
    stats = aggregate_period([make_transaction("expense", 5000, "Rent")])

    assert stats.net_savings == -5000
    assert stats.savings_rate == 0


def test_savings_rate_rounded_to_two_decimals(make_transaction):
    stats = aggregate_period([make_transaction("income", 3000), make_transaction("expense", 1000, "Rent")])

    # 2000 / 3000 = 66.666...%
    assert stats.savings_rate == 66.67


def test_category_breakdown(make_transaction):
    stats = aggregate_period(
        [
            make_transaction("expense", 200, "Food"),
            make_transaction("expense", 300, "Food"),
            make_transaction("expense", 1000, "Mutual Fund"),
            make_transaction("expense", 50),
        ]
    )

    food = stats.category_breakdown["Food"]
    assert food.total == 500
    assert food.count == 2
    assert food.type is SpendingType.WANTS

    assert stats.category_breakdown["Mutual Fund"].type is SpendingType.SAVINGS
    assert stats.category_breakdown["Uncategorized"].total == 50
    assert stats.category_breakdown["Uncategorized"].type is SpendingType.WANTS
    assert stats.savings_total == 1000
    assert stats.wants_total == 550


def test_saving_flag_independent_of_entry_type(make_transaction):
    """totalSavings comes from the isSaving flag, savingsTotal from classification"""
    stats = aggregate_period(
        [
            make_transaction("income", 10000, is_saving=True),
            make_transaction("expense", 2000, "Gold", is_saving=True),
            make_transaction("expense", 500, "Shopping", is_saving=True),
        ]
    )

    assert stats.total_savings == 12500
    assert stats.savings_total == 2000


def test_amounts_use_absolute_value(make_transaction):
    stats = aggregate_period([make_transaction("expense", -750, "Rent"), make_transaction("income", -1000)])

    assert stats.total_expense == 750
    assert stats.total_income == 1000


def test_unknown_entry_type_counts_but_adds_no_totals(make_transaction):
    stats = aggregate_period([make_transaction("transfer", 999, "Rent", is_saving=True)])

    assert stats.total_income == 0
    assert stats.total_expense == 0
    assert stats.total_savings == 999
    assert stats.transaction_count == 1


def test_malformed_records_recovered():
    """Non-numeric amounts count as 0; 'YES' marks a saving; 'type' carries the category"""
    records = [
        {"date": "2026-01-02", "amount": "abc", "entryType": "expense", "type": "Rent"},
        {"date": "2026-01-03", "amount": float("nan"), "entryType": "income"},
        {"date": "2026-01-04", "amount": "1500.50", "entryType": "expense", "type": "SIP", "isSaving": "YES"},
        {"date": "2026-01-05", "amount": 100, "entryType": "expense", "category": "Dining"},
    ]
    stats = aggregate_period([Transaction.from_record(r) for r in records])

    assert stats.transaction_count == 4
    assert stats.total_income == 0
    assert stats.total_expense == 1600.50
    assert stats.total_savings == 1500.50
    assert stats.category_breakdown["Rent"].total == 0
    assert stats.category_breakdown["Rent"].count == 1
    assert "Dining" in stats.category_breakdown


def test_type_takes_precedence_over_category():
    txn = Transaction.from_record({"date": "2026-01-01", "amount": 1, "entryType": "expense", "type": "Rent", "category": "Food"})
    assert txn.category == "Rent"


def test_conservation_and_classification_totality(make_transaction):
    stats = aggregate_period(
        [
            make_transaction("income", 120000),
            make_transaction("income", 5000),
            make_transaction("expense", 30000, "Rent"),
            make_transaction("expense", 4500, "Dining"),
            make_transaction("expense", 7000, "Stocks"),
            make_transaction("expense", 1200),
        ]
    )

    assert stats.total_income - stats.total_expense == stats.net_savings
    assert stats.needs_total + stats.wants_total + stats.savings_total == pytest.approx(stats.total_expense)


def test_partition_crosses_year_boundary(make_transaction, reference_date):
    txns = [
        make_transaction("income", 1, on=date(2026, 1, 31)),
        make_transaction("income", 2, on=date(2025, 12, 1)),
        make_transaction("income", 3, on=date(2025, 11, 15)),
        make_transaction("income", 4, on=date(2025, 10, 31)),
        make_transaction("income", 5, on=date(2025, 9, 30)),  # too old
        make_transaction("income", 6, on=date(2025, 1, 10)),  # same month, wrong year
        make_transaction("income", 7, on=date(2026, 2, 1)),  # future month
    ]

    buckets = partition_by_month(txns, reference_date)

    assert [t.amount for t in buckets.current] == [1]
    assert [t.amount for t in buckets.last_month] == [2]
    assert [t.amount for t in buckets.two_months_ago] == [3]
    assert [t.amount for t in buckets.three_months_ago] == [4]


def test_partition_skips_unparseable_dates(reference_date):
    txns = [
        Transaction.from_record({"date": "not a date", "amount": 10, "entryType": "income"}),
        Transaction.from_record({"date": "2026-01-05T10:30:00Z", "amount": 20, "entryType": "income"}),
        Transaction.from_record({"amount": 30, "entryType": "income"}),
    ]

    buckets = partition_by_month(txns, reference_date)

    assert [t.amount for t in buckets.current] == [20]
    assert buckets.last_month == ()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1/15/2026", date(2026, 1, 15)),
        ("01/05/2026", date(2026, 1, 5)),
        ("12/31/2025, 3:04:05 PM", date(2025, 12, 31)),
        ("2026-01-05T10:30:00Z", date(2026, 1, 5)),
        ("15/1/2026", None),
    ],
)
def test_parse_date_accepts_locale_formats(raw, expected):
    assert parse_date(raw) == expected


def test_partition_places_locale_dates(reference_date):
    txns = [
        Transaction.from_record({"date": "1/15/2026", "amount": 10, "entryType": "income"}),
        Transaction.from_record({"date": "1/5/2026, 3:04:05 PM", "amount": 20, "entryType": "income"}),
        Transaction.from_record({"date": "12/20/2025", "amount": 30, "entryType": "income"}),
    ]

    buckets = partition_by_month(txns, reference_date)

    assert [t.amount for t in buckets.current] == [10, 20]
    assert [t.amount for t in buckets.last_month] == [30]
