"""Monthly partitioning and per-period aggregation of transactions"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from functools import reduce
from typing import Dict, Iterable, Sequence, Tuple

from finance_insights.domain.classifier import CategoryClassifier, default_classifier
from finance_insights.domain.models import (
    EXPENSE,
    INCOME,
    UNCATEGORIZED,
    CategoryStats,
    PeriodStats,
    SpendingType,
    Transaction,
)
from finance_insights.utils.date_utils import shift_month
from finance_insights.utils.numbers import round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeriodBuckets:
    """Transactions of the reference month and the three months before it"""

    current: Tuple[Transaction, ...]
    last_month: Tuple[Transaction, ...]
    two_months_ago: Tuple[Transaction, ...]
    three_months_ago: Tuple[Transaction, ...]


def partition_by_month(transactions: Iterable[Transaction], reference_date: date) -> PeriodBuckets:
    """
    Split transactions into calendar-month buckets relative to reference_date.

    A transaction lands in at most one bucket, chosen by the year and month of
    its date. Transactions outside the four months, or without a parseable
    date, are left out.
    """
    offsets = {shift_month(reference_date.year, reference_date.month, -i): i for i in range(4)}
    buckets: Dict[int, list] = {i: [] for i in range(4)}
    skipped = 0

    for txn in transactions:
        if txn.date is None:
            skipped += 1
            continue
        index = offsets.get((txn.date.year, txn.date.month))
        if index is not None:
            buckets[index].append(txn)

    if skipped:
        logger.debug("Skipped transactions without a valid date", extra={"skipped": skipped})

    return PeriodBuckets(
        current=tuple(buckets[0]),
        last_month=tuple(buckets[1]),
        two_months_ago=tuple(buckets[2]),
        three_months_ago=tuple(buckets[3]),
    )


def _add_expense(stats: PeriodStats, txn: Transaction, classifier: CategoryClassifier) -> PeriodStats:
    category = txn.category or UNCATEGORIZED
    breakdown = dict(stats.category_breakdown)

    entry = breakdown.get(category)
    if entry is None:
        # Classified once, on first sight of the category
        entry = CategoryStats(total=0.0, count=0, type=classifier.classify(category))
    breakdown[category] = CategoryStats(total=entry.total + txn.amount, count=entry.count + 1, type=entry.type)

    return replace(
        stats,
        total_expense=stats.total_expense + txn.amount,
        category_breakdown=breakdown,
        needs_total=stats.needs_total + (txn.amount if entry.type is SpendingType.NEEDS else 0.0),
        wants_total=stats.wants_total + (txn.amount if entry.type is SpendingType.WANTS else 0.0),
        savings_total=stats.savings_total + (txn.amount if entry.type is SpendingType.SAVINGS else 0.0),
    )


def _fold(stats: PeriodStats, txn: Transaction, classifier: CategoryClassifier) -> PeriodStats:
    if txn.entry_type == INCOME:
        stats = replace(stats, total_income=stats.total_income + txn.amount)
    elif txn.entry_type == EXPENSE:
        stats = _add_expense(stats, txn, classifier)

    # Savings flag is independent of entry type
    if txn.is_saving:
        stats = replace(stats, total_savings=stats.total_savings + txn.amount)

    return replace(stats, transaction_count=stats.transaction_count + 1)


def aggregate_period(
    transactions: Sequence[Transaction],
    classifier: CategoryClassifier = default_classifier,
) -> PeriodStats:
    """
    Reduce one month of transactions into PeriodStats.

    Requirements:
    - Income and expense totals use absolute amounts
    - Expenses are broken down by category and split into needs/wants/savings
    - isSaving-flagged amounts are totalled separately (total_savings)
    - savings_rate = net_savings / total_income * 100, 0 without income
    """
    stats = reduce(lambda acc, txn: _fold(acc, txn, classifier), transactions, PeriodStats())

    net_savings = stats.total_income - stats.total_expense
    savings_rate = round_half_up(net_savings / stats.total_income * 100, 2) if stats.total_income > 0 else 0.0

    return replace(stats, net_savings=net_savings, savings_rate=savings_rate)
