"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from finance_insights.domain.exceptions import InvalidTransactionDataError
from finance_insights.utils.date_utils import parse_date
from finance_insights.utils.numbers import parse_amount, round_half_up


class SpendingType(str, Enum):
    """50/30/20 bucket of an expense category"""

    NEEDS = "NEEDS"
    WANTS = "WANTS"
    SAVINGS = "SAVINGS"


class Priority(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Impact(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


INCOME = "income"
EXPENSE = "expense"
UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class Transaction:
    """Income or expense record supplied by the caller"""

    date: Optional[date]  # None when the source date could not be parsed
    amount: float  # absolute value
    entry_type: str  # "income" or "expense"
    category: Optional[str] = None
    is_saving: bool = False

    @classmethod
    def from_record(cls, record: Any) -> "Transaction":
        """
        Build a Transaction from a raw record (mapping with camelCase or
        snake_case keys). Malformed amounts become 0 and unparseable dates None.
        """
        if isinstance(record, Transaction):
            return record
        if not isinstance(record, Mapping):
            raise InvalidTransactionDataError(
                f"Transaction record must be a mapping, got {type(record).__name__}"
            )

        entry_type = record.get("entryType", record.get("entry_type"))
        # The feed stores the category label under "type"
        category = record.get("type") or record.get("category")
        is_saving = record.get("isSaving", record.get("is_saving"))

        return cls(
            date=parse_date(record.get("date")),
            amount=parse_amount(record.get("amount")),
            entry_type=str(entry_type).strip().lower() if entry_type is not None else "",
            category=str(category) if category else None,
            is_saving=is_saving is True or is_saving == "YES",
        )


@dataclass(frozen=True)
class CategoryStats:
    """Spend for one category within a period"""

    total: float
    count: int
    type: SpendingType


@dataclass(frozen=True)
class PeriodStats:
    """Summary statistics for one calendar month"""

    total_income: float = 0.0
    total_expense: float = 0.0
    total_savings: float = 0.0  # isSaving-flagged amounts
    net_savings: float = 0.0
    savings_rate: float = 0.0
    transaction_count: int = 0
    category_breakdown: Dict[str, CategoryStats] = field(default_factory=dict)
    needs_total: float = 0.0
    wants_total: float = 0.0
    savings_total: float = 0.0  # expenses classified as SAVINGS

    @property
    def needs_percentage(self) -> float:
        return self.needs_total / self.total_income * 100 if self.total_income > 0 else 0.0

    @property
    def wants_percentage(self) -> float:
        return self.wants_total / self.total_income * 100 if self.total_income > 0 else 0.0

    def ranked_categories(self) -> List[tuple]:
        """(category, stats) pairs by total spend, largest first; ties keep insertion order"""
        return sorted(self.category_breakdown.items(), key=lambda item: item[1].total, reverse=True)


@dataclass(frozen=True)
class MoMChanges:
    """Month-over-month percentage changes, current vs. last month"""

    income_change: float = 0.0
    expense_change: float = 0.0
    savings_change: float = 0.0
    category_changes: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ThreeMonthAverage:
    """Mean of the three months preceding the current one"""

    avg_income: float = 0.0
    avg_expense: float = 0.0
    avg_savings: float = 0.0
    avg_savings_rate: float = 0.0


@dataclass(frozen=True)
class Insight:
    type: str  # positive | warning | critical | info
    category: str
    message: str
    priority: Priority


@dataclass(frozen=True)
class Suggestion:
    action: str
    description: str
    impact: Impact


@dataclass(frozen=True)
class HealthBreakdown:
    savings_rate: int
    spending_balance: int
    consistency: int
    anomaly_control: int

    @property
    def total(self) -> int:
        return self.savings_rate + self.spending_balance + self.consistency + self.anomaly_control


@dataclass(frozen=True)
class HealthScore:
    """Composite 0-100 financial health score"""

    score: int
    breakdown: HealthBreakdown
    rating: str


@dataclass(frozen=True)
class TopCategory:
    category: str
    amount: float
    count: int
    type: SpendingType
    percentage_of_income: float
    month_over_month_change: float


@dataclass(frozen=True)
class PeriodLabels:
    current: str
    last_month: str
    last_3_months: str


@dataclass(frozen=True)
class InsightsReport:
    """Output of a successful analysis"""

    period: PeriodLabels
    current_month: PeriodStats
    last_month: PeriodStats
    three_month_average: ThreeMonthAverage
    mom_changes: MoMChanges
    top_categories: List[TopCategory]
    insights: List[Insight]
    suggestions: List[Suggestion]
    health_score: HealthScore
    user_id: Optional[str] = None

    success = True

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable report in the client's camelCase shape"""
        current, last = self.current_month, self.last_month
        avg, mom, health = self.three_month_average, self.mom_changes, self.health_score

        report: Dict[str, Any] = {"success": True}
        if self.user_id is not None:
            report["userId"] = self.user_id
        report.update(
            {
                "period": {
                    "current": self.period.current,
                    "lastMonth": self.period.last_month,
                    "last3Months": self.period.last_3_months,
                },
                "summary": {
                    "currentMonth": {
                        "income": current.total_income,
                        "expense": current.total_expense,
                        "savings": current.net_savings,
                        "savingsRate": current.savings_rate,
                        "explicitSavings": current.total_savings,
                        "transactions": current.transaction_count,
                    },
                    "lastMonth": {
                        "income": last.total_income,
                        "expense": last.total_expense,
                        "savings": last.net_savings,
                        "savingsRate": last.savings_rate,
                    },
                    "last3MonthsAverage": {
                        "avgIncome": avg.avg_income,
                        "avgExpense": avg.avg_expense,
                        "avgSavings": avg.avg_savings,
                        "avgSavingsRate": avg.avg_savings_rate,
                    },
                    "monthOverMonthChange": {
                        "incomeChange": mom.income_change,
                        "expenseChange": mom.expense_change,
                        "savingsChange": mom.savings_change,
                        "categoryChanges": dict(mom.category_changes),
                    },
                },
                "categoryInsights": {
                    "topCategories": [
                        {
                            "category": top.category,
                            "amount": top.amount,
                            "count": top.count,
                            "type": top.type.value,
                            "percentageOfIncome": top.percentage_of_income,
                            "monthOverMonthChange": top.month_over_month_change,
                        }
                        for top in self.top_categories
                    ],
                    "needsVsWants": {
                        "needs": current.needs_total,
                        "wants": current.wants_total,
                        "savings": current.savings_total,
                        "needsPercentage": round_half_up(current.needs_percentage, 1),
                        "wantsPercentage": round_half_up(current.wants_percentage, 1),
                        "savingsPercentage": current.savings_rate,
                    },
                },
                "trendHighlights": {
                    "incomeGrowth": mom.income_change,
                    "expenseGrowth": mom.expense_change,
                    "savingsGrowth": mom.savings_change,
                    "categoryTrends": dict(mom.category_changes),
                },
                "behavioralInsights": [
                    {
                        "type": insight.type,
                        "category": insight.category,
                        "message": insight.message,
                        "priority": insight.priority.value,
                    }
                    for insight in self.insights
                ],
                "actionableSuggestions": [
                    {
                        "action": suggestion.action,
                        "description": suggestion.description,
                        "impact": suggestion.impact.value,
                    }
                    for suggestion in self.suggestions
                ],
                "financialHealthScore": {
                    "score": health.score,
                    "breakdown": {
                        "savingsRate": health.breakdown.savings_rate,
                        "spendingBalance": health.breakdown.spending_balance,
                        "consistency": health.breakdown.consistency,
                        "anomalyControl": health.breakdown.anomaly_control,
                    },
                    "rating": health.rating,
                },
            }
        )
        return report


@dataclass(frozen=True)
class InsightsFailure:
    """Structured failure returned instead of a partial report"""

    message: str
    error: str

    success = False

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message, "error": self.error}
