"""Needs / wants / savings classification of expense categories"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from finance_insights.domain.models import SpendingType

NEEDS_KEYWORDS = (
    "groceries", "utilities", "rent", "healthcare", "medical", "insurance",
    "transportation", "fuel", "maintenance", "bills", "emi", "loan",
)

# Not used for matching: WANTS is the fallback bucket
WANTS_KEYWORDS = (
    "dining", "restaurant", "food", "entertainment", "movies", "shopping",
    "clothes", "travel", "vacation", "subscription", "streaming", "hobbies",
    "games", "sports", "gym",
)

SAVINGS_KEYWORDS = (
    "investment", "mutual fund", "sip", "stocks", "savings", "emergency",
    "retirement", "fd", "gold",
)

Rule = Tuple[Callable[[str], bool], SpendingType]


def contains_any(keywords: Iterable[str]) -> Callable[[str], bool]:
    """Predicate matching labels that contain any of the keywords"""
    keywords = tuple(keywords)
    return lambda label: any(keyword in label for keyword in keywords)


class CategoryClassifier:
    """
    Ordered (predicate, result) rules evaluated top-down against the lowercased
    category label. First match wins; labels matching no rule fall back to
    the default bucket.

    Matching is by substring, so "Rent" and "Parent care" both
    land in NEEDS, and a label matching both NEEDS and SAVINGS keywords
    resolves to NEEDS because that rule comes first.
    """

    def __init__(self, rules: Sequence[Rule], default: SpendingType = SpendingType.WANTS):
        self.rules: List[Rule] = list(rules)
        self.default = default

    def classify(self, category: Optional[str]) -> SpendingType:
        if not category:
            return self.default

        label = category.lower()
        for predicate, result in self.rules:
            if predicate(label):
                return result
        return self.default


default_classifier = CategoryClassifier(
    [
        (contains_any(NEEDS_KEYWORDS), SpendingType.NEEDS),
        (contains_any(SAVINGS_KEYWORDS), SpendingType.SAVINGS),
    ]
)


def classify_category(category: Optional[str]) -> SpendingType:
    """Classify a category label with the default keyword rules"""
    return default_classifier.classify(category)
