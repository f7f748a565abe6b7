"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable, Optional
from fastapi.testclient import TestClient
from finance_insights.api.main import create_app
from finance_insights.domain.models import Transaction


REFERENCE_DATE = date(2026, 1, 15)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def reference_date() -> date:
    """Mid-January so the trailing months cross into the previous year"""
    return REFERENCE_DATE


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for transactions dated relative to the reference month"""

    def _make(
        entry_type: str,
        amount: float,
        category: Optional[str] = None,
        on: date = REFERENCE_DATE,
        is_saving: bool = False,
    ) -> Transaction:
        return Transaction(date=on, amount=amount, entry_type=entry_type, category=category, is_saving=is_saving)

    return _make


@pytest.fixture
def sample_records() -> list[dict]:
    """Four months of raw records, as a client would send them"""
    records = []
    months = ["2025-10", "2025-11", "2025-12", "2026-01"]

    for month in months:
        # Monthly salary
        records.append({"date": f"{month}-01", "amount": 100000, "entryType": "income", "type": "Salary"})
        # Regular spending
        records.append({"date": f"{month}-03", "amount": 30000, "entryType": "expense", "type": "Rent"})
        records.append({"date": f"{month}-10", "amount": 8000, "entryType": "expense", "type": "Groceries"})
        records.append(
            {"date": f"{month}-12", "amount": 10000, "entryType": "expense", "type": "SIP", "isSaving": "YES"}
        )

    # Spending spike in the current month
    records.append({"date": "2026-01-20", "amount": 12000, "entryType": "expense", "type": "Dining"})
    return records
