"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Optional, Union


class TransactionIn(BaseModel):
    """
    Single transaction as stored by the client. Values are passed to the
    engine as-is: malformed amounts count as 0 and unparseable dates are skipped.
    """

    model_config = ConfigDict(populate_by_name=True)

    date: Optional[str] = None
    amount: Union[float, str, None] = None
    entry_type: Optional[str] = Field(None, alias="entryType", description="income or expense")
    category: Optional[str] = None
    type: Optional[str] = Field(None, description="Category label (alias of category)")
    is_saving: Union[bool, str, None] = Field(None, alias="isSaving", description="true or 'YES'")


class InsightsRequest(BaseModel):
    """Request body for POST /v1/insights"""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId", description="User identifier")
    reference_date: Optional[date] = Field(None, alias="referenceDate", description="Defaults to today")
    transactions: List[TransactionIn] = Field(default_factory=list)


class ClassificationResponse(BaseModel):
    """Response for GET /v1/classify"""

    category: Optional[str]
    type: str
