"""
Pydantic schemas for transactions and the aggregated report.
Field aliases on the report match the JSON contract consumed by the frontend.
"""
from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

AccountType = Literal["checking", "credit"]

ACCOUNT_TYPES: Tuple[str, ...] = ("checking", "credit")


class Transaction(BaseModel):
    """One normalized statement line item."""
    model_config = ConfigDict(frozen=True)
    
    date: str = Field(..., description="Date label exactly as found in the statement")
    description: str
    amount: float = Field(..., description="Signed amount; negative is an expense")
    category: str = Field(..., min_length=1)
    service: Optional[str] = None


class ProcessedData(BaseModel):
    """
    Aggregated report for one uploaded statement.
    Built once per upload and never mutated afterwards.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    total: float = Field(..., ge=0.0, description="Sum of expense magnitudes")
    transactions: Tuple[Transaction, ...]
    categories: Dict[str, Tuple[Transaction, ...]]
    services: Tuple[str, ...]
    number_of_transactions: int = Field(..., ge=0, alias="numberOfTransactions")
    account_type: AccountType = Field(..., alias="accountType")
    
    def to_response(self) -> Dict[str, Any]:
        """Dump with JSON field names, omitting undetected services."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationResult(BaseModel):
    """Outcome of the upload validator."""
    valid: bool
    error: Optional[str] = None
