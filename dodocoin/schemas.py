from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


class Transaction(BaseModel):
    """A recorded coin delta. `date` is an ISO-8601 UTC timestamp."""
    model_config = ConfigDict(frozen=True)

    label: str
    amount: int
    date: str


class TaskDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    coins: int


# Requests
class ApplyTaskRequest(BaseModel):
    label: str = Field(..., min_length=1)


class TransactionCreate(BaseModel):
    label: str = Field(..., min_length=1, max_length=200)
    amount: int

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, value: int) -> int:
        if value == 0:
            raise ValueError("amount must be non-zero")
        return value


# Responses
class BalanceResponse(BaseModel):
    balance: int


class TaskCatalogResponse(BaseModel):
    earn: List[TaskDefinition]
    spend: List[TaskDefinition]


class TransactionResponse(BaseModel):
    transaction: Transaction
    balance: int


class BonusResponse(BaseModel):
    granted: bool
    transaction: Optional[Transaction] = None
    balance: int


class WeeklySummary(BaseModel):
    earned: int = 0
    spent: int = 0  # Sum of negative amounts (<= 0)
    net: int = 0
    avg_per_day: float = 0.0


class DailyTotal(BaseModel):
    date: str  # YYYY-MM-DD
    total: int


class ChartResponse(BaseModel):
    points: List[int]
    path: str
    width: int
    height: int
