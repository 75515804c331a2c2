"""
Ledger HTTP routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from typing import List

from dodocoin.auth import verify_api_key
from dodocoin.constants import CHART_WIDTH, CHART_HEIGHT
from dodocoin.database import get_db
from dodocoin.exceptions import (
    BonusAlreadyClaimedException,
    ConfirmationRequiredException,
    InsufficientCoinsException,
    UnknownTaskException,
)
from dodocoin.schemas import (
    ApplyTaskRequest,
    BalanceResponse,
    BonusResponse,
    ChartResponse,
    DailyTotal,
    TaskCatalogResponse,
    Transaction,
    TransactionCreate,
    TransactionResponse,
    WeeklySummary,
)
from dodocoin.services.catalog_service import TaskCatalog
from dodocoin.services.date_service import DateService
from dodocoin.services.ledger_service import Ledger
from dodocoin.services.storage_service import DatabaseStore
from dodocoin.services import stats_service

router = APIRouter(prefix="/api", tags=["ledger"], dependencies=[Depends(verify_api_key)])


def load_ledger(db: Session = Depends(get_db)) -> Ledger:
    """Load the ledger without granting anything."""
    return Ledger(DatabaseStore(db))


def get_ledger(ledger: Ledger = Depends(load_ledger)) -> Ledger:
    """Load the ledger and grant today's daily bonus, as on every app load."""
    ledger.grant_daily_bonus(DateService.today())
    return ledger


def get_catalog() -> TaskCatalog:
    return TaskCatalog()


def _require_confirmation(confirm: bool, operation: str) -> None:
    if not confirm:
        raise HTTPException(status_code=400, detail=str(ConfirmationRequiredException(operation)))


@router.get("/balance", response_model=BalanceResponse)
def get_balance(ledger: Ledger = Depends(get_ledger)):
    """Get current balance."""
    return {"balance": ledger.balance}


@router.get("/tasks", response_model=TaskCatalogResponse)
def get_tasks(catalog: TaskCatalog = Depends(get_catalog)):
    """Get earn and spend tasks."""
    return {"earn": catalog.earn_tasks, "spend": catalog.spend_tasks}


@router.post("/tasks/apply", response_model=TransactionResponse)
def apply_task(
    request: ApplyTaskRequest,
    ledger: Ledger = Depends(get_ledger),
    catalog: TaskCatalog = Depends(get_catalog)
):
    """Apply a catalog task by label."""
    try:
        task = catalog.find(request.label)
        transaction = ledger.apply_task(task)
    except UnknownTaskException as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InsufficientCoinsException as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"transaction": transaction, "balance": ledger.balance}


@router.post("/transactions", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(request: TransactionCreate, ledger: Ledger = Depends(get_ledger)):
    """Apply a custom transaction."""
    try:
        transaction = ledger.apply_transaction(request.label, request.amount)
    except InsufficientCoinsException as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"transaction": transaction, "balance": ledger.balance}


@router.get("/history", response_model=List[Transaction])
def get_history(ledger: Ledger = Depends(get_ledger)):
    """Get transactions, most recent first."""
    return list(ledger.history)


@router.delete("/history", status_code=status.HTTP_204_NO_CONTENT)
def clear_history(
    confirm: bool = Query(False),
    ledger: Ledger = Depends(get_ledger)
):
    """Clear all history (requires confirm=true)."""
    _require_confirmation(confirm, "clear_history")
    ledger.clear_history()


@router.post("/reset", response_model=BalanceResponse)
def reset_balance(
    confirm: bool = Query(False),
    ledger: Ledger = Depends(get_ledger)
):
    """Reset balance to 0 (requires confirm=true)."""
    _require_confirmation(confirm, "reset")
    ledger.reset()
    return {"balance": ledger.balance}


@router.post("/bonus/daily", response_model=BonusResponse)
def claim_daily_bonus(ledger: Ledger = Depends(load_ledger)):
    """Grant the daily bonus if not granted today."""
    transaction = ledger.grant_daily_bonus(DateService.today())
    return {
        "granted": transaction is not None,
        "transaction": transaction,
        "balance": ledger.balance
    }


@router.post("/bonus/end-of-day", response_model=BonusResponse)
def claim_end_of_day_bonus(ledger: Ledger = Depends(get_ledger)):
    """Claim the end-of-day bonus (once per day)."""
    try:
        transaction = ledger.grant_end_of_day_bonus(DateService.today())
    except BonusAlreadyClaimedException as e:
        raise HTTPException(status_code=409, detail=str(e))
    return {"granted": True, "transaction": transaction, "balance": ledger.balance}


@router.get("/summary/weekly", response_model=WeeklySummary)
def get_weekly_summary(ledger: Ledger = Depends(get_ledger)):
    """Earned, spent and net over the last 7 days."""
    return stats_service.weekly_summary(ledger.history, DateService.now())


@router.get("/summary/daily", response_model=List[DailyTotal])
def get_daily_totals(ledger: Ledger = Depends(get_ledger)):
    """Net amount per day, most recent first."""
    return stats_service.daily_totals(ledger.history)


@router.get("/chart", response_model=ChartResponse)
def get_chart(ledger: Ledger = Depends(get_ledger)):
    """Balance over time."""
    points = stats_service.running_balance_points(ledger.history)
    return {
        "points": points,
        "path": stats_service.balance_chart_path(points),
        "width": CHART_WIDTH,
        "height": CHART_HEIGHT
    }
