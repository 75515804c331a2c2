"""
Ledger service - Business logic for the coin balance and transaction history.
Does NOT know about the storage medium (receives a KeyValueStore).
"""
import json
import logging
from datetime import date
from typing import List, Optional, Tuple

from pydantic import ValidationError

from dodocoin.constants import (
    BALANCE_KEY,
    HISTORY_KEY,
    DAILY_BONUS_KEY,
    END_OF_DAY_BONUS_KEY,
    DAILY_BONUS_AMOUNT,
    DAILY_BONUS_LABEL,
    END_OF_DAY_BONUS_AMOUNT,
    END_OF_DAY_BONUS_LABEL,
)
from dodocoin.exceptions import BonusAlreadyClaimedException, InsufficientCoinsException
from dodocoin.schemas import TaskDefinition, Transaction
from dodocoin.services.date_service import DateService
from dodocoin.services.storage_service import KeyValueStore

logger = logging.getLogger("dodocoin.ledger")


class Ledger:
    """
    Balance and transaction history kept consistent in a key-value store.

    History is ordered most-recent-first. Every mutation persists both the
    balance and the history before returning.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store
        self._balance = self._load_balance()
        self._history: List[Transaction] = self._load_history()

        if self._history and not self.is_consistent():
            logger.warning(
                f"Stored balance {self._balance} differs from history sum "
                f"{sum(t.amount for t in self._history)}"
            )

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def history(self) -> Tuple[Transaction, ...]:
        return tuple(self._history)

    @property
    def daily_bonus_day(self) -> Optional[str]:
        return self.store.load(DAILY_BONUS_KEY)

    @property
    def end_of_day_bonus_day(self) -> Optional[str]:
        return self.store.load(END_OF_DAY_BONUS_KEY)

    def is_consistent(self) -> bool:
        """True when the balance equals the sum of history amounts"""
        return self._balance == sum(t.amount for t in self._history)

    def apply_transaction(
        self,
        label: str,
        amount: int,
        timestamp: Optional[str] = None
    ) -> Transaction:
        """
        Apply a signed coin delta.

        Args:
            label: Description shown in history
            amount: Signed coin delta
            timestamp: ISO-8601 timestamp (defaults to now)

        Returns:
            The recorded transaction

        Raises:
            InsufficientCoinsException: If the balance would go below zero.
                Balance and history are left unchanged.
        """
        if self._balance + amount < 0:
            logger.warning(f"Rejected '{label}' ({amount}): balance is {self._balance}")
            raise InsufficientCoinsException(self._balance, amount)

        return self._record(label, amount, timestamp)

    def apply_task(self, task: TaskDefinition, timestamp: Optional[str] = None) -> Transaction:
        """Apply a catalog task"""
        return self.apply_transaction(task.label, task.coins, timestamp)

    def grant_daily_bonus(self, today: date, timestamp: Optional[str] = None) -> Optional[Transaction]:
        """
        Grant the daily bonus once per calendar day.

        Returns:
            The bonus transaction, or None if already granted today
        """
        day = today.isoformat()
        if self.store.load(DAILY_BONUS_KEY) == day:
            return None

        transaction = self._record(DAILY_BONUS_LABEL, DAILY_BONUS_AMOUNT, timestamp)
        self.store.save(DAILY_BONUS_KEY, day)
        logger.info(f"Daily bonus granted for {day}")
        return transaction

    def grant_end_of_day_bonus(self, today: date, timestamp: Optional[str] = None) -> Transaction:
        """
        Grant the end-of-day bonus once per calendar day.

        Raises:
            BonusAlreadyClaimedException: If already claimed today
        """
        day = today.isoformat()
        if self.store.load(END_OF_DAY_BONUS_KEY) == day:
            raise BonusAlreadyClaimedException(END_OF_DAY_BONUS_LABEL, day)

        transaction = self._record(END_OF_DAY_BONUS_LABEL, END_OF_DAY_BONUS_AMOUNT, timestamp)
        self.store.save(END_OF_DAY_BONUS_KEY, day)
        logger.info(f"End of day bonus granted for {day}")
        return transaction

    def reset(self) -> None:
        """Set the balance to zero and forget the daily bonus. History is kept."""
        self._balance = 0
        self.store.save(BALANCE_KEY, "0")
        self.store.remove(DAILY_BONUS_KEY)
        logger.info("Balance reset to 0")

    def clear_history(self) -> None:
        """Empty the history. The balance is kept."""
        self._history = []
        self.store.remove(HISTORY_KEY)
        logger.info("History cleared")

    def _record(self, label: str, amount: int, timestamp: Optional[str]) -> Transaction:
        transaction = Transaction(
            label=label,
            amount=amount,
            date=timestamp or DateService.to_timestamp()
        )
        self._history.insert(0, transaction)
        self._balance += amount
        self._persist()
        logger.info(f"Applied '{label}' ({amount:+d}), balance {self._balance}")
        return transaction

    def _persist(self) -> None:
        self.store.save(BALANCE_KEY, str(self._balance))
        self.store.save(
            HISTORY_KEY,
            json.dumps([t.model_dump() for t in self._history], ensure_ascii=False)
        )

    def _load_balance(self) -> int:
        raw = self.store.load(BALANCE_KEY)
        if raw is None:
            return 0
        try:
            return int(raw)
        except ValueError:
            logger.warning(f"Ignoring unreadable balance {raw!r}")
            return 0

    def _load_history(self) -> List[Transaction]:
        raw = self.store.load(HISTORY_KEY)
        if not raw:
            return []
        try:
            items = json.loads(raw)
            if not isinstance(items, list):
                raise TypeError("history is not a list")
            return [Transaction.model_validate(item) for item in items]
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable history: {e}")
            return []
