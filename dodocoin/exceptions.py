"""
Custom exceptions for the coin ledger.
Provides specific exception types so routes can map them to HTTP errors.
"""


class CoinLedgerException(Exception):
    """Base exception for the coin ledger"""
    pass


class InsufficientCoinsException(CoinLedgerException):
    """Raised when a transaction would drive the balance below zero"""
    def __init__(self, balance: int, amount: int):
        self.balance = balance
        self.amount = amount
        super().__init__(
            f"Not enough coins: balance {balance}, transaction {amount}"
        )


class BonusAlreadyClaimedException(CoinLedgerException):
    """Raised when a once-per-day bonus is claimed again on the same day"""
    def __init__(self, bonus: str, day: str):
        self.bonus = bonus
        self.day = day
        super().__init__(f"{bonus} already claimed for {day}")


class UnknownTaskException(CoinLedgerException):
    """Raised when a task label is not in the catalog"""
    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Task '{label}' not found")


class ConfirmationRequiredException(CoinLedgerException):
    """Raised when a destructive operation is requested without confirmation"""
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' requires confirmation")


class StorageException(CoinLedgerException):
    """Raised when the key-value store fails"""
    def __init__(self, operation: str, details: str):
        self.operation = operation
        self.details = details
        super().__init__(f"Storage {operation} failed: {details}")


class ValidationException(CoinLedgerException):
    """Raised when data validation fails"""
    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error for {field}: {message}")
