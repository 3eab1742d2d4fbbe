"""Domain layer for transactions and the listing snapshot."""

from .exceptions import (
    TransactionError,
    TransactionNotFoundError,
    TransactionValidationError,
    UnknownAgentError,
)
from .models import ListingSnapshot, Transaction, TransactionInput, TransactionRow
from .service import TransactionService

__all__ = [
    "ListingSnapshot",
    "Transaction",
    "TransactionError",
    "TransactionInput",
    "TransactionNotFoundError",
    "TransactionRow",
    "TransactionService",
    "TransactionValidationError",
    "UnknownAgentError",
]
