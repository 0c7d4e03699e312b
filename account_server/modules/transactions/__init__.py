"""Balance transaction services, models and validation rules."""

from .models import Transaction, TransactionResult, TransactionResultType, TransactionType
from .repository import TransactionRepository
from .service import TransactionService
from .validators import validate_amount, validate_cancel_balance, validate_use_balance

__all__ = [
    "Transaction",
    "TransactionRepository",
    "TransactionResult",
    "TransactionResultType",
    "TransactionService",
    "TransactionType",
    "validate_amount",
    "validate_cancel_balance",
    "validate_use_balance",
]
