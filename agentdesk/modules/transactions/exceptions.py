"""Transaction domain specific exceptions."""


class TransactionError(Exception):
    """Base class for transaction domain errors."""


class TransactionNotFoundError(TransactionError):
    """Raised when the requested transaction cannot be found."""


class TransactionValidationError(TransactionError):
    """Raised when a transaction payload is rejected before touching the store."""


class UnknownAgentError(TransactionValidationError):
    """Raised when a transaction references an agent that does not exist."""
