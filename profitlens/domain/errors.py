"""Domain exceptions."""


class ProfitLensError(Exception):
    """Base class for domain errors."""


class CurrencyMismatchError(ProfitLensError, ValueError):
    """Raised when Money values in different currencies are combined."""


class InvalidEntryError(ProfitLensError, ValueError):
    """Raised when a new expense or income fails entry validation."""


class ProtectedCategoryError(ProfitLensError):
    """Raised when deleting a default category."""


__all__ = [
    "ProfitLensError",
    "CurrencyMismatchError",
    "InvalidEntryError",
    "ProtectedCategoryError",
]
