"""Exception types raised by brewCOGS."""

from typing import Any, Dict, Optional


class BrewCOGSError(Exception):
    """Base class for brewCOGS errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class UnrecognizedUnit(BrewCOGSError):
    """Unit symbol is not in the unit table."""

    def __init__(self, unit: Any):
        super().__init__(
            code="UNRECOGNIZED_UNIT",
            message=f"Unrecognized unit: {unit!r}",
            details={"unit": unit}
        )
        self.unit = unit


class ValidationError(BrewCOGSError):
    """Product failed validation before save."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            details=details or {}
        )


class ProductNotFoundError(BrewCOGSError):
    """Product not found in the store."""

    def __init__(self, product_id: str):
        super().__init__(
            code="NOT_FOUND",
            message=f"Product not found: {product_id}",
            details={"resource": "product", "identifier": product_id}
        )


class StorageError(BrewCOGSError):
    """The product store could not be read or written."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="STORAGE_ERROR",
            message=message,
            details=details or {}
        )
