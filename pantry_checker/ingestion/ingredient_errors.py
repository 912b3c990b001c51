"""Structured error types for the pantry check pipeline.

Every failure mode has its own error type so callers (CLI, API) can react
precisely: unsupported unit conversions, invalid construction inputs and
malformed kitchen files.

PIPELINE ERROR FLOW:
    Kitchen file / request  → KitchenFileError
    Recipe construction     → ValidationFailureError
    Shortage computation    → UnsupportedConversionError
"""

from enum import Enum
from typing import Dict, Any, Optional


class PantryCheckErrorCode(Enum):
    """Enumeration of all pantry check error codes.

    Codes are string values for easy serialization and logging.
    """

    # Unit errors
    UNSUPPORTED_CONVERSION = "UNSUPPORTED_CONVERSION"

    # Input validation errors
    VALIDATION_FAILURE = "VALIDATION_FAILURE"

    # Kitchen definition errors
    KITCHEN_FILE_INVALID = "KITCHEN_FILE_INVALID"


class PantryCheckError(Exception):
    """Base exception for all pantry check errors.

    Attributes:
        code: PantryCheckErrorCode identifying the error type
        message: Human-readable error description
        context: Dictionary of relevant error context (units, field, etc.)
    """

    def __init__(
        self,
        code: PantryCheckErrorCode,
        message: str,
        context: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.context = context or {}

        super().__init__(f"[{code.value}] {message}")

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"code={self.code!r}, "
            f"message={self.message!r}, "
            f"context={self.context!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for API responses.

        Returns:
            Dictionary with error code, message, and context
        """
        return {
            "error_code": self.code.value,
            "message": self.message,
            "context": self.context
        }


class UnsupportedConversionError(PantryCheckError):
    """Raised when a quantity cannot be converted between two units.

    Only identical units and the fixed g/kg and ml/l pairs convert.
    Anything else (pcs to g, g to ml, unknown units) ends up here.

    Context includes:
        - from_unit: The unit the quantity is expressed in
        - to_unit: The requested unit
    """

    def __init__(self, from_unit: str, to_unit: str):
        super().__init__(
            code=PantryCheckErrorCode.UNSUPPORTED_CONVERSION,
            message=f"Cannot convert {from_unit} to {to_unit}",
            context={"from_unit": from_unit, "to_unit": to_unit}
        )

        self.from_unit = from_unit
        self.to_unit = to_unit


class ValidationFailureError(PantryCheckError):
    """Raised when construction inputs violate a precondition.

    Examples:
    - Recipe with zero or negative base servings

    Context includes:
        - field: Which field failed validation
        - value: The invalid value
        - reason: Why it failed
    """

    def __init__(self, field: str, value: Any, reason: str):
        context: Dict[str, Any] = {
            "field": field,
            "value": str(value) if value is not None else None,
            "reason": reason
        }

        message = f"Validation failed for '{field}': {reason}"
        if value is not None:
            message += f" (value: {value})"

        super().__init__(
            code=PantryCheckErrorCode.VALIDATION_FAILURE,
            message=message,
            context=context
        )

        self.field = field
        self.value = value
        self.reason = reason


class KitchenFileError(PantryCheckError):
    """Raised when a kitchen definition file is malformed.

    Context includes:
        - path: The file being loaded
        - reason: What is wrong with it
    """

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=PantryCheckErrorCode.KITCHEN_FILE_INVALID,
            message=f"Invalid kitchen file '{path}': {reason}",
            context={"path": path, "reason": reason}
        )

        self.path = path
        self.reason = reason
