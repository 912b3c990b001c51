"""Unit handling and error types."""

from pantry_checker.ingestion.units import (
    CanonicalUnit,
    UNIT_SYNONYMS,
    CONVERSION_FACTORS,
    normalize_unit,
    convert_quantity,
    format_quantity,
)

from pantry_checker.ingestion.ingredient_errors import (
    PantryCheckError,
    PantryCheckErrorCode,
    UnsupportedConversionError,
    ValidationFailureError,
    KitchenFileError,
)

__all__ = [
    # Units
    "CanonicalUnit",
    "UNIT_SYNONYMS",
    "CONVERSION_FACTORS",
    "normalize_unit",
    "convert_quantity",
    "format_quantity",
    # Error types
    "PantryCheckError",
    "PantryCheckErrorCode",
    "UnsupportedConversionError",
    "ValidationFailureError",
    "KitchenFileError",
]
