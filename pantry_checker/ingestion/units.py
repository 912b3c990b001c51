"""Unit normalization, conversion and quantity display.

DESIGN DECISIONS:
- Fixed synonym table maps user spellings to five canonical units
- Unknown units pass through (lowercased, trimmed) instead of failing
- Conversion is a static lookup keyed by (from, to) canonical pairs
- Cross-category conversions (mass/volume/count) RAISE, no guessing
"""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Dict, Tuple

from pantry_checker.ingestion.ingredient_errors import UnsupportedConversionError


class CanonicalUnit(str, Enum):
    """Canonical short-form units an Ingredient stores after construction."""

    G = "g"
    KG = "kg"
    ML = "ml"
    L = "l"
    PCS = "pcs"


# ============================================================================
# UNIT SYNONYMS
# ============================================================================
#
# Accepted spellings → canonical unit. Lookup happens after trimming and
# lowercasing, so "  Grams " and "GRAMS" both resolve to "g".
# ============================================================================

UNIT_SYNONYMS: Dict[str, CanonicalUnit] = {
    "grams": CanonicalUnit.G,
    "gram": CanonicalUnit.G,
    "g": CanonicalUnit.G,
    "kilograms": CanonicalUnit.KG,
    "kg": CanonicalUnit.KG,
    "milliliters": CanonicalUnit.ML,
    "ml": CanonicalUnit.ML,
    "liters": CanonicalUnit.L,
    "l": CanonicalUnit.L,
    "pieces": CanonicalUnit.PCS,
    "pcs": CanonicalUnit.PCS,
}


# ============================================================================
# CONVERSION TABLE
# ============================================================================
#
# (from, to) → (multiplier, divisor). Stored as a ratio rather than a single
# float so 500 ml → l computes 500 / 1000 exactly instead of 500 * 0.001.
# ============================================================================

CONVERSION_FACTORS: Dict[Tuple[str, str], Tuple[float, float]] = {
    (CanonicalUnit.G.value, CanonicalUnit.KG.value): (1.0, 1000.0),
    (CanonicalUnit.KG.value, CanonicalUnit.G.value): (1000.0, 1.0),
    (CanonicalUnit.ML.value, CanonicalUnit.L.value): (1.0, 1000.0),
    (CanonicalUnit.L.value, CanonicalUnit.ML.value): (1000.0, 1.0),
}


def normalize_unit(unit: str) -> str:
    """Map a unit spelling to its canonical form.

    Args:
        unit: Raw unit string (e.g., " Kilograms")

    Returns:
        Canonical unit ("kg"), or the trimmed, lowercased input if unknown
    """
    cleaned = unit.strip().lower()
    canonical = UNIT_SYNONYMS.get(cleaned)
    if canonical is None:
        return cleaned
    return canonical.value


def convert_quantity(quantity: float, from_unit: str, to_unit: str) -> float:
    """Express a quantity in another unit.

    Args:
        quantity: Amount in from_unit
        from_unit: Canonical unit of the quantity
        to_unit: Requested unit

    Returns:
        Quantity in to_unit (unchanged when the units are equal)

    Raises:
        UnsupportedConversionError: If the pair is neither equal nor in
            CONVERSION_FACTORS
    """
    if from_unit == to_unit:
        return quantity

    factor = CONVERSION_FACTORS.get((from_unit, to_unit))
    if factor is None:
        raise UnsupportedConversionError(from_unit=from_unit, to_unit=to_unit)

    multiplier, divisor = factor
    return quantity * multiplier / divisor


def format_quantity(quantity: float) -> str:
    """Render a quantity with at most two decimals, trailing zeros trimmed.

    Halves round away from zero (2.345 → "2.35", 1.5 → "1.5", 750.0 → "750").
    """
    if not math.isfinite(quantity):
        return str(quantity)

    value = Decimal(str(quantity))
    # Digits before the point, two decimals, one for a rounding carry
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 4)
        rounded = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
