"""Conversion between kilograms and pounds, and bar weight lookup.

Kilograms are the reference unit: every internal calculation is done in kg
and converted back only for display. The single conversion factor lives in
``config.LBS_PER_KG`` so that round trips agree at every call site.
"""

from plate_calculator.config import BAR_WEIGHTS_LB, LBS_PER_KG, UNIT_ALIASES
from plate_calculator.errors import UnknownBarType, UnknownUnit


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs / LBS_PER_KG


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg * LBS_PER_KG


def normalize_unit(unit: str) -> str:
    """Return the canonical unit name ("kg" or "lb") for ``unit``."""
    try:
        return UNIT_ALIASES[str(unit).strip().lower()]
    except KeyError:
        raise UnknownUnit(f"Unknown unit {unit!r}. Choose from: kg, lb") from None


def to_reference_unit(value: float, unit: str) -> float:
    """Convert ``value`` expressed in ``unit`` to kilograms."""
    if normalize_unit(unit) == "lb":
        return lbs_to_kg(value)
    return value


def from_reference_unit(value: float, unit: str) -> float:
    """Convert a value in kilograms to ``unit``."""
    if normalize_unit(unit) == "lb":
        return kg_to_lbs(value)
    return value


def bar_weight(bar_type: str, bars: dict = BAR_WEIGHTS_LB) -> float:
    """Weight in kilograms of the named bar variant.

    ``bars`` maps bar names to their weight in pounds.
    """
    try:
        weight_lb = bars[bar_type]
    except (KeyError, TypeError):
        raise UnknownBarType(bar_type, bars.keys()) from None
    return lbs_to_kg(weight_lb)
