"""Data models for the plate calculator."""

import math
from dataclasses import dataclass, field
from numbers import Real

from plate_calculator.config import (
    BAR_WEIGHTS_LB,
    PLATES_KG,
    PLATES_LB,
    ROUNDING_TOLERANCE_KG,
)
from plate_calculator.errors import InvalidInventory, UnknownBarType
from plate_calculator.units import bar_weight, kg_to_lbs, lbs_to_kg, to_reference_unit


def _check_inventory(name: str, plates) -> tuple:
    plates = tuple(plates)
    for plate in plates:
        if isinstance(plate, bool) or not isinstance(plate, Real):
            raise InvalidInventory(f"{name} inventory has a non-numeric plate: {plate!r}")
        if not plate > 0:
            raise InvalidInventory(f"{name} inventory has a non-positive plate: {plate!r}")
    for larger, smaller in zip(plates, plates[1:]):
        if not larger > smaller:
            raise InvalidInventory(
                f"{name} inventory must be strictly descending, got {larger!r} before {smaller!r}"
            )
    return plates


@dataclass(frozen=True)
class BarSpec:
    """A named bar variant with its weight in pounds."""
    name: str
    weight_lb: float

    @property
    def weight_kg(self) -> float:
        return lbs_to_kg(self.weight_lb)


@dataclass(frozen=True)
class PlateConfig:
    """Plate inventories and bar variants used by a calculation.

    Inventories are validated on construction: every denomination is a
    positive number and each inventory is strictly descending.
    """
    lb_plates: tuple = PLATES_LB
    kg_plates: tuple = PLATES_KG
    bars: tuple = tuple(BarSpec(name, weight) for name, weight in BAR_WEIGHTS_LB.items())
    tolerance: float = ROUNDING_TOLERANCE_KG

    def __post_init__(self):
        object.__setattr__(self, "lb_plates", _check_inventory("lb", self.lb_plates))
        object.__setattr__(self, "kg_plates", _check_inventory("kg", self.kg_plates))

        bars = tuple(self.bars)
        if not bars:
            raise InvalidInventory("At least one bar type is required")
        names = set()
        for bar in bars:
            if bar.name in names:
                raise InvalidInventory(f"Duplicate bar type: {bar.name!r}")
            names.add(bar.name)
            weight = bar.weight_lb
            if isinstance(weight, bool) or not isinstance(weight, Real) or not weight > 0:
                raise InvalidInventory(f"Bar {bar.name!r} must weigh more than zero, got {weight!r}")
        object.__setattr__(self, "bars", bars)

        tolerance = self.tolerance
        if (
            isinstance(tolerance, bool)
            or not isinstance(tolerance, Real)
            or not math.isfinite(tolerance)
            or tolerance < 0
        ):
            raise InvalidInventory(f"Tolerance must be a finite non-negative number, got {tolerance!r}")
        if self.kg_plates and tolerance >= self.kg_plates[-1]:
            raise InvalidInventory(
                f"Tolerance {tolerance!r} must be smaller than the lightest kg plate ({self.kg_plates[-1]!r})"
            )

    @property
    def bar_weights_lb(self) -> dict:
        return {bar.name: bar.weight_lb for bar in self.bars}

    @property
    def bar_types(self) -> list:
        return [bar.name for bar in self.bars]

    def bar_weight(self, bar_type: str) -> float:
        """Weight of ``bar_type`` in kilograms."""
        return bar_weight(bar_type, self.bar_weights_lb)

    def bar_weight_lb(self, bar_type: str) -> float:
        """Weight of ``bar_type`` in pounds, as configured."""
        bars = self.bar_weights_lb
        try:
            return bars[bar_type]
        except (KeyError, TypeError):
            raise UnknownBarType(bar_type, bars.keys()) from None


DEFAULT_PLATE_CONFIG = PlateConfig()


@dataclass(frozen=True)
class PlateDistribution:
    """Plates to load on each side of the bar.

    ``lb`` and ``kg`` keep the native denominations in selection order.
    ``per_side`` is the exact per-side target before decomposition.
    """
    lb: tuple = ()
    kg: tuple = ()
    per_side: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.lb and not self.kg

    @property
    def plate_count(self) -> int:
        """Plates on one side."""
        return len(self.lb) + len(self.kg)

    def loaded_per_side_kg(self) -> float:
        """Weight actually loaded on one side, in kilograms."""
        return sum(lbs_to_kg(p) for p in self.lb) + sum(self.kg)


@dataclass(frozen=True)
class LoadResult:
    """A complete calculation: inputs, target, plates and real weight."""
    one_rep_max: float
    unit: str
    percentage: float
    bar_type: str
    target_kg: float
    bar_kg: float
    distribution: PlateDistribution = field(default_factory=PlateDistribution)
    achieved_kg: float = 0.0

    @property
    def one_rep_max_kg(self) -> float:
        return to_reference_unit(self.one_rep_max, self.unit)

    @property
    def one_rep_max_lb(self) -> float:
        return kg_to_lbs(self.one_rep_max_kg)

    @property
    def target_lb(self) -> float:
        return kg_to_lbs(self.target_kg)

    @property
    def achieved_lb(self) -> float:
        return kg_to_lbs(self.achieved_kg)

    @property
    def bar_lb(self) -> float:
        return kg_to_lbs(self.bar_kg)

    @property
    def delta_kg(self) -> float:
        """Achieved minus requested weight. Negative when the plates fall short."""
        return self.achieved_kg - self.target_kg
