"""Plate selection for a target barbell load.

The target is decomposed greedily, one side of the bar at a time:

1. Subtract the bar weight from the target (never below zero) and halve it
2. Pound plates, heaviest first: add a plate while it still fits in the
   remaining per-side weight
3. Kilogram plates, heaviest first, on what is left: same loop, but a plate
   counts as fitting when it is at most ``tolerance`` (0.01 kg) too heavy.
   This absorbs the float drift left by the pound-to-kilogram conversions.

Pound plates always go first, on the inside of the stack. The order is
fixed: the result is reproducible, not optimal.
All arithmetic is in kilograms.
"""

import logging
import math

from plate_calculator.config import DEFAULT_BAR_TYPE, MAX_PLATES_PER_SIDE, PERCENTAGE_PRESETS
from plate_calculator.errors import TooManyPlates
from plate_calculator.models import (
    DEFAULT_PLATE_CONFIG,
    LoadResult,
    PlateConfig,
    PlateDistribution,
)
from plate_calculator.units import normalize_unit, to_reference_unit

logger = logging.getLogger(__name__)


def _coerce_number(value) -> float:
    """Parse a user-supplied number; anything missing or unparseable is 0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _greedy_pass(
    remaining: float,
    plates: tuple,
    unit: str,
    tolerance: float = 0.0,
    limit: int = MAX_PLATES_PER_SIDE,
):
    """Pick plates from one inventory. Returns (picked, remaining).

    Raises TooManyPlates when more than ``limit`` plates would be picked.
    """
    picked = []
    for plate in plates:
        plate_kg = to_reference_unit(plate, unit)
        if (remaining + tolerance) / plate_kg >= limit - len(picked) + 1:
            raise TooManyPlates(
                f"{remaining:.1f} kg per side needs more than {limit} plates"
            )
        while remaining >= plate_kg - tolerance:
            picked.append(plate)
            remaining -= plate_kg
    return tuple(picked), remaining


def compute_target(one_rep_max, unit: str, percentage) -> float:
    """Target weight in kilograms for ``percentage`` of a one-rep max.

    A missing or unparseable one-rep max means nothing to compute yet and
    gives 0. The percentage is not clamped.
    """
    unit = normalize_unit(unit)
    one_rep_max = _coerce_number(one_rep_max)
    if not one_rep_max:
        return 0.0
    return to_reference_unit(one_rep_max, unit) * _coerce_number(percentage) / 100


def distribute_plates(
    target_weight,
    bar_type: str = DEFAULT_BAR_TYPE,
    config: PlateConfig = DEFAULT_PLATE_CONFIG,
) -> PlateDistribution:
    """Plates per side to approach ``target_weight`` (kg) on the given bar.

    Raises UnknownBarType before doing any work if the bar is not configured,
    and TooManyPlates when a side would need more than MAX_PLATES_PER_SIDE plates.
    """
    bar_kg = config.bar_weight(bar_type)
    target = _coerce_number(target_weight)

    load = max(0.0, target - bar_kg)
    per_side = load / 2

    lb_plates, remaining = _greedy_pass(per_side, config.lb_plates, "lb")
    kg_plates, remaining = _greedy_pass(
        remaining, config.kg_plates, "kg", config.tolerance,
        limit=MAX_PLATES_PER_SIDE - len(lb_plates),
    )

    logger.debug(
        "Distributed %.3f kg on %s bar: per side %.3f kg -> lb=%s kg=%s (left %.4f kg)",
        target, bar_type, per_side, list(lb_plates), list(kg_plates), remaining,
    )
    return PlateDistribution(lb=lb_plates, kg=kg_plates, per_side=per_side)


def achieved_weight(
    distribution: PlateDistribution,
    bar_type: str = DEFAULT_BAR_TYPE,
    config: PlateConfig = DEFAULT_PLATE_CONFIG,
) -> float:
    """Total weight in kilograms of the bar loaded with ``distribution`` on both sides."""
    return config.bar_weight(bar_type) + 2 * distribution.loaded_per_side_kg()


def calculate_load(
    one_rep_max,
    unit: str,
    percentage,
    bar_type: str = DEFAULT_BAR_TYPE,
    config: PlateConfig = DEFAULT_PLATE_CONFIG,
) -> LoadResult:
    """Run the whole calculation: target, plates and the weight they really make."""
    bar_kg = config.bar_weight(bar_type)
    target = compute_target(one_rep_max, unit, percentage)
    distribution = distribute_plates(target, bar_type, config)
    return LoadResult(
        one_rep_max=_coerce_number(one_rep_max),
        unit=normalize_unit(unit),
        percentage=_coerce_number(percentage),
        bar_type=bar_type,
        target_kg=target,
        bar_kg=bar_kg,
        distribution=distribution,
        achieved_kg=achieved_weight(distribution, bar_type, config),
    )


def percentage_table(
    one_rep_max,
    unit: str,
    bar_type: str = DEFAULT_BAR_TYPE,
    percentages=PERCENTAGE_PRESETS,
    config: PlateConfig = DEFAULT_PLATE_CONFIG,
) -> list:
    """One LoadResult per percentage, in the order given."""
    return [calculate_load(one_rep_max, unit, pct, bar_type, config) for pct in percentages]


def format_plate(plate) -> str:
    """Render a denomination without a trailing ``.0``."""
    return f"{plate:g}"


def format_plates(distribution: PlateDistribution) -> str:
    """One-line summary of the plates on one side."""
    parts = []
    if distribution.lb:
        parts.append(", ".join(f"{format_plate(p)} lb" for p in distribution.lb))
    if distribution.kg:
        parts.append(", ".join(f"{format_plate(p)} kg" for p in distribution.kg))
    if not parts:
        return "Bar only"
    return " + ".join(parts)


def format_load_result(result: LoadResult) -> str:
    """Format a calculation for display."""
    if result.unit == "kg":
        converted = f"{result.one_rep_max_lb:.1f} lb"
    else:
        converted = f"{result.one_rep_max_kg:.1f} kg"
    dist = result.distribution

    lines = [
        f"1RM:       {format_plate(result.one_rep_max)} {result.unit} ({converted})",
        f"Target:    {result.target_kg:.1f} kg ({result.target_lb:.1f} lb) at {format_plate(result.percentage)}%",
        f"Real:      {result.achieved_kg:.1f} kg ({result.achieved_lb:.1f} lb), "
        f"delta {result.delta_kg:+.1f} kg",
        f"Bar:       {result.bar_type} ({result.bar_lb:.0f} lb / {result.bar_kg:.1f} kg)",
        "",
        "Per side:",
    ]
    if dist.lb:
        lines.append(f"  lb plates: {', '.join(format_plate(p) for p in dist.lb)}")
    if dist.kg:
        lines.append(f"  kg plates: {', '.join(format_plate(p) for p in dist.kg)}")
    if dist.is_empty:
        lines.append("  Bar only")
    return "\n".join(lines)
