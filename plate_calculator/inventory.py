"""Loading of substitute plate inventories and bar tables.

A gym with a different plate set can describe it in a JSON file::

    {
        "plates": {"lb": [45, 35, 25, 10, 5], "kg": [5, 2.5, 1.25]},
        "bars": {"standard": 45, "womens": 35, "technique": 15},
        "tolerance": 0.01
    }

Every key is optional; anything left out keeps its default. Bar weights
are in pounds. Malformed files raise ``InvalidInventory`` here, at load
time, rather than during a calculation.
"""

import json
import logging
import os

from plate_calculator.config import CONFIG_PATH
from plate_calculator.errors import InvalidInventory
from plate_calculator.models import DEFAULT_PLATE_CONFIG, BarSpec, PlateConfig

logger = logging.getLogger(__name__)


def parse_plate_config(data: dict, base: PlateConfig = DEFAULT_PLATE_CONFIG) -> PlateConfig:
    """Build a PlateConfig from a decoded JSON mapping, filling gaps from ``base``."""
    if not isinstance(data, dict):
        raise InvalidInventory("Plate configuration must be a JSON object")

    plates = data.get("plates", {})
    if not isinstance(plates, dict):
        raise InvalidInventory("'plates' must map a unit to a list of plates")
    unknown_units = set(plates) - {"lb", "kg"}
    if unknown_units:
        raise InvalidInventory(f"Unsupported plate units: {', '.join(sorted(unknown_units))}")

    lb_plates = plates.get("lb", base.lb_plates)
    kg_plates = plates.get("kg", base.kg_plates)
    for name, inventory in (("lb", lb_plates), ("kg", kg_plates)):
        if not isinstance(inventory, (list, tuple)):
            raise InvalidInventory(f"{name} inventory must be a list of plates")

    bars = base.bars
    if "bars" in data:
        if not isinstance(data["bars"], dict):
            raise InvalidInventory("'bars' must map bar names to weights in pounds")
        bars = tuple(BarSpec(name, weight) for name, weight in data["bars"].items())

    return PlateConfig(
        lb_plates=tuple(lb_plates),
        kg_plates=tuple(kg_plates),
        bars=bars,
        tolerance=data.get("tolerance", base.tolerance),
    )


def load_plate_config(path: str) -> PlateConfig:
    """Load a plate configuration from a JSON file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInventory(f"Could not parse {path}: {e}") from e

    config = parse_plate_config(data)
    logger.info(
        "Loaded plate configuration from %s (lb=%s, kg=%s, bars=%s)",
        path, list(config.lb_plates), list(config.kg_plates), config.bar_types,
    )
    return config


def get_plate_config(path: str = CONFIG_PATH) -> PlateConfig:
    """Return the configuration at ``path`` if the file exists, else the defaults."""
    if path and os.path.exists(path):
        return load_plate_config(path)
    logger.debug("No plate configuration at %s, using defaults", path)
    return DEFAULT_PLATE_CONFIG


def plate_config_to_dict(config: PlateConfig) -> dict:
    """Inverse of parse_plate_config, in the same JSON layout."""
    return {
        "plates": {"lb": list(config.lb_plates), "kg": list(config.kg_plates)},
        "bars": config.bar_weights_lb,
        "tolerance": config.tolerance,
    }
