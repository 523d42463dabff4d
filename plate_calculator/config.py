"""Application configuration and constants."""

import os

# Unit conversion (kilograms are the reference unit)
LBS_PER_KG = 2.20462
UNITS = ("kg", "lb")
UNIT_ALIASES = {
    "kg": "kg",
    "kgs": "kg",
    "lb": "lb",
    "lbs": "lb",
}

# Plate inventories, strictly descending
PLATES_LB = (45, 35, 25, 15, 10)  # Loaded first
PLATES_KG = (2.5, 2, 1.5, 1, 0.5)  # Fine adjustment

# Bar weights in pounds
BAR_WEIGHTS_LB = {
    "standard": 45,
    "womens": 35,
}
DEFAULT_BAR_TYPE = "standard"

# Absorbs floating-point drift in the kilogram pass only
ROUNDING_TOLERANCE_KG = 0.01

# Upper bound on plates per side; larger loads are rejected
MAX_PLATES_PER_SIDE = 100

# Percentages of the one-rep max offered as presets
PERCENTAGE_PRESETS = (50, 60, 70, 75, 80, 85, 90, 95, 100)
PERCENTAGE_RANGE = (30, 100)
DEFAULT_PERCENTAGE = 75

# Optional substitute inventory (JSON)
CONFIG_DIR = os.path.join(os.path.expanduser("~"), ".plate_calculator")
CONFIG_PATH = os.environ.get(
    "PLATE_CALCULATOR_CONFIG", os.path.join(CONFIG_DIR, "plates.json")
)
