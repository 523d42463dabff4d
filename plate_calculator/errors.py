"""Exceptions raised by the plate calculator."""


class PlateCalculatorError(Exception):
    """Base class for every error raised by this package."""


class UnknownBarType(PlateCalculatorError, KeyError):
    """The bar variant is not in the configured set."""

    def __init__(self, bar_type, known=()):
        self.bar_type = bar_type
        self.known = tuple(known)
        super().__init__(bar_type)

    def __str__(self):
        choices = ", ".join(self.known) or "none configured"
        return f"Unknown bar type {self.bar_type!r}. Choose from: {choices}"


class UnknownUnit(PlateCalculatorError, ValueError):
    """The unit is neither kilograms nor pounds."""


class InvalidInventory(PlateCalculatorError, ValueError):
    """A plate inventory or bar table breaks its preconditions."""


class TooManyPlates(PlateCalculatorError, ValueError):
    """The target needs more plates per side than a bar can hold."""
