"""Tests for unit conversion and bar lookup."""

import unittest

from plate_calculator.config import LBS_PER_KG
from plate_calculator.errors import UnknownBarType, UnknownUnit
from plate_calculator.units import (
    bar_weight,
    from_reference_unit,
    kg_to_lbs,
    lbs_to_kg,
    normalize_unit,
    to_reference_unit,
)


class TestConversions(unittest.TestCase):
    def test_one_kilogram_in_pounds(self):
        self.assertAlmostEqual(kg_to_lbs(1), 2.20462)
        self.assertAlmostEqual(lbs_to_kg(2.20462), 1.0)

    def test_plate_conversions(self):
        # 45 / 2.20462 = 20.4117 kg
        self.assertAlmostEqual(lbs_to_kg(45), 20.4117, places=4)
        self.assertAlmostEqual(lbs_to_kg(15), 6.8039, places=4)

    def test_reference_unit_is_kilograms(self):
        self.assertEqual(to_reference_unit(100, "kg"), 100)
        self.assertEqual(from_reference_unit(100, "kg"), 100)
        self.assertAlmostEqual(to_reference_unit(45, "lb"), 45 / LBS_PER_KG)
        self.assertAlmostEqual(from_reference_unit(20, "lb"), 20 * LBS_PER_KG)

    def test_round_trip(self):
        for unit in ("kg", "lb"):
            for value in (0, 0.5, 1.25, 45, 102.5, 315, 1000.75):
                back = from_reference_unit(to_reference_unit(value, unit), unit)
                self.assertAlmostEqual(back, value, places=9, msg=f"unit={unit} value={value}")

    def test_unit_aliases(self):
        self.assertEqual(normalize_unit("lbs"), "lb")
        self.assertEqual(normalize_unit(" KG "), "kg")
        self.assertAlmostEqual(to_reference_unit(45, "lbs"), to_reference_unit(45, "lb"))

    def test_unknown_unit(self):
        with self.assertRaises(UnknownUnit):
            to_reference_unit(10, "stone")
        with self.assertRaises(ValueError):
            from_reference_unit(10, "")


class TestBarWeight(unittest.TestCase):
    def test_standard_bar(self):
        self.assertAlmostEqual(bar_weight("standard"), 45 / LBS_PER_KG)

    def test_womens_bar(self):
        self.assertAlmostEqual(bar_weight("womens"), 35 / LBS_PER_KG)

    def test_custom_bar_table(self):
        self.assertAlmostEqual(bar_weight("technique", {"technique": 15}), 15 / LBS_PER_KG)

    def test_unknown_bar(self):
        with self.assertRaises(UnknownBarType) as ctx:
            bar_weight("kids")
        self.assertEqual(ctx.exception.bar_type, "kids")
        self.assertIn("standard", str(ctx.exception))

    def test_unknown_bar_is_key_error(self):
        with self.assertRaises(KeyError):
            bar_weight(None)


if __name__ == "__main__":
    unittest.main()
