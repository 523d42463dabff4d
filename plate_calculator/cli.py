"""Command-line interface for the plate calculator."""

import argparse
import json
import logging
import sys

from plate_calculator.config import (
    CONFIG_PATH,
    DEFAULT_BAR_TYPE,
    DEFAULT_PERCENTAGE,
    PERCENTAGE_PRESETS,
    UNITS,
)
from plate_calculator.errors import PlateCalculatorError
from plate_calculator.inventory import get_plate_config, load_plate_config, plate_config_to_dict
from plate_calculator.plate_distributor import (
    calculate_load,
    format_load_result,
    format_plate,
    format_plates,
    percentage_table,
)


def _load_config(args):
    if args.config:
        return load_plate_config(args.config)
    return get_plate_config(CONFIG_PATH)


# --- Command handlers ---

def cmd_calc(args):
    config = _load_config(args)
    result = calculate_load(args.rm, args.unit, args.percentage, args.bar, config)
    print(format_load_result(result))


def cmd_table(args):
    config = _load_config(args)
    percentages = args.percentages or PERCENTAGE_PRESETS
    results = percentage_table(args.rm, args.unit, args.bar, percentages, config)

    print(f"{'%':>5}  {'Target':>8}  {'Real':>8}  {'Delta':>6}  Plates per side")
    print("-" * 70)
    for r in results:
        print(
            f"{format_plate(r.percentage):>5}  {r.target_kg:>5.1f} kg  {r.achieved_kg:>5.1f} kg  "
            f"{r.delta_kg:>+6.1f}  {format_plates(r.distribution)}"
        )


def cmd_plates(args):
    config = _load_config(args)
    if args.json:
        print(json.dumps(plate_config_to_dict(config), indent=2))
        return

    print(f"lb plates: {', '.join(format_plate(p) for p in config.lb_plates) or 'none'}")
    print(f"kg plates: {', '.join(format_plate(p) for p in config.kg_plates) or 'none'}")
    print(f"Tolerance: {config.tolerance:g} kg")
    print("\nBars:")
    for bar in config.bars:
        print(f"  {bar.name:<12} {format_plate(bar.weight_lb):>4} lb  ({bar.weight_kg:.1f} kg)")


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plate-calculator",
        description="Barbell plate calculator - plates per side for a percentage of your 1RM",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--config", help=f"Plate configuration JSON (default: {CONFIG_PATH} if present)")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- calc ---
    calc_p = subparsers.add_parser("calc", help="Plates for one percentage of a 1RM")
    calc_p.add_argument("--rm", required=True, help="One-rep max")
    calc_p.add_argument("--unit", choices=UNITS, default="kg", help="Unit of the 1RM")
    calc_p.add_argument("--percentage", type=float, default=DEFAULT_PERCENTAGE,
                        help=f"Percentage of the 1RM (default: {DEFAULT_PERCENTAGE})")
    calc_p.add_argument("--bar", default=DEFAULT_BAR_TYPE, help="Bar type")
    calc_p.set_defaults(func=cmd_calc)

    # --- table ---
    table_p = subparsers.add_parser("table", help="Plates for every preset percentage")
    table_p.add_argument("--rm", required=True, help="One-rep max")
    table_p.add_argument("--unit", choices=UNITS, default="kg", help="Unit of the 1RM")
    table_p.add_argument("--bar", default=DEFAULT_BAR_TYPE, help="Bar type")
    table_p.add_argument("--percentages", type=float, nargs="+",
                         help="Percentages to list (default: presets)")
    table_p.set_defaults(func=cmd_table)

    # --- plates ---
    plates_p = subparsers.add_parser("plates", help="Show plate inventories and bars")
    plates_p.add_argument("--json", action="store_true", help="Print as JSON")
    plates_p.set_defaults(func=cmd_plates)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    try:
        args.func(args)
    except (PlateCalculatorError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
