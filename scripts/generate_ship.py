"""
Generate a ship deck layout and print its summary.

Examples:
    python scripts/generate_ship.py --seed 42 --preview
    python scripts/generate_ship.py --config data/ships/freighter.yaml --hull --preview
"""

import argparse
import sys
from pathlib import Path

from shipwright.data_types import ConfigError, ShipParameters, HullParameters
from shipwright.generator import generate_ship
from shipwright.hull import hull_profile
from shipwright.loader import DataLoadError, load_parameters, load_hull_parameters
from shipwright.placement import PlacementError
from shipwright.preview import render_text
from shipwright.rng import RandomSource, make_seed


def parse_seed(value: str):
    """Numeric seeds stay integers; anything else is hashed later."""
    try:
        return int(value, 0)
    except ValueError:
        return value


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Procedural spaceship deck generator")
    parser.add_argument("--config", type=Path, help="YAML ship preset")
    parser.add_argument("--schema-dir", type=Path, help="Directory holding JSON schemas")
    parser.add_argument("--seed", type=parse_seed, help="Seed (overrides the preset)")
    parser.add_argument("--preview", action="store_true", help="Print a text map of the deck")
    parser.add_argument("--hull", action="store_true", help="Generate and draw a hull profile")
    parser.add_argument("--verbose", action="store_true", help="Print generation progress")
    args = parser.parse_args(argv)

    try:
        if args.config:
            params = load_parameters(args.config, args.schema_dir)
            hull_params = load_hull_parameters(args.config, args.schema_dir) or HullParameters()
        else:
            params = ShipParameters()
            hull_params = HullParameters()

        ship = generate_ship(params, seed=args.seed, verbose=args.verbose)
    except (DataLoadError, ConfigError, PlacementError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    ship.print_summary()

    hull = None
    if args.hull:
        # Hull gets its own stream derived from the ship seed
        hull = hull_profile(RandomSource(make_seed(ship.seed, "hull")), hull_params)
        print(f"  Hull:       {len(hull)} cells, max half-width {int(hull.max()) if len(hull) else 0}")

    if args.preview:
        print()
        print(render_text(ship, hull))

    return 0


if __name__ == "__main__":
    sys.exit(main())
