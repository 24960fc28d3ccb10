"""
cosmo-calc: distance moduli of a cosmology at a few redshifts.

Prints the distance modulus at each requested redshift and saves a
scatter plot of the values.
"""

import argparse
from typing import Optional, Sequence

import matplotlib
matplotlib.use("Agg")

import numpy as np
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.parameters import load_cosmology
from .models import FlatLCDM
from .visualization import plot_distance_modulus

DEFAULT_REDSHIFTS = (0.5, 1.0, 2.0, 3.0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cosmo-calc",
        description="Compute distance moduli for an FLRW cosmology.")
    parser.add_argument("--H0", type=float, default=70.0,
                        help="Hubble constant at z=0 [km/s/Mpc]")
    parser.add_argument("--Omega0", type=float, default=0.3,
                        help="Matter density at z=0")
    parser.add_argument("--z", type=float, nargs="+", default=list(DEFAULT_REDSHIFTS),
                        help="Redshifts to evaluate")
    parser.add_argument("--config", default=None,
                        help="YAML cosmology file; overrides --H0 and --Omega0")
    parser.add_argument("--output", default="plot.png",
                        help="Output file for the distance-modulus plot")
    parser.add_argument("--no-plot", action="store_true",
                        help="Skip writing the plot")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config is not None:
        try:
            cosmo = load_cosmology(args.config)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            parser.error(f"cannot load cosmology from {args.config}: {exc}")
    else:
        cosmo = FlatLCDM(H0=args.H0, Om0=args.Omega0)

    console = Console()
    console.print(repr(cosmo))

    zs = np.asarray(args.z, dtype=float)
    mu = np.asarray(cosmo.distance_modulus(zs))

    table = Table(title=str(cosmo))
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", justify="right")
    for z, value in zip(zs, mu):
        table.add_row(escape(f"dist-modulus[z={z:e}]"), f"{value:.8f}")
    console.print(table)

    if not args.no_plot:
        plot_distance_modulus(cosmo, zs, filename=args.output)
        console.print(f"Plot saved to {args.output}")


if __name__ == "__main__":
    main()
