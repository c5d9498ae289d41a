"""Writing 3-D points to comma-separated files."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from os import PathLike

import numpy as np


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


SAMPLE_POINTS = (
    Point3D(1.0, 2.0, 3.0),
    Point3D(4.0, 5.0, 6.0),
    Point3D(7.0, 8.0, 9.0),
)


def noisy_half_circle(
    num_points: int = 100,
    radius: float = 5.0,
    sigma: float = 0.2,
    rng: np.random.Generator | None = None,
) -> list[Point3D]:
    """Sample points along a half circle with Gaussian noise on radius and height.

    Point ``i`` lies at angle ``pi * i / num_points``.
    """
    if num_points < 0:
        raise ValueError("num_points must not be negative")
    if sigma < 0:
        raise ValueError("sigma must not be negative")
    if rng is None:
        rng = np.random.default_rng()
    points = []
    for i in range(num_points):
        angle = math.pi * i / num_points
        r = radius + float(rng.normal(0.0, sigma))
        z = float(rng.normal(0.0, sigma))
        points.append(Point3D(r * math.cos(angle), r * math.sin(angle), z))
    return points


def _format(value: float) -> str:
    return f"{value:g}"


def write_points_csv(points: Iterable[Point3D], path: str | PathLike[str]) -> None:
    """Write one ``x,y,z`` line per point, numbers to six significant digits."""
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        for p in points:
            out.write(f"{_format(p.x)},{_format(p.y)},{_format(p.z)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pointfiles", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    fixed = commands.add_parser("fixed", help="save three sample points")
    fixed.add_argument("--output", default="points.csv")
    circle = commands.add_parser("circle", help="save a noisy half circle")
    circle.add_argument("--output", default="circlepoints.csv")
    circle.add_argument("--num-points", type=int, default=100)
    circle.add_argument("--radius", type=float, default=5.0)
    circle.add_argument("--sigma", type=float, default=0.2)
    circle.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    if args.command == "fixed":
        points: Sequence[Point3D] = SAMPLE_POINTS
    else:
        try:
            points = noisy_half_circle(
                args.num_points, args.radius, args.sigma, np.random.default_rng(args.seed)
            )
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
    try:
        write_points_csv(points, args.output)
    except OSError:
        print("Unable to open file for writing.", file=sys.stderr)
        return 1
    print(f"Points saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())