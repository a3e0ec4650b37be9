"""
Demo of sub-line geometry.

This example shows how to:
1. Build bounded, half-infinite and multi-part sub-lines
2. Intersect sub-lines with and without their end points
3. Draw the segments, clipping infinite ends to a viewing box
"""

import math
import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from kcluster.geometry import IntervalsSet, Line, SubLine, Vector2D
from kcluster.visualization import plot_segments


def describe(name, sub):
    segments = sub.get_segments()
    print(f"{name}: {len(segments)} segment(s), length = {sub.length:.3f}")
    for seg in segments:
        print(f"    ({seg.start.x:.3f}, {seg.start.y:.3f}) -> ({seg.end.x:.3f}, {seg.end.y:.3f})")


def main():
    """Run the demo."""
    print("=== SubLine Geometry Demo ===\n")

    line = Line(Vector2D(-1, -7), Vector2D(7, -1))
    bounded = SubLine.from_endpoints(Vector2D(-1, -7), Vector2D(7, -1))
    half = SubLine(line, IntervalsSet.from_bounds(-math.inf, 0.0))
    two_parts = SubLine(Line(Vector2D(-8, 6), Vector2D(8, 2)),
                        IntervalsSet.from_bounds(-6, -2).union(IntervalsSet.from_bounds(1, 5)))
    whole = Line(Vector2D(-5, -8), Vector2D(-5, 8)).whole_hyperplane()

    describe("bounded", bounded)
    describe("half-infinite", half)
    describe("two parts", two_parts)
    describe("whole vertical line", whole)

    print("\n=== Intersections ===")
    sub1 = SubLine.from_endpoints(Vector2D(1, 1), Vector2D(3, 1))
    for end in (2.0, 1.0, 0.5):
        sub2 = SubLine.from_endpoints(Vector2D(2, 0), Vector2D(2, end))
        inclusive = sub1.intersection(sub2, True)
        strict = sub1.intersection(sub2, False)
        print(f"(2, 0)-(2, {end}): with end points {inclusive}, interior only {strict}")

    print("\nParallel sweep of (x, 0)-(1, 3) against (0, 0)-(0, 3):")
    vertical = SubLine.from_endpoints(Vector2D(0, 0), Vector2D(0, 3))
    for x in (-2.0, -0.5, 0.0, 0.5, 1.0):
        moving = SubLine.from_endpoints(Vector2D(x, 0), Vector2D(1, 3))
        print(f"  x = {x:5.2f}: inclusive {vertical.intersection(moving, True)}, "
              f"strict {vertical.intersection(moving, False)}")

    print("\nPlotting segments...")
    ax = plot_segments([bounded, half, two_parts, whole], bounds=(-12, 12, -12, 12),
                       title='Sub-lines clipped to the viewing box')
    ax.grid(True, alpha=0.3)
    plt.show()


if __name__ == "__main__":
    main()
