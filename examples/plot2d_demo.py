"""2D plot demo: gridlines, axes, tick numbers and a few graphs.

Draws the standard svgplot coordinate frame over ``[-7, 10] x [-2, 2]``
and graphs a sine wave, a parametric circle and a user-coordinate path.

Usage:
    python plot2d_demo.py                     # writes build/plot2d.svg
    python plot2d_demo.py --output out.svg --width 850 --height 200
"""

import argparse
import logging
import math
from pathlib import Path

from svgplot.logging_config import setup_logging
from svgplot.plot import Plot


def build_plot(width, height):
    plot = Plot(width, height, -7, 10, -2, 2)
    plot.draw_gridlines()
    plot.draw_coordinate_axes()
    plot.display_numbers()

    plot.draw_function(math.sin, -7, 10, 200, {'stroke': 'blue', 'stroke-width': 2})
    plot.draw_curve(lambda t: 5 + math.cos(t), lambda t: math.sin(t),
                    0, 2 * math.pi, 64, {'stroke': 'red'})
    plot.draw_path('M -6 -1 l 2 2 l 2 -2', {'stroke': 'green', 'dasharray': '4 2'})
    plot.draw_text('y = sin x', (-6.5, 1.5), {'font-size': 16})
    return plot


def main():
    parser = argparse.ArgumentParser(description="svgplot 2D plot demo")
    parser.add_argument(
        "--output",
        default="build/plot2d.svg",
        help="SVG file to write"
    )
    parser.add_argument("--width", type=float, default=850, help="width in pixels")
    parser.add_argument("--height", type=float, default=200, help="height in pixels")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    build_plot(args.width, args.height).save(output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
