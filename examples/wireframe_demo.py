"""3D wireframe demo: a perspective view that can be walked around.

Builds a ground grid, the coordinate axes, a helix and a square frame,
viewed from the configured start camera (eye (15, 10, 5) looking along a
heading of -60 degrees by default).  A sequence of navigation stimuli
can be replayed on the view before the SVG is written; each one yields
a new camera and a full redraw.

Usage:
    python wireframe_demo.py                            # build/wireframe.svg
    python wireframe_demo.py --moves up up left wheel+  # walk, then zoom in
    python wireframe_demo.py --config my_view.yaml --dxf build/wireframe.dxf
"""

import argparse
import logging
import math
from pathlib import Path

from svgplot.config import load_view_config
from svgplot.logging_config import setup_logging
from svgplot.navigation import KEYS, ViewState
from svgplot.plot3d import Plot3D


def build_scene(plot):
    plot.draw_grid3d(-5, 5, -5, 5, 1)
    plot.draw_axes3d(6)
    plot.draw_curve3d(lambda t: 2 * math.cos(t), lambda t: 2 * math.sin(t),
                      lambda t: t / 4, 0, 6 * math.pi, 180,
                      {'stroke': 'blue', 'stroke-width': 1.5})
    plot.draw_polyline3d([(-3, -3, 3), (3, -3, 3), (3, 3, 3), (-3, 3, 3), (-3, -3, 3)],
                         {'stroke': 'red'})
    plot.draw_label3d('helix', (2, 0, 5))


def apply_move(state, move):
    """Apply one stimulus: a key name, ``drag:dx,dy``, ``wheel+`` or
    ``wheel-``."""
    if move in KEYS:
        return state.on_key(move)
    if move.startswith('drag:'):
        dx, dy = (float(v) for v in move[5:].split(','))
        return state.on_drag(dx, dy)
    if move == 'wheel+':
        return state.on_wheel(1)
    if move == 'wheel-':
        return state.on_wheel(-1)
    raise ValueError('unknown move: {}'.format(move))


def main():
    parser = argparse.ArgumentParser(description="svgplot 3D wireframe demo")
    parser.add_argument(
        "--output",
        default="build/wireframe.svg",
        help="SVG file to write"
    )
    parser.add_argument("--config", default=None, help="view config YAML override")
    parser.add_argument("--dxf", default=None, help="also export the view to this DXF file")
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        help="navigation stimuli: up/down/left/right/home, drag:dx,dy, wheel+, wheel-"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    args = parser.parse_args()

    log = setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_view_config(args.config)
    state = ViewState.from_config(cfg)
    left, right, bottom, top = cfg.bounds
    plot = Plot3D(cfg.width, cfg.height, state.camera(), left, right, bottom, top,
                  clip_offset=cfg.clip_offset)
    build_scene(plot)

    for move in args.moves:
        state = apply_move(state, move)
        n = plot.update_camera(state.camera())
        log.info("%s: eye %s, %d primitives drawn", move, state.eye, n)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    plot.save(output)
    print(f"wrote {output}")

    if args.dxf:
        Path(args.dxf).parent.mkdir(parents=True, exist_ok=True)
        plot.export_dxf(args.dxf)
        print(f"wrote {args.dxf}")


if __name__ == "__main__":
    main()
