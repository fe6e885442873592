"""Generate a risk-area template SVG.

Builds the sector, far line and safety-margin outline from riskarea/layout.py
and writes them to an SVG file next to this script unless -o is given.
"""
import argparse
import os
from typing import Sequence

from riskarea.layout import RiskAreaParams, compute_risk_area, render_risk_area
from riskarea.constants import PAGE_W, PAGE_H


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    d = RiskAreaParams()
    parser = argparse.ArgumentParser(description="Render a firing risk-area template to SVG.")
    parser.add_argument("-o", "--output", default=None,
                        help="Destination SVG path (default: riskarea.svg beside this script)")
    parser.add_argument("--range", dest="range_m", type=float, default=d.range_m,
                        help="Danger distance in metres")
    parser.add_argument("--left", dest="left_mils", type=float, default=d.left_mils,
                        help="Sector left of the centre line, mils")
    parser.add_argument("--right", dest="right_mils", type=float, default=d.right_mils,
                        help="Sector right of the centre line, mils")
    parser.add_argument("--margin", dest="margin_m", type=float, default=d.margin_m,
                        help="Safety margin in metres")
    parser.add_argument("--scale", dest="px_per_m", type=float, default=d.px_per_m,
                        help="Pixels per metre")
    parser.add_argument("--width", type=int, default=PAGE_W, help="Page width in pixels")
    parser.add_argument("--height", type=int, default=PAGE_H, help="Page height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error(f"page size must be positive: {args.width}x{args.height}")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    params = RiskAreaParams(
        range_m=args.range_m, left_mils=args.left_mils, right_mils=args.right_mils,
        margin_m=args.margin_m, px_per_m=args.px_per_m,
    )
    area = compute_risk_area(params)
    svg_content = render_risk_area(area, params, args.width, args.height)

    svg_path = args.output or os.path.join(
        os.path.dirname(os.path.abspath(__file__)), "riskarea.svg")
    with open(svg_path, "w") as f:
        f.write(svg_content)

    print(f"Risk area written to {svg_path}")
    print(f"Range:       {params.range_m:.1f} m")
    print(f"Far width:   {area.far_left_m:.1f} m left, {area.far_right_m:.1f} m right")
    print()
    for name in ("left_margin", "right_margin", "far_margin"):
        ln = getattr(area, name)
        print(f"  {name:<13s} ({ln.start[0]:8.2f}, {ln.start[1]:8.2f})"
              f"  ->  ({ln.end[0]:8.2f}, {ln.end[1]:8.2f})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
