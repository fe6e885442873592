"""Risk-area template computation and rendering.

The firing position sits at the world origin and the centre line points
"up" (−y, screen convention). Positive mils turn clockwise on screen.
"""
import math
from typing import NamedTuple

from milgeo.angles import RAD_PER_MIL, calculate_x_from_angle, mils_to_radians, fmt_mils
from milgeo.geometry import GeometryError, Line, parallel_line
from milgeo.draw import draw_line, draw_circle_sector, draw_text
from milgeo.svg import SvgCanvas, make_page_transform
from riskarea.constants import (
    RANGE_M, LEFT_MILS, RIGHT_MILS, MARGIN_M,
    PX_PER_M, PAGE_W, PAGE_H, BOTTOM_MARGIN_PX,
    ARC_RADIUS_PX, FONT_SIZE, LABEL_DX, LABEL_DY, MARGIN_COLOR,
)


class RiskAreaParams(NamedTuple):
    """Template inputs (metres, mils, pixels)."""
    range_m: float = RANGE_M
    left_mils: float = LEFT_MILS
    right_mils: float = RIGHT_MILS
    margin_m: float = MARGIN_M
    px_per_m: float = PX_PER_M
    arc_radius_px: float = ARC_RADIUS_PX
    font_size: int = FONT_SIZE


class RiskArea(NamedTuple):
    """Template lines in pixel units, firing position at (0, 0)."""
    center: Line
    left: Line               # angle = -left_mils
    right: Line              # angle = +right_mils
    far: Line
    left_margin: Line
    right_margin: Line
    far_margin: Line
    far_left_m: float        # far-line extent left of the centre line (metres)
    far_right_m: float       # far-line extent right of the centre line (metres)

    def sector_lines(self) -> list[Line]:
        return [self.center, self.left, self.right, self.far]

    def margin_lines(self) -> list[Line]:
        return [self.left_margin, self.right_margin, self.far_margin]


def _validate(params: RiskAreaParams) -> None:
    for name in ("range_m", "px_per_m", "margin_m"):
        v = getattr(params, name)
        if not math.isfinite(v):
            raise GeometryError(f"{name} must be finite: {v}")
    if params.range_m <= 0:
        raise GeometryError(f"range_m must be positive: {params.range_m}")
    if params.px_per_m <= 0:
        raise GeometryError(f"px_per_m must be positive: {params.px_per_m}")
    if params.margin_m < 0:
        raise GeometryError(f"margin_m must not be negative: {params.margin_m}")
    # tan() of the sector must stay positive under the fixed RAD_PER_MIL
    for name in ("left_mils", "right_mils"):
        v = getattr(params, name)
        if not (v > 0 and mils_to_radians(v) < math.pi / 2):
            raise GeometryError(
                f"{name} must be in (0, {math.pi / 2 / RAD_PER_MIL:.2f}) mils: {v}")


def compute_risk_area(params: RiskAreaParams = RiskAreaParams()) -> RiskArea:
    """Build the sector, far line and closed safety-margin outline.

    Raises GeometryError for out-of-range parameters.
    """
    _validate(params)
    R = params.range_m
    origin = (0.0, 0.0); aim = (0.0, -R)

    center = Line(origin, aim, angle=0.0)
    right = Line(origin, aim, rotate=True, angle=params.right_mils)
    left = Line(origin, aim, rotate=True, angle=-params.left_mils)

    # Far line across the centre-line end, wide enough for either edge,
    # clamped to the sector edges; the edges are then extended to it
    half = calculate_x_from_angle(R, max(params.left_mils, params.right_mils)) + params.margin_m
    far = Line((-half, -R), (half, -R))
    far.start_at_intersection(left)
    far.end_at_intersection(right)
    left.end_at_intersection(far)
    right.end_at_intersection(far)
    far_left_m = -far.start[0]
    far_right_m = far.end[0]

    # Margin outline: offset outward, then close the corners
    right_margin = parallel_line(right, params.margin_m)
    left_margin = parallel_line(left, -params.margin_m)
    far_margin = parallel_line(far, -params.margin_m)
    right_margin.end_at_intersection(far_margin)
    left_margin.end_at_intersection(far_margin)
    far_margin.start_at_intersection(left_margin)
    far_margin.end_at_intersection(right_margin)
    right_margin.start_at_intersection(left_margin)
    left_margin.start_at_intersection(right_margin)

    area = RiskArea(center, left, right, far, left_margin, right_margin, far_margin,
                    far_left_m, far_right_m)
    for ln in area.sector_lines() + area.margin_lines():
        ln.scale(params.px_per_m)
    return area


def render_risk_area(area: RiskArea, params: RiskAreaParams = RiskAreaParams(),
                     width: int = PAGE_W, height: int = PAGE_H) -> str:
    """SVG document with the firing position at the bottom centre of the page."""
    canvas = SvgCanvas(width, height,
                       to_page=make_page_transform((width / 2, height - BOTTOM_MARGIN_PX)))

    for ln in area.margin_lines():
        draw_line(canvas, ln, MARGIN_COLOR)
    for ln in area.sector_lines():
        draw_line(canvas, ln)

    draw_circle_sector(canvas, area.right, params.arc_radius_px)
    draw_circle_sector(canvas, area.left, params.arc_radius_px)

    fs = params.font_size
    draw_text(canvas, area.right, fmt_mils(params.right_mils), LABEL_DX, LABEL_DY, fs)
    draw_text(canvas, area.left, fmt_mils(params.left_mils), -LABEL_DX - 3 * fs, LABEL_DY, fs)
    draw_text(canvas, area.center, f"{params.range_m:.0f} m", LABEL_DX, 2 * LABEL_DY, fs)
    return canvas.render()
