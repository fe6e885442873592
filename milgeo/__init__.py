"""Mils-based 2D line geometry kernel and drawing adapters."""

from .types import Point, Color
from .angles import (
    MILS_PER_TURN, DEG_PER_MIL, RAD_PER_MIL,
    mils_to_degree, mils_to_radians, calculate_x_from_angle, fmt_mils,
)
from .geometry import (
    GeometryError, Line,
    left_norm, off_pt, arc_poly, rotate_end,
    intersect, parallel_line,
)
from .draw import Canvas, draw_line, draw_circle_sector, draw_text, LINE_COLOR, TEXT_COLOR
from .svg import SvgCanvas, make_page_transform, W, H
