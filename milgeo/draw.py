"""Draw helpers that hand a Line's coordinates to an injected Canvas."""
from typing import Protocol

from .types import Point, Color
from .angles import mils_to_degree
from .geometry import Line, GeometryError

# raylib palette
LINE_COLOR: Color = "#be2137"   # MAROON
TEXT_COLOR: Color = "#000000"   # BLACK

SECTOR_START_DEG = -90          # sector overlays start straight up (y-down screen)
SECTOR_SEGMENTS = 50


class Canvas(Protocol):
    """Rendering backend. Angles in degrees, y-down pixel coordinates."""
    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None: ...
    def ring_arc(self, center: Point, radius: float, start_deg: float, end_deg: float,
                 segments: int, color: Color) -> None: ...
    def text(self, text: str, x: int, y: int, font_size: int, color: Color) -> None: ...


def draw_line(canvas: Canvas, line: Line, color: Color = LINE_COLOR) -> None:
    """Draw the segment at integer pixel positions (truncated)."""
    canvas.line(int(line.start[0]), int(line.start[1]),
                int(line.end[0]), int(line.end[1]), color)


def draw_circle_sector(canvas: Canvas, line: Line, radius: float,
                       color: Color = LINE_COLOR) -> None:
    """Arc of *radius* around line.start sweeping the line's angle from straight up."""
    if line.angle is None:
        raise GeometryError(f"Line has no angle to draw: {line!r}")
    canvas.ring_arc(line.start, radius, SECTOR_START_DEG,
                    SECTOR_START_DEG + mils_to_degree(line.angle),
                    SECTOR_SEGMENTS, color)


def draw_text(canvas: Canvas, line: Line, text: str, offset_x: int, offset_y: int,
              font_size: int, color: Color = TEXT_COLOR) -> None:
    """Label placed at the line end plus a pixel offset."""
    canvas.text(text, int(line.end[0]) + offset_x, int(line.end[1]) + offset_y,
                font_size, color)
