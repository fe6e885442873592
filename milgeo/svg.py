"""SVG Canvas backend."""
import math
from html import escape
from typing import Callable

from .types import Point, Color
from .geometry import arc_poly

# Default page size in pixels
W, H = 800, 450


def make_page_transform(origin: Point) -> Callable[[float, float], tuple[float, float]]:
    """Create a to_page closure that moves world (0, 0) to *origin* (pixels)."""
    ox, oy = origin
    def to_page(x: float, y: float) -> tuple[float, float]:
        return (ox + x, oy + y)
    return to_page


class SvgCanvas:
    """Collects SVG elements in ``out``; render() wraps them in a document."""

    def __init__(self, width: int = W, height: int = H, background: Color = "#f5f5f5",
                 to_page: Callable[[float, float], tuple[float, float]] | None = None):
        self.width = width
        self.height = height
        self.background = background
        self.to_page = to_page or (lambda x, y: (x, y))
        self.out: list[str] = []

    def line(self, x1, y1, x2, y2, color):
        x1, y1 = self.to_page(x1, y1); x2, y2 = self.to_page(x2, y2)
        self.out.append(f'<line x1="{x1:.1f}" y1="{y1:.1f}" x2="{x2:.1f}" y2="{y2:.1f}"'
                        f' stroke="{color}" stroke-width="1"/>')

    def ring_arc(self, center, radius, start_deg, end_deg, segments, color):
        cx, cy = self.to_page(*center)
        poly = arc_poly(cx, cy, radius, math.radians(start_deg), math.radians(end_deg), segments)
        svg_pts = " ".join(f"{x:.1f},{y:.1f}" for x, y in poly)
        self.out.append(f'<polyline points="{svg_pts}" fill="none" stroke="{color}"'
                        f' stroke-width="1"/>')

    def text(self, text, x, y, font_size, color):
        x, y = self.to_page(x, y)
        # raylib anchors text at its top-left corner
        self.out.append(f'<text x="{x:.1f}" y="{y:.1f}" dominant-baseline="hanging"'
                        f' font-family="Arial" font-size="{font_size}"'
                        f' fill="{color}">{escape(text)}</text>')

    def render(self) -> str:
        head = [
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.width}" height="{self.height}"'
            f' viewBox="0 0 {self.width} {self.height}">',
            f'<rect width="{self.width}" height="{self.height}" fill="{self.background}"/>',
        ]
        return "\n".join(head + self.out + ['</svg>'])
