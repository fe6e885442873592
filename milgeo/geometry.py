"""Line entity, rotation, intersection and parallel-offset construction."""
import math
from .types import Point
from .angles import mils_to_radians

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Vector Utilities
# ============================================================
def left_norm(p1: Point, p2: Point) -> Point:
    """Unit normal (-dy, dx)/L of the direction p1 → p2.

    Raises GeometryError for a zero-length direction.
    """
    dx = p2[0]-p1[0]; dy = p2[1]-p1[1]; Ln = math.sqrt(dx**2+dy**2)
    if Ln == 0:
        raise GeometryError(f"Degenerate segment: start == end == {p1}")
    return (-dy/Ln, dx/Ln)

def off_pt(p: Point, n: Point, d: float) -> Point:
    """Offset point p by distance d along unit direction n."""
    return (p[0]+d*n[0], p[1]+d*n[1])

def arc_poly(cx: float, cy: float, r: float, sa: float, ea: float, n: int = 60) -> list[Point]:
    """Generate n+1 points along a circular arc from angle sa to ea (radians)."""
    return [(cx+r*math.cos(sa+(ea-sa)*i/n), cy+r*math.sin(sa+(ea-sa)*i/n))
            for i in range(n+1)]

def rotate_end(start: Point, end: Point, angle: float) -> Point:
    """Rotate *end* around *start* by *angle* mils."""
    dx = end[0]-start[0]; dy = end[1]-start[1]
    rad = mils_to_radians(angle)
    c = math.cos(rad); s = math.sin(rad)
    return (dx*c - dy*s + start[0], dx*s + dy*c + start[1])

# ============================================================
# Line Entity
# ============================================================
class Line:
    """Directed segment start → end with the rotation (mils) it was built with.

    ``angle`` is a construction-time value. It is not updated by scale() or
    the intersection mutators, so it may not match the current direction.
    Lines derived by parallel_line() carry ``angle=None``.
    """

    __slots__ = ("start", "end", "angle")

    def __init__(self, start: Point, end: Point, rotate: bool = False,
                 angle: float | None = None):
        if rotate:
            if angle is None:
                raise GeometryError("Cannot rotate a line without an angle")
            end = rotate_end(start, end, angle)
        self.start = start
        self.end = end
        self.angle = angle

    def __repr__(self):
        return f"Line(start={self.start}, end={self.end}, angle={self.angle})"

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return (self.start, self.end, self.angle) == (other.start, other.end, other.angle)

    __hash__ = None  # mutable

    def copy(self) -> "Line":
        return Line(self.start, self.end, angle=self.angle)

    def direction(self) -> Point:
        return (self.end[0]-self.start[0], self.end[1]-self.start[1])

    def length(self) -> float:
        dx, dy = self.direction()
        return math.sqrt(dx**2+dy**2)

    def scale(self, factor: float) -> None:
        """Scale both endpoints about the coordinate origin (not about start)."""
        self.start = (self.start[0]*factor, self.start[1]*factor)
        self.end = (self.end[0]*factor, self.end[1]*factor)

    def _isect_or_fallback(self, other: "Line", eps: float, origin_fallback: bool) -> Point:
        p = intersect(self, other, eps)
        if p is not None:
            return p
        if origin_fallback:
            return (0.0, 0.0)
        raise GeometryError(f"No intersection between {self!r} and {other!r}")

    def end_at_intersection(self, other: "Line", eps: float = 0.0,
                            origin_fallback: bool = False) -> Point:
        """Move end to the intersection with *other* and return it.

        Raises GeometryError (line unchanged) when the lines are parallel,
        unless origin_fallback is set, in which case end becomes (0, 0).
        """
        self.end = self._isect_or_fallback(other, eps, origin_fallback)
        return self.end

    def start_at_intersection(self, other: "Line", eps: float = 0.0,
                              origin_fallback: bool = False) -> Point:
        """Move start to the intersection with *other*; see end_at_intersection."""
        self.start = self._isect_or_fallback(other, eps, origin_fallback)
        return self.start

# ============================================================
# Intersection Solver
# ============================================================
def intersect(line1: Line, line2: Line, eps: float = 0.0) -> Point | None:
    """Intersection of the infinite lines through line1 and line2.

    Returns None when |denominator| <= eps; the default eps=0 is an exact
    parallel test, so near-parallel lines still return a (far away) point.
    The result may lie outside either segment.
    """
    x1, y1 = line1.start; x2, y2 = line1.end
    x3, y3 = line2.start; x4, y4 = line2.end
    denom = (x1-x2)*(y3-y4) - (y1-y2)*(x3-x4)
    if abs(denom) <= eps:
        return None
    t = ((x1-x3)*(y3-y4) - (y1-y3)*(x3-x4))/denom
    return (x1+t*(x2-x1), y1+t*(y2-y1))

# ============================================================
# Parallel-Line Constructor
# ============================================================
def parallel_line(line: Line, distance: float) -> Line:
    """New line offset by *distance* along the unit normal (-dy, dx) of *line*.

    Positive distance falls to the left of start → end in y-up coordinates
    (to the right on a y-down screen). The result has no angle.
    Raises GeometryError for a zero-length line.
    """
    n = left_norm(line.start, line.end)
    return Line(off_pt(line.start, n, distance), off_pt(line.end, n, distance))
