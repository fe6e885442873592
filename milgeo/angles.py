"""Angle conversions for the 6400-mil artillery circle."""
import math

MILS_PER_TURN = 6400
DEG_PER_MIL = 0.05625     # 360 / 6400, exact
RAD_PER_MIL = 0.000982    # fixed approximation of pi/3200; keep as-is

def mils_to_degree(mils: float) -> float:
    """Convert mils to degrees."""
    return mils * DEG_PER_MIL

def mils_to_radians(mils: float) -> float:
    """Convert mils to radians using the fixed RAD_PER_MIL constant."""
    return mils * RAD_PER_MIL

def calculate_x_from_angle(width: float, angle: float) -> float:
    """Opposite leg of a right triangle with adjacent leg *width* and *angle* in mils.

    Not bounds checked: angles near 1600/4800 mils blow up through tan().
    """
    return width * math.tan(mils_to_radians(angle))

def fmt_mils(mils: float) -> str:
    """Format mils in artillery notation, e.g. 1600 -> '16-00', -250 -> '-2-50'."""
    m = round(mils)
    sign = "-" if m < 0 else ""
    hi, lo = divmod(abs(m), 100)
    return f"{sign}{hi}-{lo:02d}"
