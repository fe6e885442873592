"""Shared test fixtures for milgeo/riskarea tests."""
import pytest
from milgeo.geometry import Line
from riskarea.layout import RiskAreaParams, compute_risk_area


class RecordingCanvas:
    """Canvas that records each draw call as (method, args)."""

    def __init__(self):
        self.calls = []

    def line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", (x1, y1, x2, y2, color)))

    def ring_arc(self, center, radius, start_deg, end_deg, segments, color):
        self.calls.append(("ring_arc", (center, radius, start_deg, end_deg, segments, color)))

    def text(self, text, x, y, font_size, color):
        self.calls.append(("text", (text, x, y, font_size, color)))


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def diagonal():
    """(0,0) → (10,10)."""
    return Line((0.0, 0.0), (10.0, 10.0))


@pytest.fixture
def anti_diagonal():
    """(0,10) → (10,0)."""
    return Line((0.0, 10.0), (10.0, 0.0))


@pytest.fixture(scope="module")
def params():
    return RiskAreaParams()


@pytest.fixture(scope="module")
def area(params):
    """Default risk area (pixel units)."""
    return compute_risk_area(params)
