"""Risk-area template: lines built from the milgeo kernel and rendered to SVG."""

from .layout import RiskAreaParams, RiskArea, compute_risk_area, render_risk_area
