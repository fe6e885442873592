"""Shared type definitions for the milgeo kernel."""

Point = tuple[float, float]

# SVG/CSS colour string, e.g. "#be2137"
Color = str
