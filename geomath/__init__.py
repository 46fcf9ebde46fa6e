"""Geodesic geometry for two-map polygon drawing.

Measures polygons drawn on a source map (area, perimeter, centroid),
relocates a shape-preserving copy onto a target map, generates circle
point-sets and converts between screen pixels and geographic coordinates
for a visible map region.
"""

__version__ = "0.1.0"
