"""Ellipse outlines for indicatrices and graticule lines, in canvas coordinates."""

from shapely import affinity
from shapely.geometry import Point, Polygon, box

from .indicatrix import IndicatrixDescriptor
from .jacobian import PlanarPoint, Projection

ELLIPSE_RESOLUTION = 16   # segments per quarter circle
GRATICULE_STEP = 30       # degrees between graticule lines
GRATICULE_SAMPLE = 2      # degrees between points along a line


def ellipse_polygon(desc: IndicatrixDescriptor, base_radius: float) -> Polygon:
    """Return the indicatrix ellipse as a polygon.

    rx = base_radius * major_scale, ry = base_radius * minor_scale, rotated by
    ``angle_degrees`` about the center (same sense as SVG ``rotate``).
    """
    cx, cy = desc.center
    circle = Point(cx, cy).buffer(1.0, quad_segs=ELLIPSE_RESOLUTION)
    ellipse = affinity.scale(circle,
                             base_radius * desc.major_scale,
                             base_radius * desc.minor_scale,
                             origin=(cx, cy))
    return affinity.rotate(ellipse, desc.angle_degrees, origin=(cx, cy))


def clip_to_canvas(poly: Polygon, width: float, height: float
                   ) -> list[list[tuple[float, float]]]:
    """Clip a polygon to the canvas box. Returns a list of exterior rings."""
    clipped = poly.intersection(box(0, 0, width, height))
    if clipped.is_empty:
        return []
    parts = [clipped] if isinstance(clipped, Polygon) else getattr(clipped, "geoms", [])
    result = []
    for part in parts:
        if isinstance(part, Polygon):
            coords = list(part.exterior.coords)
            if len(coords) >= 3:
                result.append(coords)
    return result


def _trace(points: list[PlanarPoint | None], max_jump: float) -> list[list[PlanarPoint]]:
    """Split a projected polyline where points vanish or jump across a seam."""
    lines, current = [], []
    for pt in points:
        if pt is None or (current and abs(pt[0] - current[-1][0]) > max_jump):
            if len(current) >= 2:
                lines.append(current)
            current = [] if pt is None else [pt]
            continue
        current.append(pt)
    if len(current) >= 2:
        lines.append(current)
    return lines


def graticule_lines(project: Projection, width: float,
                    step: int = GRATICULE_STEP) -> list[list[PlanarPoint]]:
    """Meridians and parallels every ``step`` degrees, as canvas polylines."""
    max_jump = width / 2
    lons = range(-180, 181, GRATICULE_SAMPLE)
    lats = range(-90, 91, GRATICULE_SAMPLE)

    lines = []
    for lon in range(-180, 180, step):
        lines += _trace([project(lon, lat) for lat in lats], max_jump)
    for lat in range(-90 + step, 90, step):
        lines += _trace([project(lon, lat) for lon in lons], max_jump)
    return lines
