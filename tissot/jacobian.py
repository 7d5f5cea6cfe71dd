"""Finite-difference Jacobian of a black-box projection at a point."""

import enum
import math
from dataclasses import dataclass
from typing import Callable, Optional

from .config import EstimatorConfig

PlanarPoint = tuple[float, float]
Projection = Callable[[float, float], Optional[PlanarPoint]]


class Skip(enum.Enum):
    """Why a sample produced no indicatrix."""

    POLE_UNSTABLE = "pole-unstable"
    INSUFFICIENT_NEIGHBORS = "insufficient-neighbors"
    NON_POSITIVE_DEFINITE = "non-positive-definite"
    OUT_OF_RANGE = "out-of-range"
    CENTER_UNDEFINED = "center-undefined"


@dataclass(frozen=True)
class LocalJacobian:
    dx_dlon: float   # canvas units per degree
    dy_dlon: float
    dx_dlat: float
    dy_dlat: float
    cos_lat: float
    center: PlanarPoint | None


def _difference(ahead: PlanarPoint | None, behind: PlanarPoint | None,
                center: PlanarPoint | None, delta: float,
                centered: bool) -> tuple[float, float] | None:
    """Return (dx, dy) per degree along one axis, or None without an anchor."""
    if centered:
        return ((ahead[0] - behind[0]) / (2 * delta),
                (ahead[1] - behind[1]) / (2 * delta))
    if center is None:
        return None
    if ahead is not None:
        return ((ahead[0] - center[0]) / delta,
                (ahead[1] - center[1]) / delta)
    return ((center[0] - behind[0]) / delta,
            (center[1] - behind[1]) / delta)


def estimate_jacobian(project: Projection, lon: float, lat: float,
                      config: EstimatorConfig = EstimatorConfig(),
                      ) -> LocalJacobian | Skip:
    """Approximate the partial derivatives of ``project`` at (lon, lat).

    Longitude pairs whose x coordinates jump by more than
    ``config.seam_threshold`` are treated as straddling a seam and fall back
    to a one-sided difference. Latitude has no wraparound and no seam guard.
    """
    cos_lat = math.cos(math.radians(lat))
    if not math.isfinite(cos_lat) or abs(cos_lat) < config.cos_lat_floor:
        return Skip.POLE_UNSTABLE

    delta = config.delta
    center = project(lon, lat)
    east = project(lon + delta, lat)
    west = project(lon - delta, lat)
    north = project(lon, lat + delta)
    south = project(lon, lat - delta)

    if east is None and west is None:
        return Skip.INSUFFICIENT_NEIGHBORS
    if north is None and south is None:
        return Skip.INSUFFICIENT_NEIGHBORS

    lon_centered = (east is not None and west is not None
                    and abs(east[0] - west[0]) <= config.seam_threshold)
    if east is not None and west is not None and not lon_centered:
        # Across the seam only the neighbor on the center's side is usable.
        if center is not None and abs(west[0] - center[0]) < abs(east[0] - center[0]):
            east = None
        else:
            west = None
    lat_centered = north is not None and south is not None

    d_lon = _difference(east, west, center, delta, lon_centered)
    d_lat = _difference(north, south, center, delta, lat_centered)
    if d_lon is None or d_lat is None:
        return Skip.INSUFFICIENT_NEIGHBORS

    return LocalJacobian(
        dx_dlon=d_lon[0],
        dy_dlon=d_lon[1],
        dx_dlat=d_lat[0],
        dy_dlat=d_lat[1],
        cos_lat=cos_lat,
        center=center,
    )
