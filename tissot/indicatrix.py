"""Tissot indicatrix at a single point: stability guard and pipeline."""

import math
from dataclasses import dataclass

from .config import EstimatorConfig
from .jacobian import PlanarPoint, Projection, Skip, estimate_jacobian
from .metric import Eigen, build_metric, solve_eigen


@dataclass(frozen=True)
class GeographicPoint:
    longitude: float   # degrees
    latitude: float    # degrees, [-90, 90]


@dataclass(frozen=True)
class IndicatrixDescriptor:
    """Ellipse of distortion at one sample, ready for a renderer.

    ``major_scale`` and ``minor_scale`` are the stretch factors along the
    principal axes; equal values mean the map is locally conformal.
    ``angle_degrees`` orients the major axis in the canvas rotation sense.
    """

    center: PlanarPoint
    major_scale: float
    minor_scale: float
    angle_degrees: float
    source: GeographicPoint

    @property
    def area_scale(self) -> float:
        return self.major_scale * self.minor_scale

    @property
    def angular_distortion(self) -> float:
        """Maximum angular deformation, in degrees."""
        a, b = self.major_scale, self.minor_scale
        return math.degrees(2 * math.asin((a - b) / (a + b)))

    def is_conformal(self, rel_tol: float = 1e-6) -> bool:
        return math.isclose(self.major_scale, self.minor_scale, rel_tol=rel_tol)

    def to_dict(self) -> dict:
        return {
            "center": list(self.center),
            "major_scale": self.major_scale,
            "minor_scale": self.minor_scale,
            "angle_degrees": self.angle_degrees,
            "longitude": self.source.longitude,
            "latitude": self.source.latitude,
            "area_scale": self.area_scale,
            "angular_distortion": self.angular_distortion,
        }


def guard(eigen: Eigen, center: PlanarPoint | None, source: GeographicPoint,
          config: EstimatorConfig = EstimatorConfig(),
          ) -> IndicatrixDescriptor | Skip:
    """Decide whether a solved sample is usable and build its descriptor."""
    major_scale = eigen.major_scale
    minor_scale = eigen.minor_scale
    if not (math.isfinite(major_scale) and math.isfinite(minor_scale)):
        return Skip.OUT_OF_RANGE
    if major_scale > config.scale_ceiling or minor_scale > config.scale_ceiling:
        return Skip.OUT_OF_RANGE
    if center is None:
        return Skip.CENTER_UNDEFINED

    return IndicatrixDescriptor(
        center=center,
        major_scale=major_scale,
        minor_scale=minor_scale,
        angle_degrees=eigen.angle_degrees,
        source=source,
    )


def calculate_indicatrix(project: Projection, lon: float, lat: float,
                         config: EstimatorConfig = EstimatorConfig(),
                         ) -> IndicatrixDescriptor | Skip:
    jac = estimate_jacobian(project, lon, lat, config)
    if isinstance(jac, Skip):
        return jac
    eigen = solve_eigen(build_metric(jac), config)
    if isinstance(eigen, Skip):
        return eigen
    return guard(eigen, jac.center, GeographicPoint(lon, lat), config)
