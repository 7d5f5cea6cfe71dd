"""Metric tensor of a local Jacobian and its closed-form eigen-decomposition."""

import math
from dataclasses import dataclass

from .config import EstimatorConfig
from .jacobian import LocalJacobian, Skip


@dataclass(frozen=True)
class MetricTensor:
    m11: float
    m12: float   # == m21
    m22: float


@dataclass(frozen=True)
class Eigen:
    major: float
    minor: float
    angle_degrees: float   # major-axis orientation, canvas rotation sense

    @property
    def major_scale(self) -> float:
        return math.sqrt(self.major)

    @property
    def minor_scale(self) -> float:
        return math.sqrt(self.minor)


def build_metric(jac: LocalJacobian) -> MetricTensor:
    """Form M = A·Aᵀ from the Jacobian rescaled to equal physical distances.

    A degree of longitude spans cos(lat) times the ground distance of a
    degree of latitude, so the longitude partials are divided by cos(lat).
    """
    a11 = jac.dx_dlon / jac.cos_lat
    a12 = jac.dx_dlat
    a21 = jac.dy_dlon / jac.cos_lat
    a22 = jac.dy_dlat
    return MetricTensor(
        m11=a11 * a11 + a12 * a12,
        m12=a11 * a21 + a12 * a22,
        m22=a21 * a21 + a22 * a22,
    )


def solve_eigen(m: MetricTensor,
                config: EstimatorConfig = EstimatorConfig()) -> Eigen | Skip:
    """Eigenvalues of a symmetric 2x2 tensor and the major eigenvector angle."""
    trace = m.m11 + m.m22
    det = m.m11 * m.m22 - m.m12 * m.m12
    half = trace / 2
    disc = max(0.0, half * half - det)  # roundoff can push it negative
    root = math.sqrt(disc)
    major = half + root
    minor = half - root

    if not (major > 0 and minor > 0) or not math.isfinite(major + minor):
        return Skip.NON_POSITIVE_DEFINITE

    # (M - major*I) v = 0
    vx = m.m12
    vy = major - m.m11
    if abs(vx) + abs(vy) < config.degeneracy_floor:
        vx = major - m.m22
        vy = m.m12

    return Eigen(
        major=major,
        minor=minor,
        angle_degrees=math.degrees(math.atan2(vy, vx)),
    )
