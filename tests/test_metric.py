"""Tests for the metric tensor and the 2x2 eigen solver."""
import math
import random

import pytest

from tissot.jacobian import LocalJacobian, Skip
from tissot.metric import Eigen, MetricTensor, build_metric, solve_eigen


def _rotated(major, minor, angle_degrees):
    """Tensor with the given eigenvalues and major axis orientation."""
    c = math.cos(math.radians(angle_degrees))
    s = math.sin(math.radians(angle_degrees))
    return MetricTensor(
        m11=major * c * c + minor * s * s,
        m12=(major - minor) * c * s,
        m22=major * s * s + minor * c * c,
    )


def test_longitude_partials_are_divided_by_cos_lat():
    jac = LocalJacobian(dx_dlon=1.0, dy_dlon=0.0, dx_dlat=0.0, dy_dlat=-1.0,
                        cos_lat=0.5, center=(0.0, 0.0))
    assert build_metric(jac) == MetricTensor(m11=4.0, m12=0.0, m22=1.0)


def test_metric_is_a_times_a_transpose():
    jac = LocalJacobian(dx_dlon=1.0, dy_dlon=2.0, dx_dlat=3.0, dy_dlat=4.0,
                        cos_lat=1.0, center=(0.0, 0.0))
    m = build_metric(jac)
    assert (m.m11, m.m12, m.m22) == (10.0, 14.0, 20.0)


def test_axis_aligned_uses_fallback_eigenvector():
    eigen = solve_eigen(MetricTensor(m11=4.0, m12=0.0, m22=1.0))
    assert eigen == Eigen(major=4.0, minor=1.0, angle_degrees=0.0)
    assert eigen.major_scale == 2.0
    assert eigen.minor_scale == 1.0


def test_vertical_major_axis():
    eigen = solve_eigen(MetricTensor(m11=1.0, m12=0.0, m22=4.0))
    assert eigen.major == 4.0
    assert eigen.angle_degrees == pytest.approx(90.0)


@pytest.mark.parametrize("angle", [30.0, 60.0, -45.0, 10.0])
def test_rotated_tensor_orientation(angle):
    eigen = solve_eigen(_rotated(9.0, 4.0, angle))
    assert eigen.major == pytest.approx(9.0)
    assert eigen.minor == pytest.approx(4.0)
    # Axis direction is defined modulo 180 degrees.
    assert math.sin(math.radians(eigen.angle_degrees - angle)) == pytest.approx(0.0, abs=1e-9)


def test_isotropic_tensor():
    eigen = solve_eigen(MetricTensor(m11=2.0, m12=0.0, m22=2.0))
    assert eigen.major == eigen.minor == 2.0


@pytest.mark.parametrize("m", [
    MetricTensor(1.0, 1.0, 1.0),              # singular
    MetricTensor(0.0, 0.0, 0.0),
    MetricTensor(1.0, 0.0, 0.0),
    MetricTensor(math.nan, 0.0, 1.0),
    MetricTensor(math.inf, 0.0, 1.0),
])
def test_degenerate_tensors_are_rejected(m):
    assert solve_eigen(m) is Skip.NON_POSITIVE_DEFINITE


def test_huge_tensor_does_not_raise():
    assert solve_eigen(MetricTensor(1e308, 0.0, 1e308)) is Skip.NON_POSITIVE_DEFINITE


def test_eigenvalue_ordering_over_random_jacobians():
    rng = random.Random(1234)
    for _ in range(2000):
        jac = LocalJacobian(
            dx_dlon=rng.uniform(-50, 50),
            dy_dlon=rng.uniform(-50, 50),
            dx_dlat=rng.uniform(-50, 50),
            dy_dlat=rng.uniform(-50, 50),
            cos_lat=rng.uniform(0.01, 1.0),
            center=(0.0, 0.0),
        )
        eigen = solve_eigen(build_metric(jac))
        if eigen is Skip.NON_POSITIVE_DEFINITE:
            continue
        assert eigen.major >= eigen.minor > 0
        assert eigen.major_scale >= eigen.minor_scale > 0
