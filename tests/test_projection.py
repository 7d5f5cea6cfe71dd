"""Tests for the pyproj-backed canvas projections."""
import pytest

from tissot.config import EstimatorConfig, GridConfig
from tissot.grid import sample_grid
from tissot.indicatrix import IndicatrixDescriptor, calculate_indicatrix
from tissot.jacobian import Skip
from tissot.projection import PROJECTIONS, CanvasProjection, _graticule

WIDTH = HEIGHT = 600


@pytest.fixture(params=sorted(PROJECTIONS))
def projection(request):
    return CanvasProjection(request.param, WIDTH, HEIGHT)


def test_unknown_projection():
    with pytest.raises(ValueError):
        CanvasProjection("gnomonic")


def test_origin_lands_at_canvas_center(projection):
    x, y = projection(0, 0)
    assert x == pytest.approx(WIDTH / 2, abs=1e-6)
    assert y == pytest.approx(HEIGHT / 2, abs=1e-6)


def test_world_fits_canvas(projection):
    fit_lat = PROJECTIONS[projection.name]["fit_lat"]
    for lon, lat in _graticule(fit_lat):
        pt = projection(lon, lat)
        if pt is None:
            continue
        assert -1e-6 <= pt[0] <= WIDTH + 1e-6
        assert -1e-6 <= pt[1] <= HEIGHT + 1e-6


def test_north_is_up(projection):
    assert projection(0, 30)[1] < projection(0, 0)[1]


def test_orthographic_far_side_is_undefined():
    ortho = CanvasProjection("orthographic", WIDTH, HEIGHT)
    assert ortho(180, 0) is None
    assert ortho(120, 10) is None
    assert calculate_indicatrix(ortho, 150, 0) is Skip.INSUFFICIENT_NEIGHBORS


def test_mercator_is_conformal():
    merc = CanvasProjection("mercator", WIDTH, HEIGHT)
    for lon, lat in [(0, 0), (30, 45), (-100, -60), (150, 75)]:
        desc = calculate_indicatrix(merc, lon, lat)
        assert desc.is_conformal(1e-6)


def test_equirectangular_stretches_parallels():
    eqc = CanvasProjection("equirectangular", WIDTH, HEIGHT)
    desc = calculate_indicatrix(eqc, 20, 60)
    assert desc.major_scale / desc.minor_scale == pytest.approx(2.0, rel=1e-6)
    assert desc.angle_degrees == pytest.approx(0.0, abs=1e-9)


def test_azimuthal_equal_area_preserves_area():
    laea = CanvasProjection("azimuthal", WIDTH, HEIGHT)
    reference = calculate_indicatrix(laea, 0, 0).area_scale
    for lon, lat in [(40, 30), (-70, -50), (100, 20)]:
        desc = calculate_indicatrix(laea, lon, lat)
        assert desc.area_scale == pytest.approx(reference, rel=1e-5)


def test_mercator_antimeridian_with_canvas_seam_threshold():
    merc = CanvasProjection("mercator", WIDTH, HEIGHT)
    reference = calculate_indicatrix(merc, 0, 45)

    desc = calculate_indicatrix(merc, -180, 45, EstimatorConfig.for_canvas(WIDTH))
    assert isinstance(desc, IndicatrixDescriptor)
    assert desc.major_scale == pytest.approx(reference.major_scale, rel=1e-6)

    naive = EstimatorConfig(seam_threshold=1e9)
    assert calculate_indicatrix(merc, -180, 45, naive) is Skip.OUT_OF_RANGE


def test_every_projection_yields_ordered_descriptors(projection):
    result = sample_grid(projection, GridConfig(spacing_degrees=30),
                         EstimatorConfig.for_canvas(WIDTH))
    assert result
    for desc in result:
        assert desc.major_scale >= desc.minor_scale > 0
