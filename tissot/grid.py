"""Regular longitude/latitude grid driven through the indicatrix pipeline."""

import logging
from typing import Iterator

from .config import EstimatorConfig, GridConfig
from .indicatrix import GeographicPoint, IndicatrixDescriptor, calculate_indicatrix
from .jacobian import Projection, Skip

logger = logging.getLogger(__name__)


def iter_grid(grid: GridConfig) -> Iterator[GeographicPoint]:
    """Yield grid points row by row, latitude outer and longitude inner."""
    step = grid.spacing_degrees
    i = 0
    while grid.lat_min + i * step <= grid.lat_max:
        lat = grid.lat_min + i * step
        j = 0
        while grid.lon_min + j * step < grid.lon_max:
            yield GeographicPoint(grid.lon_min + j * step, lat)
            j += 1
        i += 1


def sample_grid(project: Projection, grid: GridConfig = GridConfig(),
                config: EstimatorConfig = EstimatorConfig(),
                ) -> list[IndicatrixDescriptor]:
    """Return the accepted indicatrices over the grid, in row-major order.

    Failed samples are skipped; the caller sees only the shorter list.
    """
    accepted: list[IndicatrixDescriptor] = []
    requested = 0
    for point in iter_grid(grid):
        requested += 1
        result = calculate_indicatrix(project, point.longitude, point.latitude, config)
        if isinstance(result, Skip):
            logger.debug(f"Skipped ({point.longitude}, {point.latitude}): {result.value}")
            continue
        accepted.append(result)

    logger.info(f"Accepted {len(accepted)} of {requested} grid samples "
                f"at {grid.spacing_degrees} degree spacing")
    return accepted
