"""World projections fitted to a canvas: (lon, lat) degrees -> canvas units."""

import math
from functools import lru_cache

from pyproj import CRS, Transformer

# Unit sphere; the canvas fit supplies the scale.
GEOGRAPHIC = "+proj=longlat +R=1 +no_defs"

# Projections the user can choose from
PROJECTIONS = {
    "mercator": {
        "proj": "+proj=merc +R=1 +no_defs",
        "label": "Mercator",
        "fit_lat": 85.0,   # Mercator is unbounded at the poles
    },
    "natural": {
        "proj": "+proj=natearth +R=1 +no_defs",
        "label": "Natural Earth",
        "fit_lat": 90.0,
    },
    "orthographic": {
        "proj": "+proj=ortho +lat_0=0 +lon_0=0 +R=1 +no_defs",
        "label": "Orthographic",
        "fit_lat": 90.0,
    },
    "equirectangular": {
        "proj": "+proj=eqc +R=1 +no_defs",
        "label": "Equirectangular",
        "fit_lat": 90.0,
    },
    "azimuthal": {
        "proj": "+proj=laea +lat_0=0 +lon_0=0 +R=1 +no_defs",
        "label": "Azimuthal Equal-Area",
        "fit_lat": 90.0,
    },
}

FIT_STEP_DEGREES = 2.5


@lru_cache(maxsize=None)
def _transformer(name: str) -> Transformer:
    return Transformer.from_crs(
        CRS.from_proj4(GEOGRAPHIC),
        CRS.from_proj4(PROJECTIONS[name]["proj"]),
        always_xy=True,
    )


def _graticule(fit_lat: float) -> list[tuple[float, float]]:
    """Lon/lat nodes spanning the world, used to measure a projection's extent."""
    n_lon = int(round(360 / FIT_STEP_DEGREES))
    n_lat = int(round(2 * fit_lat / FIT_STEP_DEGREES))
    return [
        (-180.0 + i * 360.0 / n_lon, -fit_lat + j * 2 * fit_lat / n_lat)
        for i in range(n_lon + 1)
        for j in range(n_lat + 1)
    ]


class CanvasProjection:
    """Projects WGS84-style lon/lat onto a width x height canvas.

    Fitted like d3's ``fitSize``: the world extent is scaled uniformly to fit
    and centered. X = right, Y = down. Points a projection cannot represent
    (e.g. the far side of an orthographic globe) project to None.
    """

    def __init__(self, name: str, width: float = 600, height: float = 600):
        if name not in PROJECTIONS:
            raise ValueError(f"Unknown projection {name!r}; "
                             f"expected one of {list(PROJECTIONS)}")
        self.name = name
        self.width = width
        self.height = height
        self._transformer = _transformer(name)

        xs, ys = [], []
        for lon, lat in _graticule(PROJECTIONS[name]["fit_lat"]):
            x, y = self._transformer.transform(lon, lat)
            if math.isfinite(x) and math.isfinite(y):
                xs.append(x)
                ys.append(y)
        span_x = max(xs) - min(xs)
        span_y = max(ys) - min(ys)
        self.scale = min(width / span_x, height / span_y)
        self.offset_x = width / 2 - self.scale * (min(xs) + max(xs)) / 2
        self.offset_y = height / 2 + self.scale * (min(ys) + max(ys)) / 2

    @property
    def label(self) -> str:
        return PROJECTIONS[self.name]["label"]

    def __call__(self, lon: float, lat: float) -> tuple[float, float] | None:
        """Return (x, y) in canvas units, or None outside the valid domain."""
        x, y = self._transformer.transform(lon, lat)
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        return (self.offset_x + self.scale * x, self.offset_y - self.scale * y)
