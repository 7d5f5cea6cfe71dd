"""Tunable thresholds for the estimator and the sampling grid."""

from dataclasses import dataclass

# Seam threshold as a fraction of canvas width, for fitted world maps.
SEAM_WIDTH_FRACTION = 0.5

# Spacings offered by the UI, in degrees.
ALLOWED_SPACINGS = (15, 30, 45, 60)


@dataclass(frozen=True)
class EstimatorConfig:
    delta: float = 1e-3              # finite-difference step, degrees (~100 m)
    seam_threshold: float = 3000.0   # canvas units; larger x jumps are a seam
    cos_lat_floor: float = 1e-3      # ~0.06 degrees from a pole
    scale_ceiling: float = 10000.0
    degeneracy_floor: float = 1e-12

    def __post_init__(self):
        if not self.delta > 0:
            raise ValueError(f"delta must be positive, got {self.delta}")
        if not self.seam_threshold > 0:
            raise ValueError(f"seam_threshold must be positive, got {self.seam_threshold}")

    @classmethod
    def for_canvas(cls, width: float, **overrides) -> "EstimatorConfig":
        """Derive the seam threshold from the canvas width.

        A world map wrapping at the antimeridian jumps by about one canvas
        width, while a genuine step of ``delta`` moves a fraction of a unit,
        so half the width separates the two on any canvas.
        """
        overrides.setdefault("seam_threshold", width * SEAM_WIDTH_FRACTION)
        return cls(**overrides)


@dataclass(frozen=True)
class GridConfig:
    spacing_degrees: float = 30
    base_radius_scale: float = 3.0   # renderer only
    lat_min: float = -80.0
    lat_max: float = 80.0
    lon_min: float = -180.0
    lon_max: float = 180.0           # exclusive

    def __post_init__(self):
        if not self.spacing_degrees > 0:
            raise ValueError(f"spacing_degrees must be positive, got {self.spacing_degrees}")
        if not self.base_radius_scale > 0:
            raise ValueError(f"base_radius_scale must be positive, got {self.base_radius_scale}")
        if self.lat_min > self.lat_max or self.lon_min >= self.lon_max:
            raise ValueError("grid bounds are inverted")
