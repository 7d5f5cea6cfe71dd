"""Distortion classes: DXF layers, line weights, ACI colors and preview colors."""

from dataclasses import dataclass

from .indicatrix import IndicatrixDescriptor


@dataclass(frozen=True)
class EllipseStyle:
    layer: str
    lineweight: int              # hundredths of mm
    color: int                   # AutoCAD Color Index
    rgb: tuple[int, int, int]    # preview fill/outline


# Keyed by distortion class; bounds are maximum angular distortion in degrees.
STYLES: dict[str, EllipseStyle] = {
    "conformal": EllipseStyle("TISSOT-CONFORMAL", 18, 3, (34, 139, 34)),   # green
    "moderate":  EllipseStyle("TISSOT-MODERATE", 25, 2, (230, 160, 0)),    # yellow
    "severe":    EllipseStyle("TISSOT-SEVERE", 35, 1, (220, 20, 20)),      # red
}

CLASS_BOUNDS = [
    ("conformal", 1.0),
    ("moderate", 20.0),
]


def classify(desc: IndicatrixDescriptor) -> str:
    omega = desc.angular_distortion
    for name, bound in CLASS_BOUNDS:
        if omega < bound:
            return name
    return "severe"


def get_style(desc: IndicatrixDescriptor) -> EllipseStyle:
    return STYLES[classify(desc)]
