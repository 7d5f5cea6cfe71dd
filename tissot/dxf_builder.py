"""DXF generation: indicatrix ellipses per distortion layer, labels, border."""

import ezdxf
from ezdxf.enums import TextEntityAlignment

from .indicatrix import IndicatrixDescriptor
from .shapes import clip_to_canvas, ellipse_polygon
from .styles import STYLES, get_style

BORDER_LAYER = "TISSOT-BORDER"
LABEL_LAYER = "TISSOT-LABELS"


def _to_dxf(pts: list[tuple[float, float]], height: float) -> list[tuple[float, float]]:
    """Canvas (y down) to drawing (y up) coordinates."""
    return [(x, height - y) for x, y in pts]


def build_dxf(descriptors: list[IndicatrixDescriptor], width: float, height: float,
              base_radius: float, labels: bool = True) -> ezdxf.document.Drawing:
    """Create a DXF document with one closed polyline per indicatrix.

    Ellipses are clipped to the canvas; each lands on the layer of its
    distortion class. Labels give the area scale at the ellipse center.
    """
    doc = ezdxf.new("R2010")
    msp = doc.modelspace()

    doc.layers.add(BORDER_LAYER)
    for style in STYLES.values():
        doc.layers.add(style.layer)
    if labels:
        doc.layers.add(LABEL_LAYER)

    msp.add_lwpolyline(
        [(0, 0), (width, 0), (width, height), (0, height), (0, 0)],
        dxfattribs={"layer": BORDER_LAYER, "color": 7, "lineweight": 50},
    )

    label_height = min(width, height) / 120.0

    for desc in descriptors:
        style = get_style(desc)
        rings = clip_to_canvas(ellipse_polygon(desc, base_radius), width, height)
        for ring in rings:
            msp.add_lwpolyline(
                _to_dxf(ring, height),
                close=True,
                dxfattribs={
                    "layer": style.layer,
                    "color": style.color,
                    "lineweight": style.lineweight,
                },
            )

        if not labels or not rings:
            continue
        cx, cy = desc.center
        msp.add_text(
            f"{desc.area_scale:.2f}",
            height=label_height,
            dxfattribs={"layer": LABEL_LAYER, "color": style.color},
        ).set_placement((cx, height - cy), align=TextEntityAlignment.MIDDLE_CENTER)

    return doc
