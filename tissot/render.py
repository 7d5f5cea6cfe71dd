"""PNG preview of indicatrices over a projected graticule."""

import io

from PIL import Image, ImageDraw

from .indicatrix import IndicatrixDescriptor
from .jacobian import Projection
from .shapes import clip_to_canvas, ellipse_polygon, graticule_lines
from .styles import get_style

BACKGROUND = (240, 240, 240, 255)
BORDER = (0, 0, 0, 255)
GRATICULE = (150, 150, 150, 255)
FILL_ALPHA = 77       # ~0.3 opacity
OUTLINE_ALPHA = 153   # ~0.6 opacity


def render_image(descriptors: list[IndicatrixDescriptor], width: int, height: int,
                 base_radius: float, project: Projection | None = None) -> Image.Image:
    canvas = Image.new("RGBA", (width, height), BACKGROUND)
    if project is not None:
        base = ImageDraw.Draw(canvas)
        for line in graticule_lines(project, width):
            base.line(line, fill=GRATICULE, width=1)

    overlay = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)

    for desc in descriptors:
        style = get_style(desc)
        for ring in clip_to_canvas(ellipse_polygon(desc, base_radius), width, height):
            draw.polygon(ring, fill=(*style.rgb, FILL_ALPHA),
                         outline=(*style.rgb, OUTLINE_ALPHA))

    canvas = Image.alpha_composite(canvas, overlay)
    ImageDraw.Draw(canvas).rectangle((0, 0, width - 1, height - 1), outline=BORDER)
    return canvas


def render_png(descriptors: list[IndicatrixDescriptor], width: int, height: int,
               base_radius: float, project: Projection | None = None) -> bytes:
    """Draw each indicatrix as a translucent ellipse and return PNG bytes.

    When ``project`` is given, its graticule is drawn underneath.
    """
    image = render_image(descriptors, width, height, base_radius, project)
    buf = io.BytesIO()
    image.convert("RGB").save(buf, format="PNG")
    return buf.getvalue()
