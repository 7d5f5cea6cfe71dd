"""Flask application serving indicatrices as JSON, PNG preview and DXF."""

import io
import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify, request, send_file

from .config import ALLOWED_SPACINGS, EstimatorConfig, GridConfig
from .dxf_builder import build_dxf
from .grid import iter_grid, sample_grid
from .projection import PROJECTIONS, CanvasProjection
from .render import render_png

logger = logging.getLogger(__name__)

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(BASE_DIR, "static")

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 600
MIN_BASE_RADIUS = 1
MAX_BASE_RADIUS = 8


class RequestError(ValueError):
    pass


def _parse_args(args) -> tuple[str, GridConfig, bool]:
    """Read projection, grid spacing, base radius and display toggle."""
    projection = args.get("projection", "mercator")
    try:
        spacing = int(args.get("spacing", 30))
        radius = float(args.get("radius", 3))
    except (TypeError, ValueError) as exc:
        raise RequestError(f"Invalid parameters: {exc}") from exc
    show = args.get("show", "true").lower() not in ("0", "false", "no")

    if projection not in PROJECTIONS:
        raise RequestError(f"projection must be one of {list(PROJECTIONS)}")
    if spacing not in ALLOWED_SPACINGS:
        raise RequestError(f"spacing must be one of {list(ALLOWED_SPACINGS)}")
    if not MIN_BASE_RADIUS <= radius <= MAX_BASE_RADIUS:
        raise RequestError(f"radius must be between {MIN_BASE_RADIUS} and {MAX_BASE_RADIUS}")

    return projection, GridConfig(spacing_degrees=spacing, base_radius_scale=radius), show


def _compute(project: CanvasProjection, grid: GridConfig):
    config = EstimatorConfig.for_canvas(CANVAS_WIDTH)
    return sample_grid(project, grid, config)


def _canvas_projection(name: str) -> CanvasProjection:
    return CanvasProjection(name, CANVAS_WIDTH, CANVAS_HEIGHT)


@app.errorhandler(RequestError)
def bad_request(exc):
    return jsonify({"error": str(exc)}), 400


@app.route("/")
def index():
    return app.send_static_file("index.html")


@app.route("/api/projections")
def projections():
    return jsonify([
        {"name": name, "label": cfg["label"]}
        for name, cfg in PROJECTIONS.items()
    ])


@app.route("/api/indicatrices")
def indicatrices():
    projection, grid, _ = _parse_args(request.args)
    descriptors = _compute(_canvas_projection(projection), grid)
    return jsonify({
        "projection": projection,
        "spacing": grid.spacing_degrees,
        "canvas": [CANVAS_WIDTH, CANVAS_HEIGHT],
        "requested": sum(1 for _ in iter_grid(grid)),
        "accepted": len(descriptors),
        "indicatrices": [d.to_dict() for d in descriptors],
    })


@app.route("/api/preview.png")
def preview():
    projection, grid, show = _parse_args(request.args)
    project = _canvas_projection(projection)
    descriptors = _compute(project, grid) if show else []
    png_bytes = render_png(descriptors, CANVAS_WIDTH, CANVAS_HEIGHT,
                           grid.base_radius_scale, project=project)
    return send_file(io.BytesIO(png_bytes), mimetype="image/png")


@app.route("/api/export")
def export():
    projection, grid, _ = _parse_args(request.args)
    labels = request.args.get("labels", "true").lower() not in ("0", "false", "no")
    descriptors = _compute(_canvas_projection(projection), grid)
    doc = build_dxf(descriptors, CANVAS_WIDTH, CANVAS_HEIGHT,
                    grid.base_radius_scale, labels=labels)

    # ezdxf.write requires a text stream
    dxf_stream = io.StringIO()
    doc.write(dxf_stream)
    dxf_bytes = dxf_stream.getvalue().encode("utf-8")

    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    dxf_filename = f"tissot_{projection}_{grid.spacing_degrees}deg_{ts}.dxf"
    logger.info(f"Exporting {len(descriptors)} indicatrices to {dxf_filename}")
    return send_file(
        io.BytesIO(dxf_bytes),
        download_name=dxf_filename,
        as_attachment=True,
        mimetype="application/dxf",
    )
