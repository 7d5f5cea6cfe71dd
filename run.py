#!/usr/bin/env python3
"""Tissot - distortion indicatrices for world map projections.

Starts a Flask server and opens the browser to the map UI.
"""

import logging
import os
import threading
import webbrowser

from tissot.server import app

PORT = int(os.environ.get("PORT", 5050))
HOST = os.environ.get("HOST", "127.0.0.1")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()


def open_browser():
    webbrowser.open(f"http://127.0.0.1:{PORT}")


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # Only open browser in local development mode
    if HOST == "127.0.0.1" and os.environ.get("FLASK_ENV") != "production":
        threading.Timer(1.0, open_browser).start()
    app.run(host=HOST, port=PORT, debug=False)
