"""
Agri GDP Live — Flask Server
Serves the chart page and the API endpoints it loads from.

Data: one published Google Sheet (CSV export), fetched on every request.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
import requests

import config
from charts import build_charts
from sheet import SheetError, csv_url, load_series

# ─── Setup ───
PROJECT_ROOT = Path(__file__).resolve().parent.parent  # agri-gdp-live/

# static_folder=None keeps Flask from registering a catch-all static route
app = Flask(__name__, static_folder=None)
CORS(app)
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
log = logging.getLogger("agri-gdp-live")

_HTTP_HEADERS = {"User-Agent": "AgriGdpLive/1.0"}


# ═══════════════════════════════════════
# GOOGLE SHEET FETCH
# ═══════════════════════════════════════

def fetch_sheet_text():
    """Download the sheet's CSV export. Raises SheetError on any failure."""
    url = csv_url()
    log.info(f"Fetching sheet CSV: {url}")

    try:
        resp = requests.get(url, headers=_HTTP_HEADERS, timeout=config.SHEET_FETCH_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        log.warning(f"Google Sheets fetch failed: {e}")
        raise SheetError(f"Failed to load data: {e}") from e

    if not resp.ok:
        log.warning(f"Google Sheets returned {resp.status_code} {resp.reason}")
        raise SheetError(f"Failed to load data: {resp.status_code} {resp.reason}")

    resp.encoding = "utf-8"
    return resp.text


def fetch_series():
    """Fetch and parse the sheet into a (year, value) series."""
    series = load_series(fetch_sheet_text())
    log.info(f"Parsed {len(series)} year/value points from sheet")
    return series


def _error(e, status=502):
    log.warning(f"Sheet unavailable: {e}")
    return jsonify({"error": str(e)}), status


# ═══════════════════════════════════════
# ROUTES
# ═══════════════════════════════════════

@app.route("/")
def serve_index():
    """Serve the chart page."""
    return send_from_directory(PROJECT_ROOT, "index.html")


@app.route("/api/charts")
def api_charts():
    """Return both plotly figures (full history + recent years)."""
    try:
        series = fetch_series()
    except SheetError as e:
        return _error(e)
    return jsonify(build_charts(series))


@app.route("/api/series")
def api_series():
    """Return the raw year/value series."""
    try:
        series = fetch_series()
    except SheetError as e:
        return _error(e)
    return jsonify({
        "years": series.years,
        "values": series.values,
        "count": len(series),
    })


@app.route("/api/status")
def api_status():
    """Health check — returns the configured source and year window."""
    return jsonify({
        "ok": True,
        "source": {
            "url": csv_url(),
            "yearColumn": config.YEAR_COLUMN,
            "valueColumn": config.VALUE_COLUMN,
        },
        "recentWindow": [config.RECENT_START_YEAR, config.RECENT_END_YEAR],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


# ═══════════════════════════════════════
# STARTUP
# ═══════════════════════════════════════

if __name__ == "__main__":
    log.info("=" * 50)
    log.info("Agri GDP Live — Starting server")
    log.info(f"Source: Google Sheet {config.SHEET_ID} (gid {config.SHEET_GID})")
    log.info(f"Recent window: {config.RECENT_START_YEAR}-{config.RECENT_END_YEAR}")
    log.info(f"Server: http://localhost:{config.SERVER_PORT}")
    log.info("=" * 50)

    app.run(
        host=config.SERVER_HOST,
        port=config.SERVER_PORT,
        debug=config.DEBUG,
        threaded=True,
    )
