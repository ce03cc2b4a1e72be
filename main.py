#!/usr/bin/env python3
"""
RateFinder - Freight rate search backend
========================================

Single-command run:  python main.py

See config.py for all environment-variable tunables.
"""

from __future__ import annotations

import logging
import sys

from flask import Flask, jsonify, request
from flask_cors import CORS

import config
from dataset import DatasetError, load_dataset
from services import SUGGEST_EXT, RATES_EXT, SuggestService, RatesClient
from api import api_bp
from ui import ui_bp


def create_app(overrides: dict | None = None) -> Flask:
    """
    Flask application factory.

    ``overrides`` may carry DATASET (a prebuilt Dataset), DATASET_PATH or
    RATES_BACKEND_URL; anything else is copied into app.config.
    """
    overrides = dict(overrides or {})

    app = Flask(__name__)
    app.secret_key = config.SECRET
    app.json.sort_keys = False

    dataset = overrides.pop("DATASET", None)
    dataset_path = overrides.pop("DATASET_PATH", config.DATASET_PATH)
    rates_url = overrides.pop("RATES_BACKEND_URL", config.RATES_BACKEND_URL)
    app.config.update(overrides)

    # ── Load the location dataset (once) ────────────────────────────
    if dataset is None:
        try:
            dataset = load_dataset(dataset_path, config.FIELD_SAMPLE_SIZE)
        except DatasetError as e:
            print(f"FATAL: {e}")
            sys.exit(1)
    print(f"  Dataset: {len(dataset)} records, "
          f"search column: {dataset.search_field}")

    app.extensions[SUGGEST_EXT] = SuggestService(dataset)
    app.extensions[RATES_EXT] = RatesClient(rates_url, config.RATES_TIMEOUT)

    # ── CORS + blueprints ───────────────────────────────────────────
    CORS(app, origins=config.CORS_ORIGINS)
    app.register_blueprint(api_bp)
    app.register_blueprint(ui_bp)

    # ── Error handlers ──────────────────────────────────────────────
    # Unmatched URLs never reach a blueprint, so 404/405 live on the app
    @app.errorhandler(404)
    def _404(e):
        return jsonify({"error": "not found", "path": request.path}), 404

    @app.errorhandler(405)
    def _405(e):
        return jsonify({"error": "method not allowed"}), 405

    @app.errorhandler(500)
    def _500(e):
        return jsonify({"error": "internal server error"}), 500

    return app


def main():
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 56)
    print("  RateFinder - Freight Rate Search")
    print("=" * 56)

    app = create_app()

    print(f"\n  http://{config.HOST}:{config.PORT}")
    print(f"  Suggest: http://{config.HOST}:{config.PORT}/api/suggest?q=sh")
    print(f"  Rates backend: {config.RATES_BACKEND_URL}")
    print("=" * 56)

    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
