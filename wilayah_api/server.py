import os
import sys

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.serving import make_server

from wilayah_api import config
from wilayah_api.engine.build_engine import run_generation
from wilayah_api.engine.errors import GenerationError

ENDPOINTS = [
    'provinces.json',
    'province/{id}.json',
    'regencies/{province_id}.json',
    'regency/{id}.json',
    'districts/{regency_id}.json',
    'district/{id}.json',
    'villages/{district_id}.json',
    'village/{id}.json',
]


def create_app(output_dir: str = config.OUTPUT_DIR, prefix: str = config.API_PREFIX) -> Flask:
    # The generated tree is served verbatim as the static folder.
    app = Flask(__name__,
                static_folder=os.path.abspath(output_dir),
                static_url_path=prefix)
    CORS(app, send_wildcard=True)

    @app.route('/')
    def index():
        return jsonify({"endpoints": [f"{prefix}/{endpoint}" for endpoint in ENDPOINTS]})

    return app


def run_server():
    app = create_app(config.OUTPUT_DIR)

    # Bind first so the port is held while the tree is regenerated.
    server = make_server(config.HOST, config.PORT, app)
    try:
        run_generation(config.DATA_DIR, config.OUTPUT_DIR)
    except GenerationError as e:
        print(f"[ERROR] Error generating API endpoints: {e}")
        server.server_close()
        sys.exit(1)

    print(f"Server is running on http://{config.HOST}:{config.PORT}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("Shutting down.")
    finally:
        server.server_close()
