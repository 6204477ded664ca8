"""
Runtime configuration.

Paths default to folders next to the package; each value can be overridden
through the environment before the process starts.

PORT, HOST : where the HTTP server listens (PORT, HOST).
DATA_DIR : directory of the source CSV tables (WILAYAH_DATA_DIR).
OUTPUT_DIR : directory the JSON tree is generated into and served from (WILAYAH_OUTPUT_DIR).
API_PREFIX : URL prefix the JSON tree is served under.
"""

import os

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
APP_ROOT = os.path.dirname(PACKAGE_DIR)

PORT = int(os.environ.get('PORT', 3000))
HOST = os.environ.get('HOST', '0.0.0.0')

DATA_DIR = os.environ.get('WILAYAH_DATA_DIR', os.path.join(APP_ROOT, 'data'))
OUTPUT_DIR = os.environ.get('WILAYAH_OUTPUT_DIR', os.path.join(APP_ROOT, 'static', 'api'))

API_PREFIX = '/api'
