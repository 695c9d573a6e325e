"""Pytest configuration and shared fixtures."""
from pathlib import Path

# Project root is two levels up from this file
PROJECT_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DATA_DIR = PROJECT_ROOT / "src" / "sea_routing" / "data"
SAMPLE_NETWORK_FILE = PACKAGE_DATA_DIR / "sample_network.geojson"
