"""Root conftest — shared test configuration."""

import os

# Keep a developer's .env seed file out of the test run
os.environ.setdefault("SEED_DATA_PATH", "")
os.environ.setdefault("LOG_FORMAT", "text")
