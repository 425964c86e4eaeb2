"""Defaults for the catalog and its command-line front end."""

from __future__ import annotations

import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent

DEFAULT_CAPACITY = 16
MAX_LOAD_FACTOR = 0.7
PAGE_SIZE = 10
DELIMITER = ","
FILE_ENCODING = "utf-8-sig"

# Optional file to load at start-up when --file is not given.
_env_file = os.environ.get("COURSE_CATALOG_FILE", "").strip()
DEFAULT_DATA_FILE = Path(_env_file) if _env_file else None
