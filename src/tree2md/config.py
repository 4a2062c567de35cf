"""Local configuration for tree2md."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".tree2md_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "tree2md/0.1"

_TRUTHY = {"1", "true", "yes", "on"}

# Strict pre-order validation before serializing; off keeps best-effort output.
TREE2MD_VALIDATE_SEQUENCE = os.getenv("TREE2MD_VALIDATE_SEQUENCE", "false").strip().lower() in _TRUTHY

# Local-only cache directory for fetched documents.
TREE2MD_CACHE_PATH = Path(os.getenv("TREE2MD_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
TREE2MD_CACHE_TTL_SECONDS = int(os.getenv("TREE2MD_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
TREE2MD_FETCH_TIMEOUT_S = float(os.getenv("TREE2MD_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
TREE2MD_FETCH_MAX_RETRIES = int(os.getenv("TREE2MD_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
TREE2MD_FETCH_BACKOFF_S = float(os.getenv("TREE2MD_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
TREE2MD_USER_AGENT = os.getenv("TREE2MD_USER_AGENT", DEFAULT_USER_AGENT)
