"""Runtime configuration defaults for order files and logging."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# None lets tempfile pick the system temp directory.
ORDER_DIR = os.environ.get("TAKEAWAY_ORDER_DIR", "").strip() or None
ORDER_FILE_PREFIX = "order"
ORDER_FILE_SUFFIX = ".yml"

DEBUG_LOG_PATH = os.environ.get("TAKEAWAY_DEBUG_LOG", "").strip() or str(
    Path(tempfile.gettempdir()) / "takeaway-debug.log"
)
LOG_LEVEL = os.environ.get("TAKEAWAY_LOG_LEVEL", "INFO").strip().upper() or "INFO"
