from __future__ import annotations
import os
from typing import Optional

import psutil

from .log import get_logger

log = get_logger("drives")

def volume_usage(path: str) -> Optional[dict]:
    """Disk usage of the volume holding ``path``, or None if unavailable."""
    try:
        u = psutil.disk_usage(os.path.abspath(path))
    except OSError as e:
        log.debug("no volume usage for %s: %s", path, e)
        return None
    return {
        "path": os.path.abspath(path),
        "total": int(u.total),
        "used": int(u.used),
        "free": int(u.free),
        "percent": float(u.percent),
    }
