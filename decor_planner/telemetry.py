import json
import os
import time
from typing import Any, Dict, Optional

LOG_FILE = os.getenv("PLANNER_TELEMETRY_PATH", os.path.join(os.path.dirname(__file__), "telemetry.log"))
ENABLED = os.getenv("PLANNER_TELEMETRY_ENABLED", "1").lower() not in ("0", "false", "no")

def log_event(event: Dict[str, Any], path: Optional[str] = None) -> None:
    """Append one telemetry event (layout requests, renders, edits) as a JSON line."""
    if not ENABLED:
        return
    event.setdefault("timestamp", time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()))
    try:
        with open(path or LOG_FILE, "a", encoding="utf-8") as f:
            f.write(json.dumps(event) + "\n")
    except OSError as e:
        # Telemetry must never break a request
        print(f"[Telemetry] Failed to log event: {e}")
