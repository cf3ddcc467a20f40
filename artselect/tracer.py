import json
import logging
import time
from collections import deque
from typing import Any, Deque, Dict, List

logger = logging.getLogger(__name__)

MAX_EVENTS = 200
_EVENTS: Deque[Dict[str, Any]] = deque(maxlen=MAX_EVENTS)


def jdump(obj: Any) -> str:
    try:
        return json.dumps(obj, default=str, sort_keys=True)
    except (TypeError, ValueError) as e:
        return f"<nonjson:{type(obj).__name__}:{e}>"


def trace(tag: str, **kvs: Any) -> None:
    """Record a state transition for the debug page and the DEBUG log."""
    ts = time.time()
    _EVENTS.append({"ts": round(ts, 3), "tag": tag, **kvs})
    logger.debug("%.3f [%s] %s", ts, tag, jdump(kvs))


def recent(limit: int = 50) -> List[Dict[str, Any]]:
    """Return the last ``limit`` traced events, newest last."""
    if limit <= 0:
        return []
    return list(_EVENTS)[-limit:]


def clear() -> None:
    _EVENTS.clear()
