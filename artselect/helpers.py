import json
import logging
import math
import random
import re
import time
import uuid
from typing import Any, Dict, Mapping, Optional

import requests

from .errors import BulkCountError

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_count(text: Optional[str]) -> int:
    """Parse the bulk selection input box into a positive integer.

    Only the leading integer part of ``text`` is considered, so ``"12"`` and
    ``"12 rows"`` both yield ``12``.  Anything without a leading integer, or a
    value below one, raises :class:`BulkCountError`.
    """

    if text is None:
        raise BulkCountError(text)
    match = _LEADING_INT.match(str(text))
    if not match:
        raise BulkCountError(text)
    count = int(match.group(1))
    if count <= 0:
        raise BulkCountError(text)
    return count


def validate_count(value: Any) -> int:
    """Return ``value`` as a positive ``int`` or raise :class:`BulkCountError`."""
    if isinstance(value, bool):
        raise BulkCountError(value)
    if isinstance(value, int):
        if value <= 0:
            raise BulkCountError(value)
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            raise BulkCountError(value)
        return validate_count(int(value))
    if isinstance(value, str):
        return parse_count(value)
    raise BulkCountError(value)


def safe_request(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    retries: int = 1,
    session: Optional[requests.Session] = None,
    delay: float = 1.0,
    timeout: float = 15,
    metrics: Optional[Dict[str, Any]] = None,
) -> requests.Response:
    """Make an HTTP GET request with logging and basic metrics.

    A single attempt is made by default; callers decide their own retry
    policy by raising ``retries``.
    """
    sess = session or requests.Session()
    backoff = delay
    for attempt in range(retries):
        request_id = uuid.uuid4().hex[:8]
        start = time.time()
        try:
            response = sess.get(url, params=params, timeout=timeout)
            latency = time.time() - start
            if metrics is not None:
                metrics.setdefault("latencies", []).append(latency)
                metrics["requests"] = metrics.get("requests", 0) + 1
            log_data = {
                "event": "request",
                "url": url,
                "params": dict(params or {}),
                "status": response.status_code,
                "attempt": attempt + 1,
                "latency": round(latency, 2),
                "request_id": request_id,
            }
            logger.info(json.dumps(log_data, default=str))
            response.raise_for_status()
            return response
        except requests.RequestException as e:
            latency = time.time() - start
            if metrics is not None:
                metrics.setdefault("latencies", []).append(latency)
                metrics["requests"] = metrics.get("requests", 0) + 1
                metrics["errors"] = metrics.get("errors", 0) + 1
            log_data = {
                "event": "request_error",
                "url": url,
                "attempt": attempt + 1,
                "error": str(e),
                "latency": round(latency, 2),
                "request_id": request_id,
            }
            logger.warning(json.dumps(log_data))
            if attempt == retries - 1:
                raise
            wait = backoff + random.uniform(0, delay)
            time.sleep(wait)
            backoff *= 2
    raise requests.RequestException(f"Failed to fetch {url} after {retries} attempts")
