"""Configuration helpers for the artwork browser."""

from __future__ import annotations

from pathlib import Path
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from *path* if it exists.

    Parameters
    ----------
    path:
        Optional path to a JSON configuration file. When omitted the function
        looks for ``config.json`` in the repository root.  A missing or
        unreadable file results in an empty config dictionary.
    """

    cfg_path = path or DEFAULT_CONFIG_PATH
    try:
        with open(cfg_path, encoding="utf-8") as fh:
            data = json.load(fh)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", cfg_path, e)
        return {}
    return data if isinstance(data, dict) else {}


def apply_config(config: Dict[str, Any]) -> None:
    """Apply configuration values to module level defaults.

    Supported keys in *config*:

    ``api_url``: artworks endpoint used by :class:`ArticRecordSource`.
    ``fields``: list of fields requested from the API (empty list: all).
    ``timeout``: request timeout in seconds.
    ``retries``: attempts per page request (``1`` disables retrying).
    ``page_size``: rows per page for new sessions and bulk fills.
    """

    from . import cursor
    from .sources import artic

    if config.get("api_url"):
        artic.API_URL = str(config["api_url"])
    fields = config.get("fields")
    if isinstance(fields, list):
        artic.FIELDS = [str(f) for f in fields]
    if "timeout" in config:
        artic.TIMEOUT = float(config["timeout"])
    if "retries" in config:
        artic.RETRIES = max(int(config["retries"]), 1)
    if "page_size" in config:
        size = int(config["page_size"])
        if size < 1:
            raise ValueError(f"page_size must be positive, got {size}")
        cursor.DEFAULT_PAGE_SIZE = size
