import json

import pytest

from artselect import cursor
from artselect.config import apply_config, load_config
from artselect.sources import artic


@pytest.fixture
def restore_globals():
    saved = (artic.API_URL, list(artic.FIELDS), artic.TIMEOUT, artic.RETRIES, cursor.DEFAULT_PAGE_SIZE)
    yield
    artic.API_URL, artic.FIELDS, artic.TIMEOUT, artic.RETRIES, cursor.DEFAULT_PAGE_SIZE = saved


def test_apply_config_overrides(tmp_path, restore_globals):
    cfg_path = tmp_path / "cfg.json"
    cfg = {
        "api_url": "http://localhost:9000/artworks",
        "fields": ["id", "title"],
        "timeout": 3,
        "retries": 2,
        "page_size": 25,
    }
    cfg_path.write_text(json.dumps(cfg), encoding="utf-8")

    apply_config(load_config(cfg_path))

    assert artic.API_URL == "http://localhost:9000/artworks"
    assert artic.FIELDS == ["id", "title"]
    assert artic.TIMEOUT == 3.0
    assert artic.RETRIES == 2
    assert cursor.DEFAULT_PAGE_SIZE == 25
    assert cursor.PageCursor(source=None).page_size == 25


def test_load_config_missing_file(tmp_path):
    assert load_config(tmp_path / "nope.json") == {}


def test_load_config_broken_file(tmp_path, caplog):
    cfg_path = tmp_path / "cfg.json"
    cfg_path.write_text("{not json", encoding="utf-8")
    assert load_config(cfg_path) == {}
    assert "Ignoring unreadable config" in caplog.text


def test_zero_retries_still_makes_one_attempt(restore_globals):
    apply_config({"retries": 0})
    assert artic.RETRIES == 1


def test_invalid_page_size_is_rejected(restore_globals):
    with pytest.raises(ValueError):
        apply_config({"page_size": 0})
    assert cursor.DEFAULT_PAGE_SIZE == 10
