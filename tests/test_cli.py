import pandas as pd
import pytest

from artselect import cli
from artselect.sources.memory import InMemoryRecordSource


@pytest.fixture
def offline(monkeypatch, tmp_path):
    source = InMemoryRecordSource.with_size(25)
    monkeypatch.setattr(cli, "ArticRecordSource", lambda: source)
    monkeypatch.setattr(cli, "load_config", lambda path=None: {})
    return source


def test_fill_writes_csv(offline, tmp_path, capsys):
    out = tmp_path / "sel.csv"
    assert cli.main(["fill", "12", "--output", str(out)]) == 0
    df = pd.read_csv(out)
    assert df["id"].tolist() == list(range(1, 13))
    assert offline.calls == [1, 2]
    assert "Wrote 12 records" in capsys.readouterr().out


def test_fill_short_dataset_warns(offline, capsys):
    assert cli.main(["fill", "100"]) == 0
    assert "Only 25 of 100" in capsys.readouterr().err


def test_fill_invalid_count(offline, capsys):
    assert cli.main(["fill", "zero"]) == 2
    assert offline.calls == []
    assert "Please enter a valid number" in capsys.readouterr().err


def test_fill_incomplete_exit_code(offline, capsys):
    offline.fail_pages = {2}
    assert cli.main(["fill", "15"]) == 1
    assert "Stopped early" in capsys.readouterr().err


def test_page_prints_rows(offline, capsys):
    assert cli.main(["page", "3"]) == 0
    out = capsys.readouterr().out
    assert "Artwork 25" in out
    assert "Page 3 of 3 (25 records)" in out
