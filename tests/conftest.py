import sys
from pathlib import Path

import pytest

root = Path(__file__).resolve().parents[1]
sys.path.append(str(root))

from artselect import tracer  # noqa: E402
from artselect.session import SelectionSession  # noqa: E402
from artselect.sources.memory import InMemoryRecordSource  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_traces():
    tracer.clear()
    yield
    tracer.clear()


@pytest.fixture
def source25():
    """25 records served as pages of 10, 10 and 5."""
    return InMemoryRecordSource.with_size(25)


@pytest.fixture
def session25(source25):
    session = SelectionSession(source25)
    session.start()
    source25.calls.clear()
    return session
