from types import SimpleNamespace

import pytest
import requests

from artselect.state import SESSION_KEY, ensure_session_state, reset_session_state
from artselect.sources.memory import InMemoryRecordSource


def make_st():
    return SimpleNamespace(session_state={})


def test_session_is_created_once_and_started():
    st = make_st()
    source = InMemoryRecordSource.with_size(25)
    session = ensure_session_state(st, lambda: source)
    assert source.calls == [1]
    assert ensure_session_state(st, lambda: pytest.fail("factory called twice")) is session
    assert st.session_state[SESSION_KEY] is session


def test_selection_survives_reruns():
    st = make_st()
    session = ensure_session_state(st, lambda: InMemoryRecordSource.with_size(25))
    session.on_row_checkbox_toggle(session.cursor.records[0])
    again = ensure_session_state(st)
    assert again.store.is_selected(1)


def test_failing_first_fetch_stores_nothing():
    st = make_st()
    with pytest.raises(requests.ConnectionError):
        ensure_session_state(st, lambda: InMemoryRecordSource.with_size(5, fail_pages=[1]))
    assert SESSION_KEY not in st.session_state


def test_next_call_retries_after_failed_first_fetch():
    st = make_st()
    source = InMemoryRecordSource.with_size(25, fail_pages=[1])
    with pytest.raises(requests.ConnectionError):
        ensure_session_state(st, lambda: source)

    source.fail_pages.clear()
    session = ensure_session_state(st, lambda: source)

    assert source.calls == [1, 1]
    assert session.cursor.page is not None
    assert session.cursor.page_count == 3
    assert st.session_state[SESSION_KEY] is session


def test_reset_session_state_forces_a_new_session():
    st = make_st()
    first = ensure_session_state(st, lambda: InMemoryRecordSource.with_size(5))
    reset_session_state(st)
    assert SESSION_KEY not in st.session_state
    assert ensure_session_state(st, lambda: InMemoryRecordSource.with_size(5)) is not first
    reset_session_state(st)
    reset_session_state(st)
