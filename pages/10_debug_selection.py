import requests
import streamlit as st

from artselect import tracer
from artselect.errors import ArtselectError
from artselect.session import SelectionSession
from artselect.sources.memory import InMemoryRecordSource

DEBUG_KEY = "debug_selection_session"


def get_debug_session(records: int, fail_page: int) -> SelectionSession:
    sig = (records, fail_page)
    if st.session_state.get(f"{DEBUG_KEY}_sig") != sig:
        source = InMemoryRecordSource.with_size(
            records, fail_pages=[fail_page] if fail_page else None
        )
        session = SelectionSession(source)
        try:
            session.start()
        except requests.RequestException as e:
            st.error(f"first page failed: {e}")
        st.session_state[DEBUG_KEY] = session
        st.session_state[f"{DEBUG_KEY}_sig"] = sig
    return st.session_state[DEBUG_KEY]


st.title("Debug: Selection State")
st.caption("Offline dataset. Every state change is traced below.")

n_records = st.sidebar.number_input("dataset size", min_value=0, value=25, step=1)
failing = st.sidebar.number_input("failing page (0 = none)", min_value=0, value=0, step=1)
session = get_debug_session(int(n_records), int(failing))

cols = st.columns(4)
target = None
if cols[0].button("Previous", disabled=session.cursor.page_number <= 1):
    target = session.cursor.page_number - 1
if cols[1].button("Next", disabled=session.cursor.page_number >= session.cursor.page_count):
    target = session.cursor.page_number + 1
if target is not None:
    try:
        session.go_to_page(target)
    except (ArtselectError, requests.RequestException) as e:
        st.error(f"fetch failed: {e}")
if cols[2].button(session.select_all_label):
    session.on_select_all_on_page()
count = cols[3].text_input("bulk count", value="12")
if cols[3].button("Bulk select"):
    try:
        session.on_bulk_select_submit(count)
    except ArtselectError as e:
        st.error(str(e))

for record, selected in session.rows():
    st.checkbox(
        label=record.title or str(record.id),
        key=f"sel_{record.id}_{session.store.version}",
        value=selected,
        on_change=session.on_row_checkbox_toggle,
        args=(record,),
    )

st.json(
    {
        "page": session.cursor.page_number,
        "total_records": session.total_records,
        "all_page_selected": session.all_page_selected,
        "selection_version": session.store.version,
        "selected_ids": sorted(session.store.ids(), key=str),
        "last_fill": session.bulk.last_report.model_dump() if session.bulk.last_report else None,
        "fetch_calls": session.source.calls,
    }
)
st.dataframe(tracer.recent(50)[::-1], use_container_width=True)
