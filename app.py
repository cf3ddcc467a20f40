from typing import List

import pandas as pd
import requests
import streamlit as st

from artselect.config import apply_config, load_config
from artselect.errors import ArtselectError, BulkCountError, SessionBusyError
from artselect.models import Artwork
from artselect.session import SelectionSession
from artselect.state import ensure_session_state, reset_session_state

CONFIG = load_config()
PAGE_SIZE_OPTIONS = CONFIG.get("page_size_options", [10, 25, 50])

COLUMN_LABELS = {
    "title": "Title",
    "place_of_origin": "Place of Origin",
    "artist_display": "Artist",
    "inscriptions": "Inscriptions",
    "date_start": "Start Date",
    "date_end": "End Date",
}


def apply_selection_edits(
    session: SelectionSession, display_df: pd.DataFrame, edited_df: pd.DataFrame
) -> List[Artwork]:
    """Toggle every row whose ``Selected`` checkbox changed in the editor.

    Returns the records that were toggled.  Rows are matched on ``id`` so a
    reordered editor frame still maps back to the right artwork.
    """

    if edited_df["Selected"].equals(display_df["Selected"]):
        return []
    by_id = {r.id: r for r in session.cursor.records}
    before = dict(zip(display_df["id"], display_df["Selected"]))
    toggled = []
    for record_id, new in zip(edited_df["id"], edited_df["Selected"]):
        record = by_id.get(record_id)
        if record is None or bool(before.get(record_id)) == bool(new):
            continue
        if session.store.is_selected(record.id) != bool(new):
            session.on_row_checkbox_toggle(record)
            toggled.append(record)
    return toggled


def page_label(session: SelectionSession) -> str:
    cursor = session.cursor
    if not cursor.total_records:
        return "No records"
    first = cursor.offset + 1
    last = cursor.offset + len(cursor.records)
    return f"Showing {first} to {last} of {cursor.total_records} entries"


def render_bulk_form(session: SelectionSession) -> None:
    with st.sidebar.form("bulk_select"):
        st.subheader("Bulk Selection")
        count_text = st.text_input("Number of rows", placeholder="Enter number")
        submitted = st.form_submit_button("Apply")
    if not submitted:
        return
    try:
        with st.spinner("Fetching records..."):
            report = session.on_bulk_select_submit(count_text)
    except BulkCountError as e:
        st.sidebar.error(str(e))
        return
    except SessionBusyError as e:
        st.sidebar.warning(str(e))
        return
    if not report.complete:
        st.sidebar.warning(
            f"Selected {report.returned} of {report.requested}; "
            f"a page failed to load: {report.error_message}"
        )
    elif report.short:
        st.sidebar.info(f"Only {report.returned} records available")
    else:
        st.sidebar.success(f"Selected {report.returned} records")


def render_paginator(session: SelectionSession) -> None:
    cursor = session.cursor
    left, right = st.columns([3, 1])
    with right:
        size = st.selectbox(
            "Rows per page",
            PAGE_SIZE_OPTIONS,
            index=PAGE_SIZE_OPTIONS.index(cursor.page_size)
            if cursor.page_size in PAGE_SIZE_OPTIONS
            else 0,
            disabled=session.busy,
        )
    with left:
        number = st.number_input(
            "Page",
            min_value=1,
            max_value=max(cursor.page_count, 1),
            value=min(cursor.page_number, max(cursor.page_count, 1)),
            step=1,
            disabled=session.busy,
        )
    if number == cursor.page_number and size == cursor.page_size:
        return
    offset = (int(number) - 1) * cursor.page_size if size == cursor.page_size else 0
    try:
        with st.spinner("Loading artworks..."):
            session.on_page_change(offset, int(size))
    except (ArtselectError, requests.RequestException) as e:
        st.error(f"Error fetching artworks: {e}")
        return
    st.rerun()


def main() -> None:
    st.set_page_config(page_title="Artwork Selection", layout="wide")
    st.title("Artworks")

    apply_config(CONFIG)
    try:
        session = ensure_session_state(st)
    except (ArtselectError, requests.RequestException) as e:
        st.error(f"Error fetching artworks: {e}")
        if st.button("Retry"):
            reset_session_state(st)
            st.rerun()
        return

    render_bulk_form(session)
    st.sidebar.metric("Selected", len(session.store))
    if st.sidebar.button("Clear selection", disabled=not len(session.store)):
        session.store.clear()
        st.rerun()

    if st.button(session.select_all_label, icon=":material/check_box:"):
        session.on_select_all_on_page()
        st.rerun()

    display_df = session.page_frame()
    edited_df = st.data_editor(
        display_df,
        key=f"page_{session.cursor.page_number}_{session.store.version}",
        use_container_width=True,
        hide_index=True,
        column_config={
            "Selected": st.column_config.CheckboxColumn("Selected", help="Keep this artwork selected"),
            "id": None,
            **{col: st.column_config.Column(label) for col, label in COLUMN_LABELS.items()},
        },
        disabled=[col for col in display_df.columns if col != "Selected"],
    )
    if apply_selection_edits(session, display_df, edited_df):
        st.rerun()

    st.caption(page_label(session))
    render_paginator(session)
    st.divider()

    selection = session.selection_frame()
    st.download_button(
        label="Download selection",
        data=selection.to_csv(index=False).encode("utf-8"),
        file_name="selected_artworks.csv",
        mime="text/csv",
        disabled=selection.empty,
    )


if __name__ == "__main__":
    main()
