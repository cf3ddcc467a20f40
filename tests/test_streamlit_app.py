import app
from artselect.session import SelectionSession
from artselect.sources.memory import InMemoryRecordSource


def started(count=25):
    session = SelectionSession(InMemoryRecordSource.with_size(count))
    session.start()
    return session


def test_apply_selection_edits_toggles_changed_rows():
    session = started()
    display = session.page_frame()
    edited = display.copy()
    edited.loc[0, "Selected"] = True
    edited.loc[3, "Selected"] = True

    toggled = app.apply_selection_edits(session, display, edited)

    assert [r.id for r in toggled] == [1, 4]
    assert sorted(session.store.ids()) == [1, 4]


def test_apply_selection_edits_unchecks():
    session = started()
    session.on_select_all_on_page()
    display = session.page_frame()
    edited = display.copy()
    edited.loc[2, "Selected"] = False

    app.apply_selection_edits(session, display, edited)

    assert not session.store.is_selected(3)
    assert len(session.store) == 9


def test_apply_selection_edits_no_change():
    session = started()
    display = session.page_frame()
    assert app.apply_selection_edits(session, display, display.copy()) == []
    assert session.store.version == 0


def test_apply_selection_edits_ignores_rows_already_in_sync():
    session = started()
    display = session.page_frame()
    edited = display.copy()
    edited.loc[0, "Selected"] = True
    # a rerun already applied the same edit
    session.on_row_checkbox_toggle(session.cursor.records[0])
    app.apply_selection_edits(session, display, edited)
    assert session.store.ids() == [1]


def test_page_label():
    session = started()
    session.on_page_change(20)
    assert app.page_label(session) == "Showing 21 to 25 of 25 entries"
    assert app.page_label(SelectionSession(InMemoryRecordSource())) == "No records"
