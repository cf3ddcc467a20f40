from typing import Callable, Optional

from .session import SelectionSession
from .sources.artic import ArticRecordSource
from .sources.base import RecordSource

SESSION_KEY = "artselect_session"


def ensure_session_state(
    st, source_factory: Optional[Callable[[], RecordSource]] = None
) -> SelectionSession:
    """Return the session stored in ``st.session_state``, creating it once.

    The first page is loaded on creation and the session is stored only once
    that fetch succeeds, so a failing first fetch re-raises and the next call
    tries again.
    """
    if SESSION_KEY not in st.session_state:
        source = source_factory() if source_factory else ArticRecordSource()
        session = SelectionSession(source)
        session.start()
        st.session_state[SESSION_KEY] = session
    return st.session_state[SESSION_KEY]


def reset_session_state(st) -> None:
    if SESSION_KEY in st.session_state:
        del st.session_state[SESSION_KEY]
