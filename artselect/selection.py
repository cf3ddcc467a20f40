"""Page-independent selection set.

The store maps a record id to the last snapshot seen for it.  Navigating
pages never touches it; entries disappear only through :meth:`toggle`,
:meth:`remove_all`, :meth:`clear` or the whole-set replace performed by
:meth:`merge_many`.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

from .models import Artwork, RecordId
from .tracer import trace

logger = logging.getLogger(__name__)

RecordLike = Union[Artwork, Mapping[str, Any]]
Listener = Callable[[Dict[RecordId, Artwork]], None]


def _as_artwork(record: RecordLike) -> Artwork:
    if isinstance(record, Artwork):
        return record
    return Artwork.model_validate(record)


class SelectionStore:
    def __init__(self) -> None:
        self._selected: Dict[RecordId, Artwork] = {}
        self._listeners: List[Listener] = []
        self.version = 0

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._selected

    def is_selected(self, record_id: RecordId) -> bool:
        return record_id in self._selected

    def ids(self) -> List[RecordId]:
        return list(self._selected)

    def records(self) -> List[Artwork]:
        return list(self._selected.values())

    def snapshot(self) -> Dict[RecordId, Artwork]:
        return dict(self._selected)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with a snapshot after every mutation.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit(self, selected: Dict[RecordId, Artwork], op: str) -> None:
        self._selected = selected
        self.version += 1
        trace("selection", op=op, ver=self.version, size=len(selected))
        snapshot = dict(selected)
        for listener in list(self._listeners):
            listener(snapshot)

    def toggle(self, record: RecordLike) -> bool:
        """Flip membership of ``record`` and return whether it is now selected."""
        art = _as_artwork(record)
        selected = dict(self._selected)
        if art.id in selected:
            del selected[art.id]
            now_selected = False
        else:
            selected[art.id] = art
            now_selected = True
        self._commit(selected, "toggle")
        return now_selected

    def add_all(self, records: Iterable[RecordLike]) -> None:
        selected = dict(self._selected)
        for record in records:
            art = _as_artwork(record)
            selected[art.id] = art
        self._commit(selected, "add_all")

    def remove_all(self, records: Iterable[RecordLike]) -> None:
        selected = dict(self._selected)
        for record in records:
            selected.pop(_as_artwork(record).id, None)
        self._commit(selected, "remove_all")

    def merge_many(self, records: Iterable[RecordLike]) -> None:
        """Replace the whole selection with ``records`` in one step."""
        selected: Dict[RecordId, Artwork] = {}
        for record in records:
            art = _as_artwork(record)
            selected[art.id] = art
        logger.info("Replacing selection of %d with %d records", len(self), len(selected))
        self._commit(selected, "merge_many")

    def clear(self) -> None:
        self._commit({}, "clear")


def toggle_select_all_on_page(
    store: SelectionStore, page_records: Iterable[RecordLike], flag: bool
) -> bool:
    """Add or remove every record of the current page and return the new flag.

    ``flag`` only remembers what the previous call did; it is not checked
    against the store, so hand-toggled rows can leave it out of step.
    """
    if flag:
        store.remove_all(page_records)
    else:
        store.add_all(page_records)
    return not flag
