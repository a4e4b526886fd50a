"""Single-slot selection state driving the lightbox viewer."""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Iterable
from typing import Optional

from folio.catalog.artwork import Artwork

logger = logging.getLogger(__name__)

Listener = Callable[[Optional[Artwork]], None]


class SelectionStore:
    """Hold the artwork shown in the lightbox, or nothing.

    The store has two states: closed (``current`` is ``None``) and open on
    one artwork. ``select`` always moves to the open state, replacing any
    earlier artwork directly. ``clear`` moves to the closed state.

    Listeners are called once per transition with the new value. Clearing a
    closed store is not a transition and notifies nobody.

    Args:
        catalog: Optional artworks the store accepts. When given, selecting
            anything else closes the viewer instead.
    """

    def __init__(self, catalog: Iterable[Artwork] | None = None) -> None:
        self._current: Artwork | None = None
        self._listeners: list[Listener] = []
        self._known: dict[str, Artwork] | None = (
            None if catalog is None else {a.id: a for a in catalog}
        )

    @property
    def current(self) -> Artwork | None:
        """Artwork currently shown, ``None`` when the viewer is closed."""

        return self._current

    @property
    def is_open(self) -> bool:
        """Whether the lightbox is visible."""

        return self._current is not None

    def select(self, artwork: Artwork) -> None:
        """Show ``artwork`` in the viewer.

        Args:
            artwork: Catalog entry to display.
        """

        if self._known is not None:
            entry = self._known.get(artwork.id)

            # Unknown artworks close the viewer.
            if entry is None or entry != artwork:
                logger.warning(
                    f"Artwork {artwork.id} is not part of the catalog; "
                    "closing viewer"
                )
                self.clear()
                return

            # Keep a reference to the catalog entry itself.
            artwork = entry

        self._current = artwork
        self._notify()

    def clear(self) -> None:
        """Close the viewer."""

        if self._current is None:
            return

        self._current = None
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for transitions.

        Args:
            listener: Callable receiving the new selection.

        Returns:
            A callable removing the listener again.
        """

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._current)


class SelectionRegistry:
    """Keep one ``SelectionStore`` per browser session.

    The registry holds at most ``max_sessions`` stores; the least recently
    used one is dropped when a new session arrives at capacity.

    Args:
        catalog: Artworks every created store accepts.
        max_sessions: Upper bound on the number of stored sessions.
    """

    def __init__(
        self, catalog: Iterable[Artwork] | None = None, max_sessions: int = 1024
    ) -> None:
        self._catalog = None if catalog is None else tuple(catalog)
        self._max_sessions = max_sessions
        self._stores: OrderedDict[str, SelectionStore] = OrderedDict()

    def __len__(self) -> int:
        return len(self._stores)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._stores

    def get(self, session_id: str) -> SelectionStore:
        """Return the store of ``session_id``, creating a closed one."""

        store = self._stores.get(session_id)
        if store is not None:
            self._stores.move_to_end(session_id)
            return store

        store = SelectionStore(self._catalog)
        self._stores[session_id] = store

        # Evict the least recently used sessions beyond capacity.
        while len(self._stores) > self._max_sessions:
            evicted, _ = self._stores.popitem(last=False)
            logger.debug(f"Dropped selection of session {evicted}")
        return store
