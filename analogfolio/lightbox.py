"""Lightbox navigation: which photo is open, and the location that encodes it.

The lightbox has two states, Closed and Open(i). Every move into Open(j)
writes ``/p/<j>`` through the location writer; closing writes ``/`` and
reports the index that was on screen so the grid can scroll back to it once.
The same rules are shipped to the browser in the generated portfolio.js.
"""

import re
from dataclasses import dataclass
from typing import Callable

FORWARD = 1
BACKWARD = -1
STILL = 0

HOME_LOCATION = "/"

KEY_BINDINGS = {
    "ArrowRight": "next",
    "ArrowLeft": "previous",
    "Escape": "close",
}

_PATH_RE = re.compile(r"^/p/(\d+)/?$")
_QUERY_RE = re.compile(r"(?:^|[?&])photoId=(\d+)(?:&|$)")


@dataclass(frozen=True)
class NavigationState:
    open_index: int | None = None
    direction: int = STILL

    @property
    def is_open(self) -> bool:
        return self.open_index is not None


CLOSED = NavigationState()


def state_from_location(location: str, count: int) -> NavigationState:
    """Read the open photo out of a location such as ``/p/3`` or ``/?photoId=3``.

    Anything unparseable or out of range for ``count`` images is Closed.
    """
    path, _, query = (location or "").partition("?")
    match = _PATH_RE.match(path)
    if match is None and query:
        match = _QUERY_RE.search(query)
    if match is None:
        return CLOSED
    index = int(match.group(1))
    if not 0 <= index < count:
        return CLOSED
    return NavigationState(open_index=index)


def location_from_state(state: NavigationState) -> str:
    if state.open_index is None:
        return HOME_LOCATION
    return f"/p/{state.open_index}"


def _sign(delta: int) -> int:
    return (delta > 0) - (delta < 0)


class Lightbox:
    """Navigation controller over ``count`` ordered images.

    ``write_location`` is called with the new location after each transition
    (a shallow update, no reload). ``on_close`` receives the index that was
    open when the lightbox closed.
    """

    def __init__(
        self,
        count: int,
        write_location: Callable[[str], None] | None = None,
        on_close: Callable[[int], None] | None = None,
        state: NavigationState = CLOSED,
    ):
        self.count = count
        self.state = state
        self._write_location = write_location
        self._on_close = on_close
        self.last_viewed: int | None = None
        self.has_scrolled_to_last_viewed = True

    @classmethod
    def from_location(cls, location: str, count: int, **kwargs) -> "Lightbox":
        return cls(count, state=state_from_location(location, count), **kwargs)

    @property
    def index(self) -> int | None:
        return self.state.open_index

    @property
    def direction(self) -> int:
        return self.state.direction

    @property
    def can_next(self) -> bool:
        return self.state.is_open and self.state.open_index + 1 < self.count

    @property
    def can_previous(self) -> bool:
        return self.state.is_open and self.state.open_index > 0

    def counter_label(self) -> str:
        if not self.state.is_open:
            return ""
        return f"Photo {self.state.open_index + 1} of {self.count}"

    def _go(self, index: int):
        current = self.state.open_index
        direction = STILL if current is None else _sign(index - current)
        self.state = NavigationState(open_index=index, direction=direction)
        self._publish()

    def _publish(self):
        if self._write_location is not None:
            self._write_location(location_from_state(self.state))

    def open(self, index: int) -> NavigationState:
        if not 0 <= index < self.count:
            raise IndexError(f"photo index {index} out of range for {self.count} images")
        self._go(index)
        return self.state

    def next(self) -> NavigationState:
        if self.can_next:
            self._go(self.state.open_index + 1)
        return self.state

    def previous(self) -> NavigationState:
        if self.can_previous:
            self._go(self.state.open_index - 1)
        return self.state

    def close(self) -> NavigationState:
        if not self.state.is_open:
            return self.state
        self.last_viewed = self.state.open_index
        self.has_scrolled_to_last_viewed = False
        self.state = CLOSED
        self._publish()
        if self._on_close is not None:
            self._on_close(self.last_viewed)
        return self.state

    def handle_key(self, key: str) -> NavigationState:
        """Apply the transition bound to ``key``; ignored while closed."""
        action = KEY_BINDINGS.get(key)
        if action is None or not self.state.is_open:
            return self.state
        return getattr(self, action)()

    def pending_scroll_target(self) -> int | None:
        """Index the grid should scroll into view, at most once per close."""
        if self.state.is_open or self.has_scrolled_to_last_viewed:
            return None
        self.has_scrolled_to_last_viewed = True
        return self.last_viewed
