"""A small state machine with entry and exit actions, used to track a music player connection.

States receive ``play``, ``stop`` and ``pause`` transition requests and
``update`` requests. The base :class:`State` ignores all of them, logs that it
did and records the ignored request in :attr:`State.ignored_requests`.
Concrete states override what they handle. They usually keep a reference to
the :class:`Context` so they can move it to another state.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class State:
    """Base state: every action and transition is ignored and recorded."""

    @property
    def ignored_requests(self) -> tuple[str, ...]:
        """Names of the requests this state has ignored, oldest first."""
        return tuple(self.__dict__.get("_ignored", ()))

    def _ignore(self, request: str, message: str) -> None:
        self.__dict__.setdefault("_ignored", []).append(request)
        logger.debug("mpd: %s", message)

    def entry(self) -> None:
        """Action run when the context enters this state."""
        self._ignore("entry", "ignore entry action")

    def exit(self) -> None:
        """Action run when the context leaves this state."""
        self._ignore("exit", "ignore exit action")

    def play(self) -> None:
        self._ignore("play", "ignore play state transition")

    def stop(self) -> None:
        self._ignore("stop", "ignore stop state transition")

    def pause(self) -> None:
        self._ignore("pause", "ignore pause state transition")

    def update(self) -> None:
        """Request that the state refresh what is displayed."""
        self._ignore("update", "ignoring update method request")


class Context:
    """Holds the current state and forwards requests to it.

    The initial state is entered as soon as the context is created.
    """

    def __init__(self, initial_state: State) -> None:
        self._state: Optional[State] = None
        self.set_state(initial_state)

    @property
    def state(self) -> State:
        """The state the context is in."""
        assert self._state is not None
        return self._state

    def set_state(self, new_state: State) -> None:
        """Leave the current state, if any, and enter ``new_state``."""
        if self._state is not None:
            self._state.exit()
        self._state = new_state
        new_state.entry()

    def play(self) -> None:
        self.state.play()

    def stop(self) -> None:
        self.state.stop()

    def pause(self) -> None:
        self.state.pause()

    def update(self) -> None:
        self.state.update()