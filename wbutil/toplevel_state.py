"""State flags of taskbar windows and workspaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Iterable, Union


class TaskState(IntFlag):
    """State bits of a toplevel window."""

    MAXIMIZED = 1 << 0
    MINIMIZED = 1 << 1
    ACTIVE = 1 << 2
    FULLSCREEN = 1 << 3
    INVALID = 1 << 4


class WorkspaceState(IntFlag):
    """State bits of a workspace."""

    ACTIVE = 1 << 0
    URGENT = 1 << 1
    HIDDEN = 1 << 2
    EMPTY = 1 << 3


@dataclass(frozen=True)
class TaskStatus:
    """The combined state of one toplevel window."""

    state: TaskState = TaskState(0)

    def maximized(self) -> bool:
        return bool(self.state & TaskState.MAXIMIZED)

    def minimized(self) -> bool:
        return bool(self.state & TaskState.MINIMIZED)

    def active(self) -> bool:
        return bool(self.state & TaskState.ACTIVE)

    def fullscreen(self) -> bool:
        return bool(self.state & TaskState.FULLSCREEN)


@dataclass(frozen=True)
class WorkspaceStatus:
    """The combined state of one workspace."""

    state: WorkspaceState = WorkspaceState(0)

    @classmethod
    def from_states(
        cls, states: Iterable[Union[WorkspaceState, int]]
    ) -> "WorkspaceStatus":
        """Combine individual state flags. Raises ``ValueError`` for unknown bits."""
        combined = WorkspaceState(0)
        for value in states:
            flag = WorkspaceState(value)
            if int(flag) & ~int(_ALL_WORKSPACE_STATES):
                raise ValueError(f"unknown workspace state: {value!r}")
            combined |= flag
        return cls(combined)

    def is_active(self) -> bool:
        return bool(self.state & WorkspaceState.ACTIVE)

    def is_urgent(self) -> bool:
        return bool(self.state & WorkspaceState.URGENT)

    def is_hidden(self) -> bool:
        return bool(self.state & WorkspaceState.HIDDEN)

    def is_empty(self) -> bool:
        return bool(self.state & WorkspaceState.EMPTY)


_ALL_WORKSPACE_STATES = (
    WorkspaceState.ACTIVE
    | WorkspaceState.URGENT
    | WorkspaceState.HIDDEN
    | WorkspaceState.EMPTY
)