"""Running shell commands and collecting their output."""

from __future__ import annotations

import logging
import subprocess
import threading
from dataclasses import dataclass
from typing import IO, AnyStr

logger = logging.getLogger(__name__)

_SHELL = "/bin/sh"

_reap_lock = threading.Lock()
_reap: list[subprocess.Popen] = []


@dataclass(frozen=True)
class CommandResult:
    """Exit code and captured standard output of a finished command."""

    exit_code: int
    out: str


def read_output(stream: IO[AnyStr]) -> str:
    """Read a stream to its end and drop one trailing newline."""
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")
    if data.endswith("\n"):
        data = data[:-1]
    return data


def open_command(cmd: str) -> subprocess.Popen:
    """Start ``cmd`` through the shell with its standard output piped.

    The child runs in its own session. Raises ``ValueError`` for an empty
    command and ``OSError`` if the process cannot be started.
    """
    if not cmd:
        raise ValueError("empty command")
    try:
        return subprocess.Popen(
            [_SHELL, "-c", cmd],
            stdout=subprocess.PIPE,
            start_new_session=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        logger.error("Unable to exec cmd %s, error %s", cmd, exc)
        raise


def close_command(process: subprocess.Popen) -> int:
    """Close the output pipe, wait for the process and return its exit code.

    A process killed by a signal yields the negative signal number.
    """
    if process.stdout is not None:
        process.stdout.close()
    code = process.wait()
    if code >= 0:
        logger.debug("Cmd exited with code %d", code)
    else:
        logger.debug("Cmd killed by %d", -code)
    return code


def exec_command(cmd: str) -> CommandResult:
    """Run ``cmd`` to completion and capture its output.

    An empty command or one that cannot be started gives exit code -1.
    """
    try:
        process = open_command(cmd)
    except (ValueError, OSError):
        return CommandResult(-1, "")
    assert process.stdout is not None
    output = read_output(process.stdout)
    return CommandResult(close_command(process), output)


def exec_no_read(cmd: str) -> CommandResult:
    """Run ``cmd`` to completion, discarding its output."""
    try:
        process = open_command(cmd)
    except (ValueError, OSError):
        return CommandResult(-1, "")
    return CommandResult(close_command(process), "")


def fork_exec(cmd: str) -> int:
    """Start ``cmd`` in the background and return its process id.

    The process is remembered so that :func:`reap_children` can collect it.
    Raises ``ValueError`` for an empty command.
    """
    if not cmd:
        raise ValueError("empty command")
    try:
        process = subprocess.Popen([_SHELL, "-c", cmd], start_new_session=True)
    except OSError as exc:
        logger.error("Unable to exec cmd %s, error %s", cmd, exc)
        raise
    with _reap_lock:
        _reap.append(process)
    logger.debug("Added child to reap list: %d", process.pid)
    return process.pid


def reap_children() -> list[int]:
    """Collect finished background processes and return their process ids."""
    reaped: list[int] = []
    with _reap_lock:
        still_running = []
        for process in _reap:
            if process.poll() is None:
                still_running.append(process)
            else:
                reaped.append(process.pid)
        _reap[:] = still_running
    for pid in reaped:
        logger.debug("Reaped child %d", pid)
    return reaped