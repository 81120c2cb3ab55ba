# wbutil

wbutil is a set of small building blocks for a desktop status bar. It uses only
the standard library.

## Install

```
pip install wbutil
pip install "wbutil[test]"   # adds pytest
```

## Modules

- `wbutil.text`
  - `ltrim`, `rtrim` and `trim` strip spaces, tabs, newlines, carriage returns,
    form feeds and vertical tabs.
  - `sanitize_string` escapes `& < > " '` as markup entities.
  - `column_width` returns the terminal column width of a string. Wide and
    full-width characters count as two columns.
- `wbutil.powformat`
  - `PowFormat(val, unit, binary=False)` prints a number with an SI prefix or
    a binary prefix. For example, `f"{PowFormat(2_500_000, 'B')}"` gives
    `'2.5MB'`.
  - The format spec may start with `>` or `<` to align the text in a fixed
    width, or with `=` to pad the number column.
  - A width given after that is accepted and ignored. Any other spec raises
    `ValueError`.
- `wbutil.jsonparse`
  - `JsonParser().parse(text)` accepts `//` and `/* */` comments and trailing
    commas.
  - It returns `{}` for empty input and ignores anything after the first value.
  - Malformed input raises `JsonParseError`, which is a `ValueError`.
- `wbutil.command` runs shell commands through `/bin/sh -c`, each in a new
  session.
  - `exec_command` returns a `CommandResult(exit_code, out)` and drops one
    trailing newline from the output.
  - `exec_no_read` runs the command and discards its output.
  - For both, an empty command or one that fails to start gives exit code `-1`.
  - `open_command`, `read_output` and `close_command` are the separate steps.
  - `fork_exec` starts a command in the background and returns its process id.
    `reap_children()` collects the background processes that have finished.
- `wbutil.sleeper`
  - `SleeperThread(func)` calls `func` in a loop on a daemon thread.
  - `sleep_for` and `sleep_until` return `True` when woken by `wake_up()` or
    `stop()`, and `False` on timeout.
  - It works as a context manager; leaving the block stops and joins the
    thread.
- `wbutil.safe_signal`
  - `SafeSignal(notify=None)` calls its slots at once when emitted on the
    thread that created it.
  - Emits from other threads are queued and `notify` is called.
    `dispatch_pending()` then delivers the queued emits in order.
  - `connect` returns a function that disconnects the slot.
- `wbutil.rfkill`
  - `RfkillEvent.from_bytes` decodes rfkill event records.
  - `Rfkill(rfkill_type, path="/dev/rfkill")` opens the device non-blocking.
    Call `handle_readable()` when `fileno()` becomes readable.
  - It updates `state` and calls the connected callbacks for add and change
    events of its radio type.
- `wbutil.sway_ipc` holds the i3/sway IPC message types (`IpcCommandType`).
  - `encode_message(msg_type, payload)` frames a message.
  - `decode_header(data)` returns `(payload_size, msg_type)`.
  - `event_mask(event)` gives the subscription bit for an event type.
  - `IpcResponse` holds a received message.
- `wbutil.zoned_format`
  - `format_time(spec, moment)` applies strftime directives using C-locale
    names, in the timezone of `moment`.
  - An empty spec gives `""`. A naive datetime is taken as UTC.
- `wbutil.bar_mode`
  - `BarLayer.from_name("top")` looks up a layer by name.
  - `BarMargins.from_values(...)` takes one to four values in CSS shorthand
    order.
  - `BarMode` combines the layer with flags for exclusive, passthrough and
    visible.
- `wbutil.backlight_device`: `BacklightDevice` compares devices by name and
  brightness and ignores the power state.
- `wbutil.mpd_state`
  - `State` and `Context` form a state machine with entry and exit actions.
  - The base `State` ignores every request and records it in
    `ignored_requests`.
- `wbutil.toplevel_state`
  - `TaskState` and `WorkspaceState` are bit flags.
  - `TaskStatus` and `WorkspaceStatus` answer questions such as `active()` or
    `is_urgent()`.
  - `WorkspaceStatus.from_states` combines flags and rejects unknown bits.

## Example

```python
from datetime import datetime, timezone

from wbutil.text import sanitize_string
from wbutil.powformat import PowFormat
from wbutil.zoned_format import format_time

sanitize_string("a & b")                       # 'a &amp; b'
f"{PowFormat(2_500_000, 'B')}"                 # '2.5MB'
format_time("%Y%m%d", datetime(2022, 1, 3, tzinfo=timezone.utc))  # '20220103'
```

## What it does not do

These are building blocks, not a bar.

- There is no command to run and nothing is drawn on screen.
- `wbutil.sway_ipc` frames and parses messages but does not open the
  compositor socket.
- `wbutil.rfkill` reads the device only when you call it; it runs no event
  loop of its own.

## Tests

```
pytest
```