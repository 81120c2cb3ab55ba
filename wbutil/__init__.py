"""Status-bar helpers: text, unit formatting, JSON, commands, threads, signals, rfkill, IPC framing and state flags."""

__version__ = "0.1.0"