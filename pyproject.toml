[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wbutil"
version = "0.1.0"
description = "Status-bar helpers: text escaping, unit formatting, lenient JSON, command running, sleeper threads, thread-safe signals, rfkill events, sway IPC framing and state flags"
requires-python = ">=3.10"
dependencies = []
keywords = ["status bar", "sway", "i3", "ipc", "rfkill", "formatting", "signals", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wbutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
