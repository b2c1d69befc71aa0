# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/core/__init__.py
from .exceptions import ConfigError, ExecutionError, Fatal, FsCrashError, UnsupportedFilesystemError
from .logger import Log

__all__ = [
    "ConfigError",
    "ExecutionError",
    "Fatal",
    "FsCrashError",
    "Log",
    "UnsupportedFilesystemError",
]
