# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/harness/__init__.py
from .executor import Executor, ShellExecutor
from .runner import CheckReport, CheckResult, FsckRunner

__all__ = [
    "CheckReport",
    "CheckResult",
    "Executor",
    "FsckRunner",
    "ShellExecutor",
]
