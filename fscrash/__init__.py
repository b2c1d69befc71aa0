# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/__init__.py
"""
fscrash - filesystem adaptation layer for crash-consistency testing

Formats devices, advises post-replay mount options, builds checker command
lines and folds each checker's exit status into one Outcome taxonomy for
ext4, btrfs, f2fs and xfs.

Usage as a library:

    from fscrash import resolve, Outcome

    fs = resolve("ext4")
    if fs is None:
        raise SystemExit("unsupported filesystem")

    mkfs = fs.get_mkfs_command("/dev/loop0")
    fsck = fs.get_fsck_command("/dev/loop0")
    rc = run_somehow(fsck)
    if fs.classify(rc) > Outcome.FIXED:
        ...
"""

__version__ = "0.1.0"

from .fs import (
    BtrfsFsSpecific,
    Ext4FsSpecific,
    F2fsFsSpecific,
    FsBehavior,
    FsSpecific,
    FsType,
    Outcome,
    XfsFsSpecific,
    require,
    resolve,
    supported_fs_types,
)
from .harness import CheckReport, CheckResult, FsckRunner, ShellExecutor

__all__ = [
    "__version__",

    # Core
    "FsType",
    "Outcome",
    "FsBehavior",
    "FsSpecific",
    "Ext4FsSpecific",
    "BtrfsFsSpecific",
    "F2fsFsSpecific",
    "XfsFsSpecific",
    "resolve",
    "require",
    "supported_fs_types",

    # Harness glue
    "FsckRunner",
    "ShellExecutor",
    "CheckResult",
    "CheckReport",
]
