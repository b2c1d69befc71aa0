# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/base.py
"""
Capability contract shared by every filesystem variant.

Variants are independent frozen dataclasses that happen to satisfy
FsBehavior; there is no base class to inherit from. The closed set of
variants is spelled out as a Union in fscrash.fs.registry.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .outcome import Outcome

MKFS_START = "mkfs -t "
FSCK_COMMAND = "fsck -T -t "
# Everything after the separator goes to the filesystem-specific checker.
FSCK_AUTO_FIX = " -- -y"


@runtime_checkable
class FsBehavior(Protocol):
    mkfs_tool: str
    fsck_tool: str
    auto_fix: bool

    def get_mkfs_command(self, device_path: str) -> str:
        ...

    def get_post_replay_mount_options(self) -> str:
        ...

    def get_fsck_command(self, fs_path: str) -> str:
        ...

    def classify(self, return_code: int) -> Outcome:
        ...

    def get_fs_type_string(self) -> str:
        ...
