# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/btrfs.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import MKFS_START
from .outcome import Outcome
from .types import FsType

BTRFS_FSCK_COMMAND = "btrfs check "


@dataclass(frozen=True)
class BtrfsFsSpecific:
    fs_type: ClassVar[FsType] = FsType.BTRFS
    mkfs_tool: ClassVar[str] = "mkfs"
    fsck_tool: ClassVar[str] = "btrfs"
    auto_fix: ClassVar[bool] = False

    def get_mkfs_command(self, device_path: str) -> str:
        return f"{MKFS_START}{self.fs_type.value} {device_path}"

    def get_post_replay_mount_options(self) -> str:
        return ""

    def get_fsck_command(self, fs_path: str) -> str:
        return f"{BTRFS_FSCK_COMMAND}{fs_path}"

    def classify(self, return_code: int) -> Outcome:
        # `btrfs check` only reports 0 (nothing found) or 1 (found something)
        # and never repairs without --repair, so any failure stays unfixed.
        if int(return_code) == 0:
            return Outcome.CLEAN
        return Outcome.CHECK_UNFIXED

    def get_fs_type_string(self) -> str:
        return self.fs_type.value
