# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/xfs.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import MKFS_START
from .outcome import Outcome
from .types import FsType

XFS_FSCK_COMMAND = "xfs_repair "


@dataclass(frozen=True)
class XfsFsSpecific:
    fs_type: ClassVar[FsType] = FsType.XFS
    mkfs_tool: ClassVar[str] = "mkfs"
    fsck_tool: ClassVar[str] = "xfs_repair"
    auto_fix: ClassVar[bool] = False

    def get_mkfs_command(self, device_path: str) -> str:
        return f"{MKFS_START}{self.fs_type.value} {device_path}"

    def get_post_replay_mount_options(self) -> str:
        return ""

    def get_fsck_command(self, fs_path: str) -> str:
        return f"{XFS_FSCK_COMMAND}{fs_path}"

    def classify(self, return_code: int) -> Outcome:
        # Without -n, xfs_repair repairs what it finds and exits 0.
        if int(return_code) == 0:
            return Outcome.FIXED
        return Outcome.CHECK

    def get_fs_type_string(self) -> str:
        return self.fs_type.value
