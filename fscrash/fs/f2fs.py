# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/f2fs.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import FSCK_AUTO_FIX, FSCK_COMMAND, MKFS_START
from .outcome import Outcome
from .types import FsType


@dataclass(frozen=True)
class F2fsFsSpecific:
    fs_type: ClassVar[FsType] = FsType.F2FS
    mkfs_tool: ClassVar[str] = "mkfs"
    fsck_tool: ClassVar[str] = "fsck"
    auto_fix: ClassVar[bool] = True

    def get_mkfs_command(self, device_path: str) -> str:
        return f"{MKFS_START}{self.fs_type.value} {device_path}"

    def get_post_replay_mount_options(self) -> str:
        return ""

    def get_fsck_command(self, fs_path: str) -> str:
        return f"{FSCK_COMMAND}{self.fs_type.value} {fs_path}{FSCK_AUTO_FIX}"

    def classify(self, return_code: int) -> Outcome:
        """
        fsck.f2fs returns 0 whenever it ran to completion and -1 otherwise;
        whether it repaired anything is only visible in its output. A 0 is
        therefore reported as FIXED, which may overstate what happened on a
        clean filesystem.
        """
        # TODO: tell CLEAN from FIXED by parsing fsck.f2fs output.
        if int(return_code) == 0:
            return Outcome.FIXED
        return Outcome.CHECK

    def get_fs_type_string(self) -> str:
        return self.fs_type.value
