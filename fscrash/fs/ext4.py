# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/ext4.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .base import FSCK_AUTO_FIX, FSCK_COMMAND, MKFS_START
from .outcome import Outcome
from .types import FsType

EXT4_REMOUNT_OPTS = "errors=remount-ro"
# Lazy inode table / journal init keeps writing in the background after mkfs.
EXT4_MKFS_OPTS = "-E lazy_itable_init=0,lazy_journal_init=0"

# e2fsck exit status bits, see man 8 e2fsck.
FSCK_ERRORS_CORRECTED = 0x1
FSCK_REBOOT_REQUIRED = 0x2
FSCK_ERRORS_UNCORRECTED = 0x4
FSCK_OPERATIONAL_ERROR = 0x8
FSCK_USAGE_ERROR = 0x10
FSCK_CANCELED = 0x20
FSCK_LIBRARY_ERROR = 0x80

_NEEDS_ATTENTION = FSCK_OPERATIONAL_ERROR | FSCK_USAGE_ERROR | FSCK_CANCELED | FSCK_LIBRARY_ERROR
_CORRECTED = FSCK_ERRORS_CORRECTED | FSCK_REBOOT_REQUIRED


@dataclass(frozen=True)
class Ext4FsSpecific:
    fs_type: ClassVar[FsType] = FsType.EXT4
    mkfs_tool: ClassVar[str] = "mkfs"
    fsck_tool: ClassVar[str] = "fsck"
    auto_fix: ClassVar[bool] = True

    def get_mkfs_command(self, device_path: str) -> str:
        return f"{MKFS_START}{self.fs_type.value} {EXT4_MKFS_OPTS} {device_path}"

    def get_post_replay_mount_options(self) -> str:
        return EXT4_REMOUNT_OPTS

    def get_fsck_command(self, fs_path: str) -> str:
        return f"{FSCK_COMMAND}{self.fs_type.value} {fs_path}{FSCK_AUTO_FIX}"

    def classify(self, return_code: int) -> Outcome:
        """
        Fold e2fsck's OR-combined status bits into one Outcome.

        Groups are tested most severe first so that, e.g., "errors corrected"
        never hides an operational error reported in the same status.
        """
        rc = int(return_code)
        if rc & _NEEDS_ATTENTION:
            return Outcome.CHECK
        if rc & FSCK_ERRORS_UNCORRECTED:
            return Outcome.CHECK_UNFIXED
        if rc & _CORRECTED:
            return Outcome.FIXED
        if rc == 0:
            return Outcome.CLEAN
        return Outcome.OTHER

    def get_fs_type_string(self) -> str:
        return self.fs_type.value
