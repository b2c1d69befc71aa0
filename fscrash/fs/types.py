# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/types.py
from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class FsType(str, Enum):
    """Filesystems the harness knows how to format, check and remount."""

    EXT4 = "ext4"
    BTRFS = "btrfs"
    F2FS = "f2fs"
    XFS = "xfs"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: Any) -> Optional["FsType"]:
        """Exact, case-sensitive token lookup. None for anything unknown."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return None
        for member in cls:
            if member.value == token:
                return member
        return None
