# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/__init__.py
from .base import FsBehavior
from .btrfs import BtrfsFsSpecific
from .ext4 import Ext4FsSpecific
from .f2fs import F2fsFsSpecific
from .outcome import Outcome
from .registry import FsSpecific, require, resolve, supported_fs_types
from .types import FsType
from .xfs import XfsFsSpecific

__all__ = [
    "BtrfsFsSpecific",
    "Ext4FsSpecific",
    "F2fsFsSpecific",
    "FsBehavior",
    "FsSpecific",
    "FsType",
    "Outcome",
    "XfsFsSpecific",
    "require",
    "resolve",
    "supported_fs_types",
]
