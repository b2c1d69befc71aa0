# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/registry.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..core.exceptions import unsupported_fs
from .btrfs import BtrfsFsSpecific
from .ext4 import Ext4FsSpecific
from .f2fs import F2fsFsSpecific
from .types import FsType
from .xfs import XfsFsSpecific

logger = logging.getLogger(__name__)

FsSpecific = Union[Ext4FsSpecific, BtrfsFsSpecific, F2fsFsSpecific, XfsFsSpecific]

_VARIANTS: Dict[FsType, Type[FsSpecific]] = {
    FsType.EXT4: Ext4FsSpecific,
    FsType.BTRFS: BtrfsFsSpecific,
    FsType.F2FS: F2fsFsSpecific,
    FsType.XFS: XfsFsSpecific,
}


def supported_fs_types() -> Tuple[str, ...]:
    return tuple(t.value for t in _VARIANTS)


def resolve(fs_type: Any) -> Optional[FsSpecific]:
    """
    Return a fresh variant for `fs_type`, or None when the token is not one
    of the supported filesystems. Matching is exact and case-sensitive.
    """
    t = FsType.parse(fs_type)
    if t is None:
        logger.debug("No filesystem variant for %r", fs_type)
        return None
    return _VARIANTS[t]()


def require(fs_type: Any) -> FsSpecific:
    """Like resolve(), but an unknown token is a configuration error."""
    fs = resolve(fs_type)
    if fs is None:
        raise unsupported_fs(fs_type, supported_fs_types())
    return fs
