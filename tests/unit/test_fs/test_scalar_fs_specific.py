# SPDX-License-Identifier: LGPL-3.0-or-later
"""btrfs / f2fs / xfs: command text and scalar exit-status mapping."""

import pytest

from fscrash.fs.btrfs import BtrfsFsSpecific
from fscrash.fs.f2fs import F2fsFsSpecific
from fscrash.fs.outcome import Outcome
from fscrash.fs.xfs import XfsFsSpecific


@pytest.mark.unit
class TestBtrfs:
    fs = BtrfsFsSpecific()

    def test_commands(self):
        assert self.fs.get_mkfs_command("/dev/loop1") == "mkfs -t btrfs /dev/loop1"
        assert self.fs.get_fsck_command("/dev/loop1") == "btrfs check /dev/loop1"
        assert self.fs.get_post_replay_mount_options() == ""
        assert self.fs.get_fs_type_string() == "btrfs"

    def test_no_auto_fix_flag(self):
        assert "-y" not in self.fs.get_fsck_command("/dev/loop1")
        assert "--repair" not in self.fs.get_fsck_command("/dev/loop1")

    @pytest.mark.parametrize(
        "rc,expected",
        [(0, Outcome.CLEAN), (1, Outcome.CHECK_UNFIXED), (-1, Outcome.CHECK_UNFIXED), (255, Outcome.CHECK_UNFIXED)],
    )
    def test_classify(self, rc, expected):
        assert self.fs.classify(rc) is expected


@pytest.mark.unit
class TestF2fs:
    fs = F2fsFsSpecific()

    def test_commands(self):
        assert self.fs.get_mkfs_command("/dev/loop2") == "mkfs -t f2fs /dev/loop2"
        assert self.fs.get_fsck_command("/dev/loop2") == "fsck -T -t f2fs /dev/loop2 -- -y"
        assert self.fs.get_post_replay_mount_options() == ""
        assert self.fs.get_fs_type_string() == "f2fs"

    def test_zero_is_reported_as_fixed(self):
        # fsck.f2fs gives no way to tell "nothing to do" from "repaired".
        assert self.fs.classify(0) is Outcome.FIXED

    @pytest.mark.parametrize("rc", [1, -1, 2, 255])
    def test_nonzero_needs_attention(self, rc):
        assert self.fs.classify(rc) is Outcome.CHECK


@pytest.mark.unit
class TestXfs:
    fs = XfsFsSpecific()

    def test_commands(self):
        assert self.fs.get_mkfs_command("/dev/loop3") == "mkfs -t xfs /dev/loop3"
        assert self.fs.get_fsck_command("/dev/loop3") == "xfs_repair /dev/loop3"
        assert self.fs.get_post_replay_mount_options() == ""
        assert self.fs.get_fs_type_string() == "xfs"

    def test_classify(self):
        assert self.fs.classify(0) is Outcome.FIXED
        assert self.fs.classify(1) is Outcome.CHECK
        assert self.fs.classify(2) is Outcome.CHECK
        assert self.fs.classify(-1) is Outcome.CHECK


@pytest.mark.unit
@pytest.mark.parametrize("cls", [BtrfsFsSpecific, F2fsFsSpecific, XfsFsSpecific])
def test_mkfs_has_no_extra_flags(cls):
    cmd = cls().get_mkfs_command("/dev/vdb")
    assert cmd.split() == ["mkfs", "-t", cls().get_fs_type_string(), "/dev/vdb"]


@pytest.mark.unit
@pytest.mark.parametrize("cls", [BtrfsFsSpecific, F2fsFsSpecific, XfsFsSpecific])
def test_variants_are_immutable(cls):
    fs = cls()
    with pytest.raises(AttributeError):
        fs.extra = 1
