# SPDX-License-Identifier: LGPL-3.0-or-later
"""
Driver flow for one crash/replay iteration with an injected executor:
resolve -> mkfs -> (replay) -> fsck -> classify.
"""

import pytest

from fakes.fake_executor import FakeExecutor
from fakes.fake_logger import FakeLogger
from fscrash import CheckReport, FsckRunner, Outcome, resolve

DEVICE = "/dev/loop0"


def _iteration(fsck_rc):
    fs = resolve("ext4")
    assert fs is not None
    ex = FakeExecutor(rcs={"mkfs": 0, "fsck": fsck_rc})
    runner = FsckRunner(fs, ex, FakeLogger())
    runner.format(DEVICE)
    result = runner.check(DEVICE)
    return ex, result


@pytest.mark.integration
@pytest.mark.parametrize(
    "fsck_rc,expected",
    [(0, Outcome.CLEAN), (4, Outcome.CHECK_UNFIXED), (136, Outcome.CHECK)],
)
def test_ext4_iteration(fsck_rc, expected):
    ex, result = _iteration(fsck_rc)

    mkfs_cmd, fsck_cmd = ex.commands
    assert "ext4" in mkfs_cmd
    assert mkfs_cmd.endswith(DEVICE)
    assert fsck_cmd == "fsck -T -t ext4 /dev/loop0 -- -y"
    assert result.outcome is expected


@pytest.mark.integration
def test_report_across_filesystems():
    report = CheckReport()
    rcs = {"ext4": 1, "btrfs": 0, "f2fs": 0, "xfs": 0}
    for token, rc in rcs.items():
        fs = resolve(token)
        runner = FsckRunner(fs, FakeExecutor(default_rc=rc), FakeLogger())
        report.add(runner.check(DEVICE))

    assert report.passed()
    assert report.worst() is Outcome.FIXED
    assert report.counts()["clean"] == 1
    assert report.counts()["fixed"] == 3


@pytest.mark.integration
def test_unsupported_type_stops_before_commands():
    ex = FakeExecutor()
    assert resolve("reiserfs") is None
    assert ex.commands == []
