# SPDX-License-Identifier: LGPL-3.0-or-later
"""ext4: command text and e2fsck exit-status bit folding."""

import unittest

from fscrash.fs.ext4 import (
    EXT4_MKFS_OPTS,
    EXT4_REMOUNT_OPTS,
    Ext4FsSpecific,
)
from fscrash.fs.outcome import Outcome


class TestExt4Commands(unittest.TestCase):
    def setUp(self):
        self.fs = Ext4FsSpecific()

    def test_mkfs_command_exact(self):
        self.assertEqual(
            self.fs.get_mkfs_command("/dev/loop0"),
            "mkfs -t ext4 -E lazy_itable_init=0,lazy_journal_init=0 /dev/loop0",
        )

    def test_mkfs_command_order(self):
        cmd = self.fs.get_mkfs_command("/dev/loop0")
        self.assertIn("ext4", cmd)
        self.assertTrue(cmd.endswith("/dev/loop0"))
        self.assertEqual(cmd.split()[-1], "/dev/loop0")
        self.assertLess(cmd.index("ext4"), cmd.index(EXT4_MKFS_OPTS))
        self.assertLess(cmd.index(EXT4_MKFS_OPTS), cmd.index("/dev/loop0"))

    def test_post_replay_mount_options(self):
        self.assertEqual(self.fs.get_post_replay_mount_options(), EXT4_REMOUNT_OPTS)
        self.assertEqual(EXT4_REMOUNT_OPTS, "errors=remount-ro")

    def test_fsck_command_exact(self):
        self.assertEqual(self.fs.get_fsck_command("/dev/sdb1"), "fsck -T -t ext4 /dev/sdb1 -- -y")

    def test_fs_type_string(self):
        self.assertEqual(self.fs.get_fs_type_string(), "ext4")


class TestExt4Classify(unittest.TestCase):
    def setUp(self):
        self.fs = Ext4FsSpecific()

    def test_clean(self):
        self.assertIs(self.fs.classify(0), Outcome.CLEAN)

    def test_corrected_bits_are_fixed(self):
        for rc in (1, 2, 3):
            with self.subTest(rc=rc):
                self.assertIs(self.fs.classify(rc), Outcome.FIXED)

    def test_uncorrected(self):
        self.assertIs(self.fs.classify(4), Outcome.CHECK_UNFIXED)
        # uncorrected beats corrected
        self.assertIs(self.fs.classify(4 | 1), Outcome.CHECK_UNFIXED)
        self.assertIs(self.fs.classify(4 | 2), Outcome.CHECK_UNFIXED)

    def test_attention_bits_alone_and_combined(self):
        for rc in (8, 16, 32, 128, 8 | 16, 32 | 128, 8 | 16 | 32 | 128):
            with self.subTest(rc=rc):
                self.assertIs(self.fs.classify(rc), Outcome.CHECK)

    def test_severity_wins_over_lesser_bits(self):
        self.assertIs(self.fs.classify(4 | 128), Outcome.CHECK)
        self.assertIs(self.fs.classify(1 | 8), Outcome.CHECK)
        self.assertIs(self.fs.classify(1 | 2 | 4 | 32), Outcome.CHECK)
        self.assertIs(self.fs.classify(136), Outcome.CHECK)

    def test_unmapped_values_are_other(self):
        # none of bits 1,2,4,8,16,32,128 set
        for rc in (64, 256, 512, 64 | 256, 1 << 20):
            with self.subTest(rc=rc):
                self.assertIs(self.fs.classify(rc), Outcome.OTHER)

    def test_irrelevant_high_bits_do_not_mask_known_bits(self):
        self.assertIs(self.fs.classify(256 | 1), Outcome.FIXED)
        self.assertIs(self.fs.classify(64 | 4), Outcome.CHECK_UNFIXED)
        self.assertIs(self.fs.classify(1024 | 8), Outcome.CHECK)

    def test_negative_values(self):
        # two's complement: -1 has every bit set
        self.assertIs(self.fs.classify(-1), Outcome.CHECK)
        self.assertIs(self.fs.classify(-256), Outcome.CHECK)
