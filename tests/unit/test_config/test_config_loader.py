# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML/JSON harness config loading, merging and argparse defaults."""

import json
import logging

import pytest

from fscrash.cli.argument_parser import build_parser
from fscrash.config.config_loader import Config
from fscrash.core.exceptions import ConfigError

log = logging.getLogger("tests.config")


@pytest.mark.unit
class TestLoad:
    def test_yaml(self, tmp_path):
        p = tmp_path / "h.yaml"
        p.write_text("harness:\n  fs_type: btrfs\n  device: /dev/loop3\n", encoding="utf-8")
        assert Config.load(log, p) == {"harness": {"fs_type": "btrfs", "device": "/dev/loop3"}}

    def test_json(self, tmp_path):
        p = tmp_path / "h.json"
        p.write_text(json.dumps({"fs_type": "xfs"}), encoding="utf-8")
        assert Config.load(log, p) == {"fs_type": "xfs"}

    def test_empty_file_is_empty_mapping(self, tmp_path):
        p = tmp_path / "empty.yaml"
        p.write_text("", encoding="utf-8")
        assert Config.load(log, p) == {}

    def test_non_mapping_rejected(self, tmp_path):
        p = tmp_path / "list.yaml"
        p.write_text("- ext4\n- xfs\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            Config.load(log, p)

    def test_bad_syntax_rejected(self, tmp_path):
        p = tmp_path / "bad.json"
        p.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError) as ei:
            Config.load(log, p)
        assert ei.value.code == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            Config.load(log, tmp_path / "nope.yaml")


@pytest.mark.unit
class TestMerge:
    def test_later_file_wins_and_deep_merges(self, tmp_path):
        a = tmp_path / "a.yaml"
        b = tmp_path / "b.yaml"
        a.write_text("harness:\n  fs_type: ext4\n  device: /dev/loop0\n", encoding="utf-8")
        b.write_text("harness:\n  device: /dev/loop9\n", encoding="utf-8")
        conf = Config.load_many(log, [a, b])
        assert conf == {"harness": {"fs_type": "ext4", "device": "/dev/loop9"}}

    def test_expand_configs_glob_and_dedupe(self, tmp_path):
        for n in ("10-base.yaml", "20-over.yaml"):
            (tmp_path / n).write_text("{}\n", encoding="utf-8")
        paths = Config.expand_configs(log, [str(tmp_path / "*.yaml"), str(tmp_path / "10-base.yaml")])
        assert [p.name for p in paths] == ["10-base.yaml", "20-over.yaml"]

    def test_harness_view_section_overrides_top_level(self):
        view = Config.harness_view({"fs_type": "ext4", "harness": {"fs_type": "xfs"}})
        assert view == {"fs_type": "xfs"}

    def test_harness_section_must_be_mapping(self):
        with pytest.raises(ConfigError):
            Config.harness_view({"harness": "ext4"})


@pytest.mark.unit
class TestApplyAsDefaults:
    def test_config_fills_subcommand_defaults(self):
        parser = build_parser()
        Config.apply_as_defaults(log, parser, {"harness": {"fs-type": "f2fs", "device": "/dev/vdb", "bogus": 1}})
        args = parser.parse_args(["commands"])
        assert args.fs_type == "f2fs"
        assert args.device == "/dev/vdb"
        assert not hasattr(args, "bogus")

    def test_cli_overrides_config(self):
        parser = build_parser()
        Config.apply_as_defaults(log, parser, {"fs_type": "f2fs", "timeout": 5})
        args = parser.parse_args(["check", "--fs-type", "xfs", "--timeout", "9"])
        assert args.fs_type == "xfs"
        assert args.timeout == 9.0
