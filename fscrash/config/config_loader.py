# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/config/config_loader.py
"""
Harness configuration files.

Configs are YAML or JSON mappings. Several files may be given; they are deep
merged in order so later files override earlier ones. Harness keys can live
at the top level or under a `harness:` section:

    harness:
      fs_type: ext4
      device: /dev/loop0
      timeout: 600
"""

from __future__ import annotations

import argparse
import glob
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Sequence

import yaml

from ..core.exceptions import ConfigError

HARNESS_SECTION = "harness"


def _deep_merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


class Config:
    @staticmethod
    def expand_configs(logger: logging.Logger, cfgs: Sequence[str]) -> List[Path]:
        """Expand ~, $VARS and globs; keep order, drop duplicates."""
        out: List[Path] = []
        seen = set()
        for raw in cfgs:
            s = os.path.expandvars(os.path.expanduser(str(raw)))
            matches = sorted(glob.glob(s)) if glob.has_magic(s) else [s]
            if not matches:
                logger.warning("Config glob matched nothing: %s", s)
            for m in matches:
                p = Path(m).resolve()
                if p in seen:
                    continue
                seen.add(p)
                out.append(p)
        return out

    @staticmethod
    def load(logger: logging.Logger, path: Path) -> Dict[str, Any]:
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(msg=f"Cannot read config {path}", cause=e, context={"path": str(path)})

        try:
            if path.suffix.lower() == ".json":
                parsed = json.loads(raw)
            else:
                # YAML is a superset of JSON, so suffix-less files work either way.
                parsed = yaml.safe_load(raw)
        except (ValueError, yaml.YAMLError) as e:
            raise ConfigError(msg=f"Cannot parse config {path}: {e}", cause=e, context={"path": str(path)})

        if parsed is None:
            parsed = {}
        if not isinstance(parsed, dict):
            raise ConfigError(msg=f"Top-level config must be a mapping: {path}", context={"path": str(path)})

        logger.debug("Loaded config %s (%d keys)", path, len(parsed))
        return parsed

    @staticmethod
    def load_many(logger: logging.Logger, paths: Sequence[Path]) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        for p in paths:
            merged = _deep_merge(merged, Config.load(logger, p))
        return merged

    @staticmethod
    def harness_view(conf: Dict[str, Any]) -> Dict[str, Any]:
        """Top-level keys overlaid with the `harness:` section."""
        flat = {k: v for k, v in conf.items() if k != HARNESS_SECTION}
        section = conf.get(HARNESS_SECTION)
        if section is not None and not isinstance(section, dict):
            raise ConfigError(msg=f"'{HARNESS_SECTION}' must be a mapping")
        return _deep_merge(flat, section or {})

    @staticmethod
    def apply_as_defaults(logger: logging.Logger, parser: argparse.ArgumentParser, conf: Dict[str, Any]) -> None:
        """
        Apply config values as argparse defaults so CLI flags still win.
        Keys may use dashes or underscores. Unknown keys are ignored.
        """
        dests = {a.dest for a in parser._actions}
        for sub in parser._actions:
            if isinstance(sub, argparse._SubParsersAction):
                for sp in sub.choices.values():
                    dests.update(a.dest for a in sp._actions)

        defaults: Dict[str, Any] = {}
        for k, v in Config.harness_view(conf).items():
            dest = str(k).replace("-", "_")
            if dest in dests:
                defaults[dest] = v
            else:
                logger.debug("Ignoring unknown config key: %s", k)

        if not defaults:
            return
        parser.set_defaults(**defaults)
        for sub in parser._actions:
            if isinstance(sub, argparse._SubParsersAction):
                for sp in sub.choices.values():
                    sp.set_defaults(**{k: v for k, v in defaults.items() if k in {a.dest for a in sp._actions}})
