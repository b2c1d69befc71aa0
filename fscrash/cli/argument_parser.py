# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/cli/argument_parser.py
from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from ..config.config_loader import Config
from ..core.exceptions import ConfigError
from ..core.logger import Log, c
from ..core.utils import U
from ..fs.registry import supported_fs_types

YAML_EXAMPLE = """\
  # harness.yaml
  harness:
    fs_type: ext4
    device: /dev/loop0
    timeout: 600

  fscrash --config harness.yaml check --format
"""


class HelpFormatter(argparse.RawDescriptionHelpFormatter, argparse.ArgumentDefaultsHelpFormatter):
    """Combines raw description formatting with default value display in help."""


def _add_global_config_logging(p: argparse.ArgumentParser) -> None:
    g = p.add_argument_group(c("Config / logging", "cyan", ["bold"]))
    g.add_argument("--config", action="append", default=[], help="YAML/JSON config file (repeatable, later wins).")
    g.add_argument("-v", "--verbose", action="count", default=0, help="More output (-vv debug, -vvv trace).")
    g.add_argument("-q", "--quiet", action="count", default=0, help="Less output (-q warnings, -qq errors).")
    g.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file.")
    g.add_argument("--json-logs", dest="json_logs", action="store_true", help="Emit NDJSON logs.")
    g.add_argument("--dump-config", action="store_true", help="Print merged config and exit.")


def _add_fs_type(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--fs-type",
        dest="fs_type",
        default=None,
        help=f"Filesystem under test ({', '.join(supported_fs_types())}).",
    )


def _add_device(p: argparse.ArgumentParser) -> None:
    p.add_argument("--device", default=None, help="Block device (or image) to format/check.")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fscrash",
        description=c("fscrash: filesystem adaptation layer for crash-consistency testing", "green", ["bold"]),
        formatter_class=HelpFormatter,
        epilog=c("YAML example:\n", "cyan", ["bold"]) + c(YAML_EXAMPLE, "cyan"),
    )
    _add_global_config_logging(p)

    sub = p.add_subparsers(dest="cmd", metavar="COMMAND")
    sub.required = True

    sub.add_parser("list", help="Show supported filesystems and their tools.", formatter_class=HelpFormatter)

    sp = sub.add_parser("commands", help="Print mkfs/fsck command lines and mount options.", formatter_class=HelpFormatter)
    _add_fs_type(sp)
    _add_device(sp)

    sp = sub.add_parser("classify", help="Classify raw checker exit statuses.", formatter_class=HelpFormatter)
    _add_fs_type(sp)
    sp.add_argument("rc", nargs="+", type=int, help="Raw exit status(es) of the checker.")
    sp.add_argument("--json", action="store_true", help="Machine-readable output.")

    sp = sub.add_parser("check", help="Run the checker against a device and classify the result.", formatter_class=HelpFormatter)
    _add_fs_type(sp)
    _add_device(sp)
    sp.add_argument("--format", dest="format", action="store_true", help="Run mkfs before checking.")
    sp.add_argument("--dry-run", dest="dry_run", action="store_true", help="Log commands without running them.")
    sp.add_argument("--timeout", type=float, default=None, help="Per-command timeout in seconds.")
    sp.add_argument("--json", action="store_true", help="Machine-readable output.")

    return p


def _build_preparser() -> argparse.ArgumentParser:
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    pre.add_argument("--config", action="append", default=[])
    pre.add_argument("-v", "--verbose", action="count", default=0)
    pre.add_argument("-q", "--quiet", action="count", default=0)
    pre.add_argument("--log-file", dest="log_file", default=None)
    pre.add_argument("--json-logs", dest="json_logs", action="store_true")
    pre.add_argument("--dump-config", action="store_true")
    return pre


def validate_args(args: argparse.Namespace) -> None:
    if args.cmd in ("commands", "classify", "check") and not getattr(args, "fs_type", None):
        raise ConfigError(msg="No filesystem type given (use --fs-type or fs_type in config)")
    if args.cmd in ("commands", "check") and not getattr(args, "device", None):
        raise ConfigError(msg="No device given (use --device or device in config)")
    timeout = getattr(args, "timeout", None)
    if timeout is not None and float(timeout) <= 0:
        raise ConfigError(msg=f"--timeout must be positive, got {timeout}")


def parse_args_with_config(
    argv: Optional[Sequence[str]] = None,
    logger: Optional[logging.Logger] = None,
) -> Tuple[argparse.Namespace, Dict[str, Any], logging.Logger]:
    """
    Flow:
      Phase 0: parse ONLY global flags needed to locate config/logging
      Phase 1: load+merge config files
      Phase 2: apply config as defaults onto the parser
      Phase 3: full parse to get final args
      Phase 4: validate
    """
    import sys

    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    parser = build_parser()

    pre = _build_preparser()
    args0, _rest = pre.parse_known_args(argv)

    if logger is None:
        logger = Log.setup(
            args0.verbose,
            args0.log_file,
            quiet=args0.quiet,
            json_logs=args0.json_logs,
        )

    conf: Dict[str, Any] = {}
    if args0.config:
        cfgs = Config.expand_configs(logger, args0.config)
        conf = Config.load_many(logger, cfgs)

    if args0.dump_config:
        print(U.json_dump(conf))
        raise SystemExit(0)

    Config.apply_as_defaults(logger, parser, conf)

    args = parser.parse_args(argv)
    validate_args(args)
    return args, conf, logger
