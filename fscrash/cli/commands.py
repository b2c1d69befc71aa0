# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/cli/commands.py
from __future__ import annotations

import argparse
import json
import logging
from typing import Callable, Dict

from rich.console import Console
from rich.table import Table

from ..core.exceptions import ConfigError
from ..fs.outcome import Outcome
from ..fs.registry import require, supported_fs_types
from ..harness.executor import ShellExecutor
from ..harness.runner import CheckReport, FsckRunner

_OUTCOME_STYLE = {
    Outcome.CLEAN: "green",
    Outcome.FIXED: "cyan",
    Outcome.CHECK_UNFIXED: "yellow",
    Outcome.CHECK: "red",
    Outcome.OTHER: "magenta",
}


def _console() -> Console:
    return Console(highlight=False)


def cmd_list(args: argparse.Namespace, logger: logging.Logger) -> int:
    table = Table(title="Supported filesystems")
    table.add_column("fs type")
    table.add_column("mkfs tool")
    table.add_column("fsck tool")
    table.add_column("auto-fix")
    table.add_column("post-replay mount options")

    for token in supported_fs_types():
        fs = require(token)
        table.add_row(
            fs.get_fs_type_string(),
            fs.mkfs_tool,
            fs.fsck_tool,
            "yes" if fs.auto_fix else "no",
            fs.get_post_replay_mount_options() or "-",
        )
    _console().print(table)
    return 0


def cmd_commands(args: argparse.Namespace, logger: logging.Logger) -> int:
    fs = require(args.fs_type)
    print(f"mkfs: {fs.get_mkfs_command(args.device)}")
    print(f"mount options: {fs.get_post_replay_mount_options()}")
    print(f"fsck: {fs.get_fsck_command(args.device)}")
    return 0


def cmd_classify(args: argparse.Namespace, logger: logging.Logger) -> int:
    fs = require(args.fs_type)
    outcomes = [(rc, fs.classify(rc)) for rc in args.rc]

    if args.json:
        print(json.dumps([{"rc": rc, "outcome": o.label, "passed": o.passed} for rc, o in outcomes]))
    else:
        con = _console()
        for rc, o in outcomes:
            con.print(f"{rc}\t[{_OUTCOME_STYLE[o]}]{o.label}[/]")

    worst = Outcome.worst(o for _, o in outcomes)
    logger.debug("Worst outcome for %s: %s", fs.get_fs_type_string(), worst.label)
    return 0 if worst.passed else 1


def cmd_check(args: argparse.Namespace, logger: logging.Logger) -> int:
    fs = require(args.fs_type)
    executor = ShellExecutor(logger, timeout=args.timeout, dry_run=args.dry_run)
    runner = FsckRunner(fs, executor, logger)

    if not args.dry_run:
        missing = runner.missing_tools()
        if missing:
            raise ConfigError(
                msg=f"Missing tools for {fs.get_fs_type_string()}: {', '.join(missing)}",
                context={"fs_type": fs.get_fs_type_string()},
            )

    if args.format:
        runner.format(args.device)

    report = CheckReport()
    report.add(runner.check(args.device))
    logger.info("Post-replay mount options: %s", runner.mount_options() or "(defaults)")

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        table = Table(title=f"fsck report ({fs.get_fs_type_string()})")
        table.add_column("device")
        table.add_column("rc", justify="right")
        table.add_column("outcome")
        table.add_column("seconds", justify="right")
        for r in report.results:
            table.add_row(
                r.device,
                str(r.rc),
                f"[{_OUTCOME_STYLE[r.outcome]}]{r.outcome.label}[/]",
                f"{r.duration_s:.2f}",
            )
        _console().print(table)

    return 0 if report.passed() else 1


COMMANDS: Dict[str, Callable[[argparse.Namespace, logging.Logger], int]] = {
    "list": cmd_list,
    "commands": cmd_commands,
    "classify": cmd_classify,
    "check": cmd_check,
}
