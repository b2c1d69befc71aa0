# SPDX-License-Identifier: LGPL-3.0-or-later
#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# fscrash/__main__.py
from __future__ import annotations

import sys
import traceback
from typing import Optional, Sequence

from .cli.argument_parser import parse_args_with_config
from .cli.commands import COMMANDS
from .core.exceptions import FsCrashError, format_exception_for_cli


def _print_stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def _safe_log(logger, level: str, msg: str) -> None:
    if logger is None:
        _print_stderr(msg)
        return
    getattr(logger, level)(msg)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logger = None

    # Phase 1: parse (config errors can happen here)
    try:
        args, _conf, logger = parse_args_with_config(argv)
    except FsCrashError as e:
        _safe_log(logger, "error", f"💥 {format_exception_for_cli(e)}")
        return e.code
    except KeyboardInterrupt:
        _safe_log(logger, "warning", "Interrupted by user (Ctrl+C).")
        return 130

    # Phase 2: run the subcommand
    verbose = getattr(args, "verbose", 0)
    try:
        return COMMANDS[args.cmd](args, logger)
    except FsCrashError as e:
        _safe_log(logger, "error", format_exception_for_cli(e, verbose=verbose))
        return e.code
    except KeyboardInterrupt:
        _safe_log(logger, "warning", "Interrupted by user (Ctrl+C).")
        return 130
    except Exception as e:
        _safe_log(logger, "error", f"💥 UNHANDLED {type(e).__name__}: {e}")
        _safe_log(logger, "debug", traceback.format_exc())
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
