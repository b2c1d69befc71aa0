# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/harness/executor.py
from __future__ import annotations

import logging
import subprocess
from typing import Optional, Protocol

from ..core.exceptions import ExecutionError
from ..core.utils import U

# Shell conventions for "command not found" and "found but not executable".
RC_NOT_FOUND = 127
RC_CANNOT_EXECUTE = 126


class Executor(Protocol):
    """Runs one generated command line and returns its raw exit status."""

    def __call__(self, command: str) -> int:
        ...


class ShellExecutor:
    """
    Run generated command lines with subprocess (no shell).

    - dry_run=True logs the command and reports success without running it
    - a missing executable is reported as rc 127, any other launch failure
      (permissions, exec format) as rc 126
    - checker output is decoded with errors="replace"; a corrupted filesystem
      can make a checker print arbitrary bytes
    - a timeout raises ExecutionError
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        *,
        timeout: Optional[float] = None,
        dry_run: bool = False,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout
        self.dry_run = bool(dry_run)

    def __call__(self, command: str) -> int:
        argv = U.split_cmd(command)
        if not argv:
            raise ExecutionError(msg="Refusing to run an empty command")

        pretty = U.pretty_cmd(argv)
        if self.dry_run:
            self.logger.info("DRY-RUN: %s", pretty)
            return 0

        self.logger.debug("Running: %s", pretty)
        try:
            cp = subprocess.run(
                argv,
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError:
            self.logger.warning("Command not found: %s", argv[0])
            return RC_NOT_FOUND
        except OSError as e:
            self.logger.warning("Cannot execute %s: %s", argv[0], e)
            return RC_CANNOT_EXECUTE
        except subprocess.TimeoutExpired as e:
            raise ExecutionError(
                msg=f"Timed out after {self.timeout}s: {pretty}",
                cause=e,
                context={"command": command, "timeout": self.timeout},
            )

        if cp.stdout:
            self.logger.debug("stdout: %s", cp.stdout.strip())
        if cp.stderr:
            self.logger.debug("stderr: %s", cp.stderr.strip())

        level = logging.DEBUG if cp.returncode == 0 else logging.WARNING
        self.logger.log(level, "rc=%d: %s", cp.returncode, pretty)
        return cp.returncode
