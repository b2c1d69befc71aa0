# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/harness/runner.py
"""
Driver-side glue between a filesystem variant and whatever actually runs
commands.

The variant produces command text and classifies exit statuses; the executor
runs the text. FsckRunner wires the two together and records what happened.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.exceptions import ExecutionError
from ..core.logger import Log
from ..core.utils import U
from ..fs.outcome import Outcome
from ..fs.registry import FsSpecific
from .executor import Executor


@dataclass(frozen=True)
class CheckResult:
    fs_type: str
    device: str
    command: str
    rc: int
    outcome: Outcome
    duration_s: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome.passed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fs_type": self.fs_type,
            "device": self.device,
            "command": self.command,
            "rc": self.rc,
            "outcome": self.outcome.label,
            "passed": self.passed,
            "duration_s": round(self.duration_s, 3),
        }


@dataclass
class CheckReport:
    results: List[CheckResult] = field(default_factory=list)

    def add(self, result: CheckResult) -> CheckResult:
        self.results.append(result)
        return result

    def worst(self) -> Outcome:
        return Outcome.worst(r.outcome for r in self.results)

    def passed(self) -> bool:
        return self.worst().passed

    def counts(self) -> Dict[str, int]:
        c = Counter(r.outcome.label for r in self.results)
        return {o.label: c.get(o.label, 0) for o in Outcome}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed(),
            "worst": self.worst().label,
            "counts": self.counts(),
            "results": [r.to_dict() for r in self.results],
        }


class FsckRunner:
    def __init__(
        self,
        fs: FsSpecific,
        executor: Executor,
        logger: Optional[logging.Logger] = None,
    ):
        self.fs = fs
        self.executor = executor
        self.logger = logger or logging.getLogger(__name__)

    @property
    def fs_type(self) -> str:
        return self.fs.get_fs_type_string()

    def missing_tools(self) -> List[str]:
        """External executables this variant needs that are not on PATH."""
        tools = dict.fromkeys([self.fs.mkfs_tool, self.fs.fsck_tool])
        return [t for t in tools if U.which(t) is None]

    def mount_options(self) -> str:
        return self.fs.get_post_replay_mount_options()

    def format(self, device: str) -> int:
        cmd = self.fs.get_mkfs_command(device)
        Log.step(self.logger, "Formatting", fs=self.fs_type, device=device)
        rc = int(self.executor(cmd))
        if rc != 0:
            raise ExecutionError(
                msg=f"mkfs failed with rc={rc}",
                context={"fs_type": self.fs_type, "device": device, "command": cmd},
            )
        return rc

    def check(self, device: str) -> CheckResult:
        cmd = self.fs.get_fsck_command(device)
        Log.trace(self.logger, "fsck command: %s", cmd)

        t0 = time.monotonic()
        rc = int(self.executor(cmd))
        elapsed = time.monotonic() - t0

        outcome = self.fs.classify(rc)
        result = CheckResult(
            fs_type=self.fs_type,
            device=device,
            command=cmd,
            rc=rc,
            outcome=outcome,
            duration_s=elapsed,
        )

        if outcome.passed:
            Log.ok(self.logger, f"fsck {outcome.label}", fs=self.fs_type, device=device, rc=rc)
        else:
            Log.warn(self.logger, f"fsck {outcome.label}", fs=self.fs_type, device=device, rc=rc)
        return result
