# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/fs/outcome.py
"""
Checker outcome taxonomy.

Every filesystem checker reports its result through its own exit-code
contract. Each variant folds that contract into one of these values so the
rest of the harness can decide pass/fail without knowing which checker ran.
Members are ordered best to worst; comparisons follow severity.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional


class Outcome(IntEnum):
    CLEAN = 0  # no issues found
    FIXED = 1  # issues found and repaired
    CHECK_UNFIXED = 2  # issues found, checker did not repair them
    CHECK = 3  # aborted / operational error / needs a human
    OTHER = 4  # exit status matched nothing known

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def passed(self) -> bool:
        return self <= Outcome.FIXED

    @property
    def failed(self) -> bool:
        return not self.passed

    def __str__(self) -> str:
        return self.label

    @classmethod
    def worst(cls, outcomes: Iterable["Outcome"]) -> "Outcome":
        """Most severe outcome of a run; CLEAN when nothing ran."""
        return max(outcomes, default=cls.CLEAN)

    @classmethod
    def from_label(cls, label: str) -> Optional["Outcome"]:
        s = (label or "").strip().lower().replace("-", "_")
        for member in cls:
            if member.label == s:
                return member
        return None
