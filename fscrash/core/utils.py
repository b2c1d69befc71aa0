# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# fscrash/core/utils.py
from __future__ import annotations

import json
import shlex
from typing import Any, List, Optional


class U:
    @staticmethod
    def which(prog: str) -> Optional[str]:
        from shutil import which as _which
        return _which(prog)

    @staticmethod
    def json_dump(obj: Any) -> str:
        try:
            return json.dumps(obj, indent=2, sort_keys=True, default=str)
        except Exception:
            return repr(obj)

    @staticmethod
    def split_cmd(cmd: str) -> List[str]:
        return shlex.split(cmd)

    @staticmethod
    def pretty_cmd(argv: List[str]) -> str:
        return " ".join(shlex.quote(x) for x in argv)
