# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/core/exceptions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _safe_int(x: Any, default: int = 1) -> int:
    try:
        return int(x)
    except (TypeError, ValueError):
        return default


def _clamp_exit_code(code: int) -> int:
    # Process exit codes are 0..255.
    if code < 0:
        return 1
    if code > 255:
        return 255
    return code


def _one_line(s: str, limit: int = 600) -> str:
    s = " ".join((s or "").split())
    return s if len(s) <= limit else (s[: limit - 3] + "...")


def _format_context_compact(ctx: Dict[str, Any]) -> str:
    return ", ".join(f"{k}={ctx[k]!r}" for k in sorted(ctx))


@dataclass(eq=False)
class FsCrashError(Exception):
    """
    Base error for the harness. `code` is the process exit status main()
    returns; `context` carries the fs type / device / command involved.
    """
    code: int = 1
    msg: str = "error"
    cause: Optional[BaseException] = None
    context: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        self.code = _clamp_exit_code(_safe_int(self.code, default=1))
        self.msg = _one_line(self.msg) or self.__class__.__name__
        if self.context is None:
            self.context = {}
        super().__init__(self.msg)
        self.args = (self.msg,)

    def user_message(self, *, include_context: bool = False, include_cause: bool = False) -> str:
        parts = [self.msg]
        if include_context and self.context:
            parts.append(f"[{_one_line(_format_context_compact(self.context))}]")
        if include_cause and self.cause is not None:
            parts.append(f"(cause: {type(self.cause).__name__}: {_one_line(str(self.cause))})")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.user_message()


class Fatal(FsCrashError):
    """User-facing fatal error; main() exits with its code."""
    pass


@dataclass(eq=False)
class ConfigError(Fatal):
    """
    Harness configuration is unusable: bad config file, unsupported filesystem
    type, missing device. Raised before any command is generated.
    """
    code: int = 2


class UnsupportedFilesystemError(ConfigError):
    """A filesystem type token that no variant answers to."""
    pass


class ExecutionError(FsCrashError):
    """
    A generated command could not be run to completion (timeout) or a
    formatting step exited non-zero.
    """
    pass


def unsupported_fs(fs_type: Any, supported: Any) -> UnsupportedFilesystemError:
    return UnsupportedFilesystemError(
        msg=f"Unsupported filesystem type {fs_type!r} (supported: {', '.join(supported)})",
        context={"fs_type": fs_type},
    )


def format_exception_for_cli(e: BaseException, *, verbose: int = 0) -> str:
    """
    One-liner output for CLI.

    verbose=0: just message
    verbose=1: message + compact context (if any)
    verbose>=2: message + context + cause
    """
    if isinstance(e, FsCrashError):
        return e.user_message(
            include_context=(verbose >= 1),
            include_cause=(verbose >= 2),
        )

    if verbose >= 2:
        return f"{type(e).__name__}: {_one_line(str(e))}"
    return _one_line(str(e)) or type(e).__name__
