# SPDX-License-Identifier: LGPL-3.0-or-later
# fscrash/core/logger.py
"""
Project logger.

Console lines look like `12:00:01 ✅ INFO     fsck clean fs=ext4 rc=0`;
`--json-logs` switches every handler to one JSON object per line.
Structured fields travel as `extra={"ctx": {...}}` and are appended as k=v.
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from termcolor import colored as _colored

TRACE = 5
if not hasattr(logging, "TRACE"):
    logging.TRACE = TRACE  # type: ignore[attr-defined]
    logging.addLevelName(TRACE, "TRACE")


def _logger_trace(self: logging.Logger, msg: str, *args, **kwargs) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)


if not hasattr(logging.Logger, "trace"):
    logging.Logger.trace = _logger_trace  # type: ignore[attr-defined]

_LEVEL_EMOJI = {
    "TRACE": "🧬",
    "DEBUG": "🔍",
    "INFO": "✅",
    "WARNING": "⚠️",
    "ERROR": "💥",
    "CRITICAL": "🧨",
}
_LEVEL_COLOR = {
    "TRACE": "cyan",
    "DEBUG": "blue",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red",
}


def c(text: str, color: Optional[str] = None, attrs: Optional[List[str]] = None, *, enable: bool = True) -> str:
    """Colorize text with termcolor when enabled."""
    if not enable or not color:
        return text
    return _colored(text, color=color, attrs=attrs or [])


def _stderr_is_tty() -> bool:
    isatty = getattr(sys.stderr, "isatty", None)
    return bool(isatty and isatty())


def _unicode_ok() -> bool:
    enc = getattr(sys.stderr, "encoding", None) or "utf-8"
    try:
        "✅".encode(enc)
    except (UnicodeEncodeError, LookupError):
        return False
    return True


def _ctx_suffix(record: logging.LogRecord) -> str:
    ctx = getattr(record, "ctx", None)
    if not ctx:
        return ""
    pairs = sorted((str(k), str(v).replace("\n", "\\n")) for k, v in dict(ctx).items())
    return " " + " ".join(f"{k}={v}" for k, v in pairs)


@dataclass(frozen=True)
class LogStyle:
    color: bool = True
    unicode: bool = True
    detailed: bool = False  # pid + module:line + milliseconds


class EmojiFormatter(logging.Formatter):
    def __init__(self, style: LogStyle):
        super().__init__()
        self._style = style

    def format(self, record: logging.LogRecord) -> str:
        dt = _dt.datetime.fromtimestamp(record.created)
        ts = dt.strftime("%H:%M:%S.%f")[:-3] if self._style.detailed else dt.strftime("%H:%M:%S")
        mark = _LEVEL_EMOJI.get(record.levelname, "•") if self._style.unicode else "·"

        color_ok = self._style.color and _stderr_is_tty()
        color = _LEVEL_COLOR.get(record.levelname)
        lvl = c(f"{record.levelname:<8}", color, enable=color_ok)
        msg = record.getMessage()
        if record.levelno >= logging.WARNING:
            msg = c(msg, color, ["bold"], enable=color_ok)

        where = f" [pid={os.getpid()} {record.module}:{record.lineno}]" if self._style.detailed else ""
        line = f"{ts} {mark} {lvl}{where} {msg}{_ctx_suffix(record)}"
        if record.exc_info:
            tb = self.formatException(record.exc_info)
            line += "\n" + "\n".join("  " + ln for ln in tb.splitlines())
        return line


class JsonFormatter(logging.Formatter):
    """NDJSON: one object per record, for CI and log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        obj: dict = {
            "ts": _dt.datetime.fromtimestamp(record.created, tz=_dt.timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "lineno": record.lineno,
        }
        ctx = getattr(record, "ctx", None)
        if ctx:
            obj["ctx"] = dict(ctx)
        if record.exc_info:
            obj["traceback"] = self.formatException(record.exc_info)
        return json.dumps(obj, ensure_ascii=False, default=str)


class Log:
    @staticmethod
    def _level_from_flags(verbose: int, quiet: int) -> int:
        """
        -q: WARNING, -qq: ERROR, -vv: DEBUG, -vvv: TRACE, otherwise INFO.
        Quiet wins over verbose if both are set.
        """
        if quiet >= 2:
            return logging.ERROR
        if quiet == 1:
            return logging.WARNING
        if verbose >= 3:
            return TRACE
        if verbose >= 2:
            return logging.DEBUG
        return logging.INFO

    @staticmethod
    def step(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.info("➡️  %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def ok(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.info("✅ %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def warn(logger: logging.Logger, msg: str, **ctx: Any) -> None:
        logger.warning("⚠️  %s", msg, extra={"ctx": ctx} if ctx else None)

    @staticmethod
    def trace(logger: logging.Logger, msg: str, *args: Any) -> None:
        logger.trace(msg, *args)  # type: ignore[attr-defined]

    @staticmethod
    def setup(
        verbose: int = 0,
        log_file: Optional[str] = None,
        *,
        quiet: int = 0,
        json_logs: bool = False,
        logger_name: str = "fscrash",
    ) -> logging.Logger:
        """
        Configure and return the project's logger. Calling it again replaces
        the handlers from the previous call.
        """
        logger = logging.getLogger(logger_name)
        logger.propagate = False

        level = Log._level_from_flags(verbose, quiet)
        logger.setLevel(level)

        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        unicode_ok = _unicode_ok()
        handlers: List[logging.Handler] = []

        sh = logging.StreamHandler(stream=sys.stderr)
        sh.setFormatter(JsonFormatter() if json_logs else EmojiFormatter(LogStyle(unicode=unicode_ok, detailed=verbose >= 3)))
        handlers.append(sh)

        if log_file:
            fp = Path(log_file).expanduser().resolve()
            fp.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(fp, encoding="utf-8")
            fh.setFormatter(JsonFormatter() if json_logs else EmojiFormatter(LogStyle(color=False, unicode=unicode_ok, detailed=True)))
            handlers.append(fh)

        for h in handlers:
            h.setLevel(level)
            logger.addHandler(h)

        logger.debug("Logger initialized (level=%s)", logging.getLevelName(level))
        return logger
