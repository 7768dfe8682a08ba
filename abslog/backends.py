"""Zap-style and logrus-style logger backends built on the logging module."""

import json
import logging
import os
import re
import sys
import time
import traceback
from datetime import datetime

from .adapter import LoggerAdapter, LoggerPanic
from .levels import EncoderType, LogLevel

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

_ZAP_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.PANIC: 45,
    LogLevel.FATAL: logging.CRITICAL,
}

# Logrus treats panic as more severe than fatal.
_LOGRUS_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.PANIC: 60,
}

_LOG_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _to_level(log_level):
    try:
        return LogLevel(log_level)
    except ValueError:
        return LogLevel.INFO


def zap_level(log_level):
    """Logging level number used by the zap-style backend; unknown means info."""
    return _ZAP_LEVELS[_to_level(log_level)]


def logrus_level(log_level):
    """Logging level number used by the logrus-style backend; unknown means info."""
    return _LOGRUS_LEVELS[_to_level(log_level)]


def _go_str(value):
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sprint(args):
    """Join operands, adding spaces between those where neither is a string."""
    if not args:
        return ""
    out = [_go_str(args[0])]
    for prev, cur in zip(args, args[1:]):
        if not isinstance(prev, str) and not isinstance(cur, str):
            out.append(" ")
        out.append(_go_str(cur))
    return "".join(out)


_VERB = re.compile(r"%([-+# 0]*)(\d*)(?:\.(\d+))?([a-zA-Z%])")


def _sprintf(fmt, args):
    """Format with printf-style verbs (%v, %s, %d, %q, %f, %t, %x ...)."""
    remaining = iter(args)
    missing = object()

    def repl(match):
        flags, width, prec, verb = match.groups()
        if verb == "%":
            return "%"
        value = next(remaining, missing)
        if value is missing:
            return f"%!{verb}(MISSING)"
        if verb in "vst":
            text = _go_str(value)
        elif verb == "q":
            text = json.dumps(str(value))
        elif verb in "dxXobeEfFgG":
            spec = verb if verb != "v" else "s"
            if verb in "fFeEgG" and prec:
                spec = f".{prec}{verb}"
            try:
                text = format(value, spec)
            except (TypeError, ValueError):
                return f"%!{verb}({type(value).__name__}={_go_str(value)})"
        else:
            text = _go_str(value)
        if width:
            text = text.ljust(int(width)) if "-" in flags else text.rjust(
                int(width), "0" if "0" in flags else " ")
        return text

    result = _VERB.sub(repl, fmt)
    extra = list(remaining)
    if extra:
        result += "%!(EXTRA " + ", ".join(
            f"{type(v).__name__}={_go_str(v)}" for v in extra) + ")"
    return result


def _caller_frame():
    frame = sys._getframe(1)
    while frame is not None and os.path.abspath(
            frame.f_code.co_filename).startswith(_PACKAGE_DIR):
        frame = frame.f_back
    return frame


def _short_caller(record):
    path = record.pathname.replace(os.sep, "/")
    return "/".join(path.split("/")[-2:]) + f":{record.lineno}"


def _level_name(record):
    return getattr(record, "abs_level", record.levelname.lower())


class _SysStreamHandler(logging.Handler):
    """Writes to sys.stdout or sys.stderr, looked up at emit time."""

    def __init__(self, to_stderr):
        super().__init__()
        self._to_stderr = to_stderr

    def emit(self, record):
        try:
            stream = sys.stderr if self._to_stderr else sys.stdout
            stream.write(self.format(record) + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


class ZapConsoleFormatter(logging.Formatter):
    """Tab-separated console line: time, level, caller, message."""

    def format(self, record):
        stamp = time.strftime(_LOG_TIME_FORMAT, time.localtime(record.created))
        line = "\t".join([
            stamp, _level_name(record).upper(), _short_caller(record),
            record.getMessage(),
        ])
        if record.stack_info:
            line += "\n" + record.stack_info
        return line


class ZapJsonFormatter(logging.Formatter):
    """One JSON object per line with zap-style keys."""

    def format(self, record):
        entry = {
            "severity": _level_name(record).upper(),
            "timestamp": time.strftime(
                _LOG_TIME_FORMAT, time.localtime(record.created)),
            "caller": _short_caller(record),
            "message": record.getMessage(),
        }
        if record.stack_info:
            entry["trace"] = record.stack_info
        return json.dumps(entry, separators=(",", ":"))


_SAFE = re.compile(r"^[A-Za-z0-9\-._/@^+]*$")


def _logrus_quote(value):
    return value if _SAFE.match(value) else json.dumps(value)


class LogrusTextFormatter(logging.Formatter):
    """key=value text line with time, level, msg, func and file."""

    def format(self, record):
        stamp = datetime.fromtimestamp(record.created).astimezone().isoformat(
            timespec="seconds")
        fields = [
            ("time", stamp),
            ("level", _level_name(record)),
            ("msg", record.getMessage()),
            ("func", record.funcName or ""),
            ("file", f"{record.pathname}:{record.lineno}"),
        ]
        return " ".join(f"{k}={_logrus_quote(v)}" for k, v in fields)


_STACKDRIVER_SEVERITY = {
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "error": "ERROR",
    "fatal": "CRITICAL",
    "panic": "ALERT",
}


class StackdriverFormatter(logging.Formatter):
    """JSON entry in the layout of a cloud logging agent."""

    def format(self, record):
        entry = {
            "severity": _STACKDRIVER_SEVERITY.get(_level_name(record), "DEFAULT"),
            "message": record.getMessage(),
            "timestamp": datetime.fromtimestamp(
                record.created).astimezone().isoformat(),
            "sourceLocation": {
                "filePath": record.pathname,
                "lineNumber": record.lineno,
                "functionName": record.funcName,
            },
        }
        return json.dumps(entry, separators=(",", ":"))


class _Backend:
    """Leveled logger with plain and printf-style methods."""

    def __init__(self, logger, levels, stack_from=None):
        self._logger = logger
        self._levels = levels
        self._stack_from = stack_from

    def _emit(self, level, message):
        levelno = self._levels[level]
        if not self._logger.isEnabledFor(levelno):
            return
        frame = _caller_frame()
        if frame is not None:
            path, line, func = (frame.f_code.co_filename, frame.f_lineno,
                                frame.f_code.co_name)
        else:
            path, line, func = "(unknown file)", 0, "(unknown function)"
        sinfo = None
        if self._stack_from is not None and levelno >= self._stack_from and frame:
            sinfo = "".join(traceback.format_stack(frame)).rstrip("\n")
        record = self._logger.makeRecord(
            self._logger.name, levelno, path, line, message, (), None, func,
            {"abs_level": level.name.lower()}, sinfo)
        self._logger.handle(record)

    def debug(self, *args):
        self._emit(LogLevel.DEBUG, _sprint(args))

    def debugf(self, format, *args):
        self._emit(LogLevel.DEBUG, _sprintf(format, args))

    def info(self, *args):
        self._emit(LogLevel.INFO, _sprint(args))

    def infof(self, format, *args):
        self._emit(LogLevel.INFO, _sprintf(format, args))

    def warn(self, *args):
        self._emit(LogLevel.WARN, _sprint(args))

    def warnf(self, format, *args):
        self._emit(LogLevel.WARN, _sprintf(format, args))

    def error(self, *args):
        self._emit(LogLevel.ERROR, _sprint(args))

    def errorf(self, format, *args):
        self._emit(LogLevel.ERROR, _sprintf(format, args))

    def fatal(self, *args):
        self._emit(LogLevel.FATAL, _sprint(args))
        raise SystemExit(1)

    def fatalf(self, format, *args):
        self._emit(LogLevel.FATAL, _sprintf(format, args))
        raise SystemExit(1)

    def panic(self, *args):
        message = _sprint(args)
        self._emit(LogLevel.PANIC, message)
        raise LoggerPanic(message)

    def panicf(self, format, *args):
        message = _sprintf(format, args)
        self._emit(LogLevel.PANIC, message)
        raise LoggerPanic(message)


def _check_encoder(encoder):
    try:
        return EncoderType(encoder)
    except ValueError:
        raise ValueError(f"Encoder type '{encoder}' is not supported") from None


def zap_logger(log_level, encoder):
    """Logger sending below-error output to stdout and the rest to stderr."""
    encoder = _check_encoder(encoder)
    formatter = (ZapConsoleFormatter() if encoder is EncoderType.CONSOLE
                 else ZapJsonFormatter())
    threshold = zap_level(log_level)
    logger = logging.Logger("abslog.zap", logging.NOTSET)
    logger.propagate = False

    out = _SysStreamHandler(to_stderr=False)
    out.addFilter(lambda r: threshold <= r.levelno < logging.ERROR)
    err = _SysStreamHandler(to_stderr=True)
    err.addFilter(lambda r: r.levelno >= logging.ERROR and r.levelno >= threshold)
    for handler in (out, err):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return LoggerAdapter(_Backend(logger, _ZAP_LEVELS, stack_from=logging.ERROR))


def logrus_logger(log_level, encoder):
    """Logger writing every enabled message to stderr."""
    encoder = _check_encoder(encoder)
    formatter = (LogrusTextFormatter() if encoder is EncoderType.CONSOLE
                 else StackdriverFormatter())
    logger = logging.Logger("abslog.logrus", logrus_level(log_level))
    logger.propagate = False
    handler = _SysStreamHandler(to_stderr=True)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return LoggerAdapter(_Backend(logger, _LOGRUS_LEVELS))