"""Process-wide logger, context decoration and level functions."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol, runtime_checkable

from .backends import _go_str, _sprint, logrus_logger, zap_logger
from .levels import (
    DEFAULT_ENCODER_TYPE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGGER_TYPE,
    LoggerType,
)

DEFAULT_CONTEXT_KEY = "abslog"
DEFAULT_CONTEXT_SEPARATOR = " -> "


@runtime_checkable
class AbsLog(Protocol):
    """Leveled logger with plain and printf-style methods."""

    def debug(self, *args: Any) -> None: ...
    def debugf(self, format: str, *args: Any) -> None: ...
    def info(self, *args: Any) -> None: ...
    def infof(self, format: str, *args: Any) -> None: ...
    def warn(self, *args: Any) -> None: ...
    def warnf(self, format: str, *args: Any) -> None: ...
    def error(self, *args: Any) -> None: ...
    def errorf(self, format: str, *args: Any) -> None: ...
    def fatal(self, *args: Any) -> None: ...
    def fatalf(self, format: str, *args: Any) -> None: ...
    def panic(self, *args: Any) -> None: ...
    def panicf(self, format: str, *args: Any) -> None: ...


@dataclass
class _Settings:
    context_key: str = DEFAULT_CONTEXT_KEY
    separator: str = DEFAULT_CONTEXT_SEPARATOR
    logger: Optional[AbsLog] = None


_settings = _Settings()


def set_ctx_key(key):
    """Set the key under which context values are looked up; blank means default."""
    key = key.strip()
    _settings.context_key = key or DEFAULT_CONTEXT_KEY


def get_ctx_key():
    """Return the key under which context values are looked up."""
    return _settings.context_key


def reset_ctx_key():
    """Restore the default context key."""
    _settings.context_key = DEFAULT_CONTEXT_KEY


def get_ctx_separator():
    """Return the text placed between context values and the message."""
    return _settings.separator


def reset_ctx_separator():
    """Restore the default context separator."""
    _settings.separator = DEFAULT_CONTEXT_SEPARATOR


def set_ctx_separator(separator):
    """Set the context separator; a blank one means the default."""
    _settings.separator = separator if separator.strip() else DEFAULT_CONTEXT_SEPARATOR


def set_logger_type(typ):
    """Install a default-configured logger of the given backend type."""
    try:
        typ = LoggerType(typ)
    except ValueError:
        raise ValueError(f"Logger type '{typ}' is not supported") from None
    factory = zap_logger if typ is LoggerType.ZAP else logrus_logger
    set_logger(factory(DEFAULT_LOG_LEVEL, DEFAULT_ENCODER_TYPE))


def set_logger(logger):
    """Make the given logger the one used by the module-level functions."""
    _settings.logger = logger


def get_logger():
    """Return the current global logger, creating the default one if needed."""
    if _settings.logger is None:
        set_logger_type(DEFAULT_LOGGER_TYPE)
    return _settings.logger


def get_ctx_values(ctx):
    """Render the context values stored in ``ctx`` under the current key.

    A mapping renders as ``[k=v, ...]``, a sequence of strings as
    ``[a, b]`` and a string as ``[s]``, each followed by the separator.
    Anything else, or no value, renders as an empty string.
    """
    if ctx is None:
        return ""
    values = ctx.get(_settings.context_key)
    if values is None:
        return ""
    if isinstance(values, str):
        body = values
    elif isinstance(values, Mapping):
        body = ", ".join(f"{k}={_go_str(v)}" for k, v in values.items())
    elif isinstance(values, Sequence) and all(isinstance(v, str) for v in values):
        body = ", ".join(values)
    else:
        return ""
    return f"[{body}]{_settings.separator}"


def _log_ctx(method, ctx, args):
    prefix = get_ctx_values(ctx)
    if prefix:
        method(f"{prefix} {_sprint(args)}")
    else:
        method(*args)


def _log_ctxf(method, ctx, format, args):
    prefix = get_ctx_values(ctx)
    method(f"{prefix} {format}" if prefix else format, *args)


def debug(*args):
    get_logger().debug(*args)


def debugf(format, *args):
    get_logger().debugf(format, *args)


def debug_ctx(ctx, *args):
    _log_ctx(get_logger().debug, ctx, args)


def debug_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().debugf, ctx, format, args)


def info(*args):
    get_logger().info(*args)


def infof(format, *args):
    get_logger().infof(format, *args)


def info_ctx(ctx, *args):
    _log_ctx(get_logger().info, ctx, args)


def info_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().infof, ctx, format, args)


def warn(*args):
    get_logger().warn(*args)


def warnf(format, *args):
    get_logger().warnf(format, *args)


def warn_ctx(ctx, *args):
    _log_ctx(get_logger().warn, ctx, args)


def warn_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().warnf, ctx, format, args)


def error(*args):
    get_logger().error(*args)


def errorf(format, *args):
    get_logger().errorf(format, *args)


def error_ctx(ctx, *args):
    _log_ctx(get_logger().error, ctx, args)


def error_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().errorf, ctx, format, args)


def fatal(*args):
    get_logger().fatal(*args)


def fatalf(format, *args):
    get_logger().fatalf(format, *args)


def fatal_ctx(ctx, *args):
    _log_ctx(get_logger().fatal, ctx, args)


def fatal_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().fatalf, ctx, format, args)


def panic(*args):
    get_logger().panic(*args)


def panicf(format, *args):
    get_logger().panicf(format, *args)


def panic_ctx(ctx, *args):
    _log_ctx(get_logger().panic, ctx, args)


def panic_ctxf(ctx, format, *args):
    _log_ctxf(get_logger().panicf, ctx, format, args)