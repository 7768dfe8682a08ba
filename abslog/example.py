"""Demonstration of switching backends and logging with context."""

from . import core
from .builder import get_abs_log_builder
from .levels import LoggerType, LogLevel


def print_from_other_package():
    """Log a map-valued context at every level below fatal."""
    ctx = {core.get_ctx_key(): {"id": "1234567", "name": "John Doe", "age": 30}}
    core.debug_ctx(ctx, "Default (Zap) Debug with context from other package")
    core.info_ctx(ctx, "Default (Zap) Info with context from other package")
    core.warn_ctx(ctx, "Default (Zap) Warn with context from other package")
    core.error_ctx(ctx, "Default (Zap) Error with context from other package")


def _log_all(label, with_context=None):
    suffix = "with context" if with_context is not None else "global"
    if with_context is None:
        core.debug(f"{label} Debug {suffix}")
        core.info(f"{label} Info {suffix}")
        core.warn(f"{label} Warn {suffix}")
        core.error(f"{label} Error {suffix}")
    else:
        core.debug_ctx(with_context, f"{label} Debug {suffix}")
        core.info_ctx(with_context, f"{label} Info {suffix}")
        core.warn_ctx(with_context, f"{label} Warn {suffix}")
        core.error_ctx(with_context, f"{label} Error {suffix}")
    print()


def main(argv=None):
    """Run the demonstration."""
    key = core.get_ctx_key()

    _log_all("Default (Zap)")
    _log_all("Default (Zap)", {key: {"id": "1234567", "name": "John Doe", "age": 30}})

    print_from_other_package()

    core.set_logger_type(LoggerType.LOGRUS)
    _log_all("Set By Type Logrus")
    _log_all("Logrus", {key: ["id: 1234567", "name: John Doe", "age: 30"]})

    core.set_logger_type(LoggerType.ZAP)
    _log_all("Set By Type Zap")
    _log_all("Zap", {key: "id: 1234567, name: John Doe, age: 30"})

    (get_abs_log_builder().logger_type(LoggerType.LOGRUS)
     .log_level(LogLevel.INFO).build_and_set_as_global())
    _log_all("Set By Builder Logrus")

    (get_abs_log_builder().logger_type(LoggerType.ZAP)
     .log_level(LogLevel.INFO).build_and_set_as_global())
    _log_all("Set By Builder Zap")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())