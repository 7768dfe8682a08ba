"""Log levels, output encoders and backend kinds."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    PANIC = 5
    FATAL = 6


class EncoderType(IntEnum):
    """Output format of log lines."""

    CONSOLE = 1
    JSON = 2


class LoggerType(IntEnum):
    """Logging backend flavour."""

    ZAP = 1
    LOGRUS = 2


DEFAULT_LOG_LEVEL = LogLevel.INFO
DEFAULT_LOGGER_TYPE = LoggerType.ZAP
DEFAULT_ENCODER_TYPE = EncoderType.CONSOLE