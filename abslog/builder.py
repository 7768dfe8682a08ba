"""Fluent configuration of a logger instance."""

from . import core
from .backends import logrus_logger, zap_logger
from .levels import (
    DEFAULT_ENCODER_TYPE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGGER_TYPE,
    EncoderType,
    LoggerType,
)


class AbsLogBuilder:
    """Collects logger settings and builds a logger from them."""

    def __init__(self):
        self._log_level = DEFAULT_LOG_LEVEL
        self._logger_gen = None
        self._logger_type = DEFAULT_LOGGER_TYPE
        self._encoder_type = DEFAULT_ENCODER_TYPE
        self._context_key = ""

    def log_level(self, level):
        self._log_level = level
        return self

    def logger_gen(self, generator):
        """Use ``generator(log_level, encoder)`` to create the logger."""
        self._logger_gen = generator
        return self

    def logger_type(self, logger_type):
        self._logger_type = logger_type
        return self

    def encoder_type(self, encoder_type):
        self._encoder_type = encoder_type
        return self

    def context_key(self, key):
        """Set the global context key at build time; empty leaves it unchanged."""
        self._context_key = key
        return self

    def build(self):
        """Create the logger described by the collected settings."""
        if self._encoder_type not in (EncoderType.CONSOLE, EncoderType.JSON):
            raise ValueError(f"Invalid encoder type: {self._encoder_type}")
        if self._context_key != "":
            core.set_ctx_key(self._context_key)
        if self._logger_gen is None:
            if self._logger_type == LoggerType.ZAP:
                self._logger_gen = zap_logger
            elif self._logger_type == LoggerType.LOGRUS:
                self._logger_gen = logrus_logger
            else:
                raise ValueError(
                    f"AbsLog type '{int(self._logger_type)}' is not supported")
        return self._logger_gen(self._log_level, self._encoder_type)

    def build_and_set_as_global(self):
        """Build the logger and install it as the global one."""
        logger = self.build()
        core.set_logger(logger)
        return logger


def get_abs_log_builder():
    """Return a builder holding the default settings."""
    return AbsLogBuilder()