"""Adapter exposing any leveled logger through the common logging interface."""


class LoggerPanic(RuntimeError):
    """Raised after a message is logged at panic level."""


class LoggerAdapter:
    """Forwards every call to a wrapped logger with the same method names."""

    def __init__(self, logger):
        self._logger = logger

    def debug(self, *args):
        self._logger.debug(*args)

    def debugf(self, format, *args):
        self._logger.debugf(format, *args)

    def info(self, *args):
        self._logger.info(*args)

    def infof(self, format, *args):
        self._logger.infof(format, *args)

    def warn(self, *args):
        self._logger.warn(*args)

    def warnf(self, format, *args):
        self._logger.warnf(format, *args)

    def error(self, *args):
        self._logger.error(*args)

    def errorf(self, format, *args):
        self._logger.errorf(format, *args)

    def fatal(self, *args):
        self._logger.fatal(*args)

    def fatalf(self, format, *args):
        self._logger.fatalf(format, *args)

    def panic(self, *args):
        self._logger.panic(*args)

    def panicf(self, format, *args):
        self._logger.panicf(format, *args)