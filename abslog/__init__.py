"""Logging abstraction with zap-style and logrus-style backends and context-aware helpers."""

__version__ = "3.0.0"

__all__ = ["adapter", "backends", "builder", "core", "example", "levels"]