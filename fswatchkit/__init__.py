"""Building blocks for file system watchers: definitions, UTF conversions, file system and system helpers."""

__version__ = "0.1.0"

__all__ = ["definitions", "system", "utf8", "utf16", "utf32", "filesystem"]