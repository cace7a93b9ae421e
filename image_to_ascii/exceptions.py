#!/usr/bin/env python3
"""
Image to ASCII Converter - Exceptions
=====================================
Errors raised by the conversion pipeline.
"""


class ConversionError(Exception):
    """Base class for failures that abort a conversion run."""


class DecodeError(ConversionError):
    """The input image could not be turned into an RGB pixel buffer."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class OutputError(ConversionError):
    """The output sink could not be opened, written or flushed."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write {path}: {reason}")
