"""
Exception types raised by nestpath.
"""


class NestpathError(Exception):
    """Base class for all nestpath errors."""


class InvalidArgumentError(NestpathError, ValueError):
    """An argument is outside what the operation can satisfy."""


class UnsupportedFormatError(NestpathError, KeyError):
    """No document adapter is registered for the requested format."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message otherwise
        return str(self.args[0]) if self.args else ""
