"""Exception types raised by the domain layer."""

from __future__ import annotations


class StaffctlError(Exception):
    """Base class for all staffctl failures that callers are expected to report."""


class SerializeError(StaffctlError):
    """A company snapshot could not be read, written, or resolved.

    Raised for malformed files, entity range violations inside a file,
    duplicate keys, and staff records whose department code is unknown.
    """
