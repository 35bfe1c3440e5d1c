"""
Custom exceptions for archivelink.
"""


class ArchiveLinkError(Exception):
    """Base exception class for all archivelink errors."""
    pass


class InvalidURLError(ArchiveLinkError, ValueError):
    """Raised when a selection is not an absolute URL."""
    pass


class InvalidOutputPathError(ArchiveLinkError, ValueError):
    """Raised when the output folder is not an existing directory."""
    pass
